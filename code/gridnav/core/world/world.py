import logging
import os
from typing import Dict, FrozenSet

from ...cfg.schema import validate_map_name
from ...utils.io_utils import load_json
from .agents import AgentRecord, AgentStore
from .coordinates import CoordinateMapper
from .obstacles import ObstacleRegistry
from .position import GridPosition


class World:
    """
    This class bundles the terrain, obstacles and agents of a loaded map.
    """
    def __init__(self, mapper: CoordinateMapper, obstacles: ObstacleRegistry = None,
                 agents: AgentStore = None, name: str = "untitled"):
        self.name = validate_map_name(name)
        self.mapper = mapper
        self.obstacles = obstacles if obstacles is not None else ObstacleRegistry()
        self.agents = agents if agents is not None else AgentStore()
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_info(cls, info: Dict) -> 'World':
        """Build a World from parsed map data"""
        name = info.get('name', 'untitled')
        try:
            mapper = CoordinateMapper.from_info(info['terrain'])
        except KeyError as e:
            raise KeyError(f"Map '{name}' is missing terrain key {e}") from None

        world = cls(mapper, ObstacleRegistry(
            GridPosition.from_sequence(p) for p in info.get('obstacles', [])
        ), name=name)

        for agent_info in info.get('agents', []):
            try:
                agent_id = str(agent_info['id'])
                position = GridPosition.from_sequence(agent_info['position'])
            except KeyError as e:
                raise KeyError(f"Agent entry in map '{name}' is missing key {e}") from None
            world.spawn_agent(agent_id, position,
                              speed=agent_info.get('speed'),
                              blocking=agent_info.get('blocking', False))
            if agent_info.get('target') is not None:
                world.agents.request_path(agent_id, GridPosition.from_sequence(agent_info['target']))

        world.logger.info(f"Loaded map '{name}': {mapper.width}x{mapper.height} terrain, "
                          f"{len(world.obstacles)} obstacles, {len(world.agents)} agents")
        return world

    @classmethod
    def from_map_file(cls, filename: str) -> 'World':
        """Initialize World from a JSON map file"""
        if not os.path.exists(filename):
            raise FileNotFoundError(f"Map file '{filename}' not found")
        return cls.from_info(load_json(filename))

    def spawn_agent(self, agent_id: str, position: GridPosition, speed: float = None,
                    blocking: bool = False) -> AgentRecord:
        """Spawn an agent standing on a grid cell"""
        return self.agents.spawn(agent_id, self.mapper.grid_to_world(position), layer=position.layer,
                                 speed=speed, blocking=blocking)

    def grid_position_of(self, agent_id: str) -> GridPosition:
        agent = self.agents.get(agent_id)
        return self.mapper.world_to_grid(agent.position, agent.layer)

    def obstacle_snapshot(self) -> FrozenSet[GridPosition]:
        """Static obstacles plus the cells of blocking agents"""
        return self.obstacles.snapshot(
            self.mapper.world_to_grid(a.position, a.layer) for a in self.agents.blocking_agents()
        )
