"""
Agent records and the store that owns them.

An agent is a plain record. Its path, follower state, pending path request and
blocking marker are optional fields that are attached and removed explicitly
by the navigation systems.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterator, List, Optional

import numpy as np

from .position import GridPosition


@dataclass
class PathRequest:
    """One-shot request to build a path to `target`"""
    target: GridPosition


@dataclass
class PathFollower:
    """Per-agent interpolation state for following a path"""
    speed: float = 1.0
    progress: float = 0.0
    start_position: Optional[np.ndarray] = None

    def reset(self) -> None:
        """Forget the current hop; speed is kept"""
        self.progress = 0.0
        self.start_position = None

    @property
    def is_idle(self) -> bool:
        return self.progress == 0.0 and self.start_position is None


@dataclass
class AgentRecord:
    agent_id: str
    position: np.ndarray
    layer: int = 0
    path: Optional[Deque[GridPosition]] = None
    follower: Optional[PathFollower] = None
    request: Optional[PathRequest] = None
    blocking: bool = False

    def attach_path(self, path: Deque[GridPosition]) -> None:
        self.path = deque(path)

    def detach_path(self) -> None:
        """Stop following: drop the path and leave the follower idle"""
        self.path = None
        if self.follower is not None:
            self.follower.reset()

    @property
    def is_moving(self) -> bool:
        return self.path is not None and self.follower is not None

    @property
    def remaining_hops(self) -> int:
        return len(self.path) if self.path is not None else 0


class AgentStore:
    """
    This class owns every agent record, keyed by agent id.
    """
    def __init__(self):
        self._agents: Dict[str, AgentRecord] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def spawn(self, agent_id: str, position, layer: int = 0, speed: Optional[float] = None,
              blocking: bool = False) -> AgentRecord:
        """
        Create an agent at a world position.

        A follower is attached when `speed` is given, otherwise one is created
        with the default speed the first time a path is attached.
        """
        if agent_id in self._agents:
            raise ValueError(f"Agent '{agent_id}' already exists")
        agent = AgentRecord(
            agent_id=agent_id,
            position=np.array(position, dtype=float),
            layer=layer,
            follower=PathFollower(speed=speed) if speed is not None else None,
            blocking=blocking
        )
        self._agents[agent_id] = agent
        self.logger.debug(f"Spawned agent {agent_id} at {agent.position} (layer {layer})")
        return agent

    def despawn(self, agent_id: str) -> AgentRecord:
        return self._agents.pop(agent_id)

    def get(self, agent_id: str) -> AgentRecord:
        try:
            return self._agents[agent_id]
        except KeyError:
            raise KeyError(f"Unknown agent '{agent_id}'") from None

    def request_path(self, agent_id: str, target: GridPosition) -> None:
        """Queue a one-shot path request; a newer request replaces a pending one"""
        self.get(agent_id).request = PathRequest(target)

    def with_requests(self) -> List[AgentRecord]:
        return [a for a in self._agents.values() if a.request is not None]

    def following(self) -> List[AgentRecord]:
        """Agents holding both a path and a follower"""
        return [a for a in self._agents.values() if a.is_moving]

    def blocking_agents(self) -> List[AgentRecord]:
        return [a for a in self._agents.values() if a.blocking]

    def __contains__(self, agent_id) -> bool:
        return agent_id in self._agents

    def __iter__(self) -> Iterator[AgentRecord]:
        return iter(list(self._agents.values()))

    def __len__(self) -> int:
        return len(self._agents)
