"""
Per-tick navigation systems.

Both passes are plain functions called once per tick by the simulation loop:
`process_path_requests` turns pending requests into paths, then `follow_paths`
moves every agent that holds a path.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Dict, Optional

from ...cfg import NavigationConfig
from ..world.agents import AgentRecord, AgentStore
from ..world.coordinates import CoordinateMapper
from ..world.position import GridPosition
from .astar import search
from .movement import advance_follower, ensure_follower
from .targets import resolve_target

logger = logging.getLogger(__name__)


class PathOutcome(Enum):
    """Diagnostic result of processing one path request"""
    FOUND = 'found'
    PARTIAL = 'partial'
    CROSS_LAYER = 'cross_layer'
    TARGET_UNREACHABLE = 'target_unreachable'
    BUDGET_EXCEEDED = 'budget_exceeded'

    @property
    def attaches_path(self) -> bool:
        return self in (PathOutcome.FOUND, PathOutcome.PARTIAL)


@dataclass
class TickContext:
    """Everything a navigation pass needs for one tick"""
    delta_time: float
    obstacles: AbstractSet[GridPosition]
    agents: AgentStore
    mapper: CoordinateMapper
    config: Optional[NavigationConfig] = None

    def __post_init__(self):
        if self.config is None:
            self.config = NavigationConfig()


def process_request(agent: AgentRecord, ctx: TickContext) -> PathOutcome:
    """
    Consume an agent's pending request and attach a path when one is found.

    Failures are silent for the agent: it simply keeps whatever path it had.
    """
    request = agent.request
    agent.request = None

    start = ctx.mapper.world_to_grid(agent.position, agent.layer)
    if start.layer != request.target.layer:
        logger.debug(f"Agent {agent.agent_id}: cannot path between layers {start} -> {request.target}")
        return PathOutcome.CROSS_LAYER

    target = resolve_target(request.target, start, ctx.obstacles)
    if target is None:
        logger.debug(f"Agent {agent.agent_id}: no free cell at or around {request.target}")
        return PathOutcome.TARGET_UNREACHABLE

    result = search(start, target, ctx.obstacles, ctx.config.max_iterations)
    if not result.found:
        logger.debug(f"Agent {agent.agent_id}: no path to {target} within {ctx.config.max_iterations} iterations")
        return PathOutcome.BUDGET_EXCEEDED

    follower = ensure_follower(agent, ctx.config.default_speed)
    follower.reset()
    agent.attach_path(result.path)
    logger.info(f"Agent {agent.agent_id}: path {start} -> {target} with {len(result.path)} hops")
    return PathOutcome.FOUND if result.reached_target else PathOutcome.PARTIAL


def process_path_requests(ctx: TickContext) -> Dict[str, PathOutcome]:
    """Search pass: handle every pending request, in agent order."""
    return {agent.agent_id: process_request(agent, ctx) for agent in ctx.agents.with_requests()}


def follow_paths(ctx: TickContext) -> int:
    """Motion pass. Returns how many agents are still following a path."""
    moving = 0
    for agent in ctx.agents.following():
        if advance_follower(agent, ctx.mapper, ctx.delta_time, ctx.config.snap_epsilon):
            moving += 1
    return moving
