import logging

import numpy as np

from ..world.agents import AgentRecord, PathFollower
from ..world.coordinates import CoordinateMapper

SNAP_EPSILON = 1e-6

logger = logging.getLogger(__name__)


def lerp(start: np.ndarray, end: np.ndarray, t: float) -> np.ndarray:
    """Linear interpolation that lands exactly on `end` when t == 1"""
    return start * (1.0 - t) + end * t


def advance_follower(agent: AgentRecord, mapper: CoordinateMapper, delta_time: float,
                     snap_epsilon: float = SNAP_EPSILON) -> bool:
    """
    Move an agent one tick along its path.

    The agent is interpolated from the cached hop start toward the world
    position of its first remaining node. Reaching the node pops it, resets
    progress (overshoot is discarded) and makes the node the start of the next
    hop. The path is detached as soon as it is empty.

    Returns True while the agent still has a path to follow.
    """
    path, follower = agent.path, agent.follower
    if path is None or follower is None:
        return False
    if not path:
        agent.detach_path()
        return False

    next_node = path[0]
    target_pos = mapper.grid_to_world(next_node)

    if float(np.sum((agent.position - target_pos) ** 2)) < snap_epsilon:
        follower.progress = 1.0

    if follower.start_position is None:
        follower.start_position = agent.position.copy()

    follower.progress += follower.speed * delta_time
    agent.position = lerp(follower.start_position, target_pos,
                          min(max(follower.progress, 0.0), 1.0))

    if follower.progress >= 1.0:
        path.popleft()
        follower.progress = 0.0
        follower.start_position = target_pos
        logger.debug(f"Agent {agent.agent_id} reached {next_node}, {len(path)} hops left")
        if not path:
            agent.detach_path()
            return False
    return True


def ensure_follower(agent: AgentRecord, speed: float) -> PathFollower:
    """Give the agent a follower with `speed` if it has none yet"""
    if agent.follower is None:
        agent.follower = PathFollower(speed=speed)
    return agent.follower
