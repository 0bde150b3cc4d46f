"""
Discrete tick loop driving the navigation systems.
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from ..cfg import SimulationConfig
from ..core.navigation import PathOutcome, TickContext, follow_paths, process_path_requests
from ..core.world import GridPosition, World

TRACE_COLUMNS = ['tick', 'time', 'agent_id', 'x', 'altitude', 'z', 'layer', 'remaining']


class FrameClock:
    """Fixed-step frame clock"""
    def __init__(self, tick_delta: float):
        if tick_delta <= 0:
            raise ValueError("tick_delta must be positive")
        self.tick_delta = tick_delta
        self.ticks = 0

    def delta_time(self) -> float:
        return self.tick_delta

    def advance(self) -> float:
        self.ticks += 1
        return self.tick_delta

    @property
    def elapsed(self) -> float:
        return self.ticks * self.tick_delta


class Simulation:
    """
    This class runs one search pass and one motion pass per tick over a World.
    """
    def __init__(self, world: World, config: Optional[SimulationConfig] = None,
                 record_trace: bool = True):
        self.world = world
        self.config = config or SimulationConfig()
        self.clock = FrameClock(self.config.simulation.tick_delta)
        self.record_trace = record_trace
        self._trace_rows: List[Dict] = []
        self.outcomes: List[Dict] = []
        self.logger = logging.getLogger(self.__class__.__name__)
        if self.record_trace:
            self._record()

    def request_path(self, agent_id: str, target: GridPosition) -> None:
        self.world.agents.request_path(agent_id, target)

    def context(self) -> TickContext:
        """Build the context for the next tick; the obstacle snapshot is fixed for the whole tick"""
        return TickContext(
            delta_time=self.clock.delta_time(),
            obstacles=self.world.obstacle_snapshot(),
            agents=self.world.agents,
            mapper=self.world.mapper,
            config=self.config.navigation
        )

    def step(self) -> Dict[str, PathOutcome]:
        """Advance one tick. Returns the outcome of every request processed this tick."""
        ctx = self.context()
        outcomes = process_path_requests(ctx)
        follow_paths(ctx)
        self.clock.advance()

        for agent_id, outcome in outcomes.items():
            self.outcomes.append({'tick': self.clock.ticks, 'agent_id': agent_id, 'outcome': outcome.value})
        if self.record_trace:
            self._record()
        return outcomes

    def is_idle(self) -> bool:
        """No pending requests and nobody moving"""
        return not self.world.agents.with_requests() and not self.world.agents.following()

    def run(self, num_ticks: Optional[int] = None) -> int:
        """
        Run the tick loop.

        Stops early once every agent is idle when `simulation.stop_when_idle` is set.
        Returns the number of ticks run.
        """
        num_ticks = self.config.simulation.num_ticks if num_ticks is None else num_ticks
        self.logger.info(f"Running '{self.world.name}' for up to {num_ticks} ticks "
                         f"(dt={self.clock.tick_delta:.4f}s)")
        ran = 0
        for _ in range(num_ticks):
            if self.config.simulation.stop_when_idle and self.is_idle():
                self.logger.info(f"All agents idle after {ran} ticks")
                break
            self.step()
            ran += 1
        return ran

    def _record(self) -> None:
        for agent in self.world.agents:
            x, altitude, z = agent.position
            self._trace_rows.append({
                'tick': self.clock.ticks,
                'time': self.clock.elapsed,
                'agent_id': agent.agent_id,
                'x': float(x),
                'altitude': float(altitude),
                'z': float(z),
                'layer': agent.layer,
                'remaining': agent.remaining_hops
            })

    def trace(self) -> pd.DataFrame:
        """Per-tick agent positions as a DataFrame"""
        return pd.DataFrame(self._trace_rows, columns=TRACE_COLUMNS)
