"""
Simulation runner used by the CLI.
Loads config and map, sets up logging, runs the tick loop and writes outputs.
"""

import datetime
import logging
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, Optional

from ..cfg import SimulationConfig
from ..cfg.schema import validate_log_level
from ..core.navigation import TickContext, process_request
from ..core.world import GridPosition, World
from ..analysis.plotting import plot_run
from ..utils.io_utils import save_json, save_trace_to_csv
from .simulation import Simulation


class SimulationRunner:
    """Simulation runner class."""
    def __init__(self, config_path: Optional[str] = None,
                 config_overrides: Optional[Dict[str, Any]] = None):
        self.config = SimulationConfig.from_params(config_path, **(config_overrides or {}))
        self.logger = logging.getLogger(self.__class__.__name__)

    def run_map(self, map_file: str, num_ticks: Optional[int] = None,
                trace_path: Optional[str] = None, plot_path: Optional[str] = None) -> Dict[str, Any]:
        """Load a map, run it and write the requested outputs."""
        world = World.from_map_file(map_file)
        simulation = Simulation(world, self.config)
        ticks = simulation.run(num_ticks)

        summary = {
            'map': world.name,
            'ticks': ticks,
            'elapsed': simulation.clock.elapsed,
            'outcomes': simulation.outcomes,
            'agents': {
                agent.agent_id: {
                    'position': agent.position.tolist(),
                    'cell': world.grid_position_of(agent.agent_id).as_tuple(),
                    'remaining': agent.remaining_hops
                }
                for agent in world.agents
            }
        }

        if trace_path:
            save_trace_to_csv(simulation.trace(), trace_path)
        if plot_path:
            plot_run(world, simulation.trace(), plot_path)

        self.logger.info(f"Finished '{world.name}' after {ticks} ticks")
        return summary

    def find_route(self, map_file: str, start: GridPosition, target: GridPosition):
        """
        Run a single search from `start` to `target` on a map without moving anything.

        Returns the outcome and the route (empty when no path is attached).
        """
        world = World.from_map_file(map_file)
        agent = world.spawn_agent('__probe__', start)
        world.agents.request_path(agent.agent_id, target)
        ctx = TickContext(
            delta_time=0.0,
            obstacles=world.obstacle_snapshot(),
            agents=world.agents,
            mapper=world.mapper,
            config=self.config.navigation
        )
        outcome = process_request(agent, ctx)
        route = list(agent.path) if outcome.attaches_path else []
        self.logger.info(f"Route {start} -> {target}: {outcome.value}, {len(route)} hops")
        return outcome, route

    def setup_logging(self, log_level: Optional[str] = None, log_to_file: bool = False) -> None:
        """Setup logging for a run."""
        level = validate_log_level(log_level or self.config.simulation.log_level)

        handlers = [logging.StreamHandler(sys.stdout)]
        if log_to_file:
            os.makedirs(self.config.simulation.log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(self.config.simulation.log_dir, "simulation.log")))

        # Clear any existing handlers
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers
        )

    def save_metadata(self, summary: Dict[str, Any], file_path: Optional[str] = None) -> str:
        """Save config and run summary to a JSON file."""
        if file_path is None:
            file_path = os.path.join(self.config.simulation.log_dir, 'metadata.json')
        metadata = {
            'config': asdict(self.config),
            'summary': summary,
            'timestamp': datetime.datetime.now().isoformat()
        }
        save_json(metadata, file_path)
        self.logger.info(f"Saved metadata to {file_path}")
        return file_path

