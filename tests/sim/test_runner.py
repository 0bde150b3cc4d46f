"""Tests for gridnav.sim.runner module."""

from __future__ import annotations

import json

import pandas as pd
import pytest

from gridnav.core.navigation import PathOutcome
from gridnav.core.world import GridPosition
from gridnav.sim import SimulationRunner

MAP_INFO = {
    'name': 'runner_map',
    'terrain': {'width': 12, 'height': 12},
    'obstacles': [[3, 3, 0]],
    'agents': [
        {'id': 'walker', 'position': [0, 0, 0], 'speed': 1.0, 'target': [2, 2, 0]},
    ]
}


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / 'runner_map.json'
    path.write_text(json.dumps(MAP_INFO))
    return str(path)


class TestRunMap:
    def test_summary(self, map_file) -> None:
        runner = SimulationRunner(config_overrides={'simulation.tick_delta': 1.0})
        summary = runner.run_map(map_file)
        assert summary['map'] == 'runner_map'
        assert summary['ticks'] == 2
        assert summary['agents']['walker']['cell'] == (2, 2, 0)
        assert summary['agents']['walker']['remaining'] == 0
        assert summary['outcomes'] == [{'tick': 1, 'agent_id': 'walker', 'outcome': 'found'}]

    def test_writes_trace_and_plot(self, map_file, tmp_path) -> None:
        runner = SimulationRunner(config_overrides={'simulation.tick_delta': 0.5})
        trace_path = tmp_path / 'out' / 'trace.csv'
        plot_path = tmp_path / 'out' / 'run.png'
        runner.run_map(map_file, trace_path=str(trace_path), plot_path=str(plot_path))
        trace = pd.read_csv(trace_path)
        assert set(trace['agent_id']) == {'walker'}
        assert plot_path.exists() and plot_path.stat().st_size > 0

    def test_save_metadata(self, map_file, tmp_path) -> None:
        runner = SimulationRunner(config_overrides={'simulation.log_dir': str(tmp_path / 'logs')})
        summary = runner.run_map(map_file, num_ticks=1)
        metadata_path = runner.save_metadata(summary)
        with open(metadata_path) as f:
            metadata = json.load(f)
        assert metadata['config']['navigation']['max_iterations'] == 100
        assert metadata['summary']['ticks'] == 1


class TestFindRoute:
    def test_found(self, map_file) -> None:
        outcome, route = SimulationRunner().find_route(map_file, GridPosition(0, 0, 0), GridPosition(2, 2, 0))
        assert outcome == PathOutcome.FOUND
        assert route == [GridPosition(1, 1, 0), GridPosition(2, 2, 0)]

    def test_blocked_target_substituted(self, map_file) -> None:
        outcome, route = SimulationRunner().find_route(map_file, GridPosition(0, 0, 0), GridPosition(3, 3, 0))
        assert outcome == PathOutcome.FOUND
        assert route[-1] == GridPosition(2, 2, 0)

    def test_cross_layer(self, map_file) -> None:
        outcome, route = SimulationRunner().find_route(map_file, GridPosition(0, 0, 0), GridPosition(3, 3, 1))
        assert outcome == PathOutcome.CROSS_LAYER
        assert route == []

    def test_budget_override(self, map_file) -> None:
        runner = SimulationRunner(config_overrides={'navigation.max_iterations': 2})
        outcome, route = runner.find_route(map_file, GridPosition(0, 0, 0), GridPosition(5, 0, 0))
        assert outcome == PathOutcome.BUDGET_EXCEEDED
        assert route == []
