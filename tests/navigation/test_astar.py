"""Tests for gridnav.core.navigation.astar module."""

from __future__ import annotations

import pytest

from gridnav.core.navigation.astar import MAX_ITERATIONS, find_path, search
from gridnav.core.world.position import GridPosition

ORIGIN = GridPosition(0, 0, 0)


def _assert_valid_path(path, start, obstacles) -> None:
    previous = start
    for node in path:
        assert node.layer == start.layer
        assert node not in obstacles
        assert previous.is_adjacent(node)
        previous = node


def _ring(radius: int):
    """Cells at exactly Chebyshev distance `radius` from the origin"""
    return frozenset(
        GridPosition(x, y, 0)
        for x in range(-radius, radius + 1)
        for y in range(-radius, radius + 1)
        if max(abs(x), abs(y)) == radius
    )


class TestOpenGrid:
    def test_diagonal_route(self) -> None:
        path = find_path(ORIGIN, GridPosition(3, 3, 0), frozenset())
        assert list(path) == [GridPosition(1, 1, 0), GridPosition(2, 2, 0), GridPosition(3, 3, 0)]

    def test_straight_route_uses_fewest_steps(self) -> None:
        path = find_path(ORIGIN, GridPosition(0, -4, 0), frozenset())
        assert len(path) == 4
        assert path[-1] == GridPosition(0, -4, 0)

    def test_start_excluded_target_included(self) -> None:
        result = search(ORIGIN, GridPosition(2, 0, 0), frozenset())
        assert result.reached_target
        assert ORIGIN not in result.path
        assert result.path[-1] == GridPosition(2, 0, 0)

    def test_start_equals_target_gives_empty_path(self) -> None:
        result = search(ORIGIN, ORIGIN, frozenset())
        assert result.found
        assert result.reached_target
        assert len(result.path) == 0
        assert result.iterations == 1

    def test_same_request_gives_same_path(self) -> None:
        obstacles = frozenset({GridPosition(2, y, 0) for y in range(-3, 4)})
        first = find_path(ORIGIN, GridPosition(4, 0, 0), obstacles)
        second = find_path(ORIGIN, GridPosition(4, 0, 0), obstacles)
        assert first == second

    def test_rejects_cross_layer_search(self) -> None:
        with pytest.raises(ValueError):
            search(ORIGIN, GridPosition(1, 1, 1), frozenset())


class TestObstacles:
    def test_routes_around_wall(self) -> None:
        obstacles = frozenset({GridPosition(2, y, 0) for y in range(-3, 4)})
        target = GridPosition(4, 0, 0)
        result = search(ORIGIN, target, obstacles)
        assert result.reached_target
        assert result.path[-1] == target
        _assert_valid_path(result.path, ORIGIN, obstacles)

    def test_obstacles_on_other_layers_ignored(self) -> None:
        obstacles = frozenset({GridPosition(1, 1, 1), GridPosition(2, 2, 1)})
        path = find_path(ORIGIN, GridPosition(3, 3, 0), obstacles)
        assert list(path) == [GridPosition(1, 1, 0), GridPosition(2, 2, 0), GridPosition(3, 3, 0)]

    def test_exhausted_open_set_gives_best_effort_path(self) -> None:
        obstacles = _ring(2)
        target = GridPosition(5, 0, 0)
        result = search(ORIGIN, target, obstacles)
        assert result.found
        assert not result.reached_target
        assert len(result.path) > 0
        assert target not in result.path
        assert all(max(abs(p.x), abs(p.y)) <= 1 for p in result.path)
        _assert_valid_path(result.path, ORIGIN, obstacles)

    def test_fully_enclosed_start_gives_empty_best_effort_path(self) -> None:
        result = search(ORIGIN, GridPosition(5, 0, 0), _ring(1))
        assert result.found
        assert not result.reached_target
        assert len(result.path) == 0


class TestIterationBudget:
    def test_default_budget(self) -> None:
        assert MAX_ITERATIONS == 100

    def test_far_target_exceeds_budget(self) -> None:
        result = search(ORIGIN, GridPosition(150, 0, 0), frozenset())
        assert result.path is None
        assert not result.found

    def test_target_within_budget(self) -> None:
        path = find_path(ORIGIN, GridPosition(50, 0, 0), frozenset())
        assert len(path) == 50

    def test_budget_boundary(self) -> None:
        target = GridPosition(10, 0, 0)
        # 11 selections: the start, then one per step including the target
        assert find_path(ORIGIN, target, frozenset(), max_iterations=10) is None
        assert len(find_path(ORIGIN, target, frozenset(), max_iterations=11)) == 10

    def test_detour_longer_than_budget_fails(self) -> None:
        wall = frozenset({GridPosition(1, y, 0) for y in range(-60, 61)})
        assert find_path(ORIGIN, GridPosition(2, 0, 0), wall) is None
