"""Tests for gridnav.core.world.position module."""

from __future__ import annotations

import pytest

from gridnav.core.world.position import GridPosition


class TestGridPosition:
    def test_structural_equality_and_hash(self) -> None:
        assert GridPosition(1, 2, 3) == GridPosition(1, 2, 3)
        assert len({GridPosition(1, 2, 3), GridPosition(1, 2, 3)}) == 1

    def test_zero(self) -> None:
        assert GridPosition.ZERO == GridPosition(0, 0, 0)

    def test_layer_defaults_to_zero(self) -> None:
        assert GridPosition(4, 5).layer == 0

    def test_distance_squared_includes_layer(self) -> None:
        assert GridPosition(0, 0, 0).distance_squared(GridPosition(1, 2, 2)) == 9
        assert GridPosition(0, 0, 0).distance(GridPosition(1, 2, 2)) == pytest.approx(3.0)

    def test_neighbors_order_and_layer(self) -> None:
        neighbors = list(GridPosition(5, 5, 2).neighbors())
        assert len(neighbors) == 8
        assert neighbors[0] == GridPosition(4, 4, 2)
        assert neighbors[1] == GridPosition(4, 5, 2)
        assert neighbors[-1] == GridPosition(6, 6, 2)
        assert GridPosition(5, 5, 2) not in neighbors
        assert all(n.layer == 2 for n in neighbors)

    def test_is_adjacent(self) -> None:
        p = GridPosition(0, 0, 0)
        assert p.is_adjacent(GridPosition(1, 1, 0))
        assert not p.is_adjacent(GridPosition(2, 0, 0))
        assert not p.is_adjacent(GridPosition(1, 0, 1))
        assert not p.is_adjacent(p)


class TestGridPositionParsing:
    def test_from_sequence(self) -> None:
        assert GridPosition.from_sequence([1, 2, 3]) == GridPosition(1, 2, 3)
        assert GridPosition.from_sequence([1, 2]) == GridPosition(1, 2, 0)

    def test_from_sequence_rejects_bad_length(self) -> None:
        with pytest.raises(ValueError):
            GridPosition.from_sequence([1])

    def test_parse(self) -> None:
        assert GridPosition.parse("3,-4,1") == GridPosition(3, -4, 1)
        assert GridPosition.parse("3,4") == GridPosition(3, 4, 0)

    def test_parse_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            GridPosition.parse("a,b")
