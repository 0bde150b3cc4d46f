"""Tests for gridnav.core.world.agents module."""

from __future__ import annotations

from collections import deque

import numpy as np
import pytest

from gridnav.core.world.agents import AgentStore, PathFollower
from gridnav.core.world.position import GridPosition


class TestAgentStore:
    def test_spawn_and_get(self) -> None:
        store = AgentStore()
        agent = store.spawn('a', [1.0, 0.0, 2.0], layer=1, speed=3.0)
        assert store.get('a') is agent
        assert 'a' in store
        assert np.array_equal(agent.position, [1.0, 0.0, 2.0])
        assert agent.follower.speed == 3.0
        assert agent.path is None and agent.request is None

    def test_spawn_without_speed_has_no_follower(self) -> None:
        store = AgentStore()
        assert store.spawn('a', [0, 0, 0]).follower is None

    def test_duplicate_spawn_raises(self) -> None:
        store = AgentStore()
        store.spawn('a', [0, 0, 0])
        with pytest.raises(ValueError):
            store.spawn('a', [1, 0, 0])

    def test_unknown_agent_raises(self) -> None:
        with pytest.raises(KeyError):
            AgentStore().get('ghost')

    def test_request_replaces_pending_request(self) -> None:
        store = AgentStore()
        store.spawn('a', [0, 0, 0])
        store.request_path('a', GridPosition(1, 1))
        store.request_path('a', GridPosition(2, 2))
        assert store.get('a').request.target == GridPosition(2, 2)
        assert [a.agent_id for a in store.with_requests()] == ['a']

    def test_following_needs_path_and_follower(self) -> None:
        store = AgentStore()
        walker = store.spawn('walker', [0, 0, 0], speed=1.0)
        idle = store.spawn('idle', [0, 0, 0])
        walker.attach_path(deque([GridPosition(1, 0)]))
        idle.attach_path(deque([GridPosition(1, 0)]))
        assert [a.agent_id for a in store.following()] == ['walker']

    def test_despawn(self) -> None:
        store = AgentStore()
        store.spawn('a', [0, 0, 0])
        store.despawn('a')
        assert len(store) == 0


class TestAgentRecord:
    def test_detach_path_leaves_follower_idle(self) -> None:
        agent = AgentStore().spawn('a', [0, 0, 0], speed=2.0)
        agent.attach_path(deque([GridPosition(1, 0)]))
        agent.follower.progress = 0.5
        agent.follower.start_position = np.zeros(3)
        agent.detach_path()
        assert agent.path is None
        assert agent.follower.is_idle
        assert agent.follower.speed == 2.0
        assert not agent.is_moving

    def test_remaining_hops(self) -> None:
        agent = AgentStore().spawn('a', [0, 0, 0])
        assert agent.remaining_hops == 0
        agent.attach_path(deque([GridPosition(1, 0), GridPosition(2, 0)]))
        assert agent.remaining_hops == 2

    def test_follower_defaults(self) -> None:
        follower = PathFollower()
        assert follower.speed == 1.0
        assert follower.is_idle
