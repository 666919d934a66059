"""
test_scoring.py
---------------
Pipe retirement, score increments and level progression.
"""

from collections import deque

import pytest

from why_flying.data_models import Obstacle, RunState, TickEvent
from why_flying.obstacle_engine import ObstacleGenerator
from why_flying.scoring import ScoringController


@pytest.fixture
def scoring(config):
    return ScoringController(config)


class TestRetirement:

    def test_pipe_fully_off_screen_scores(self, scoring):
        state = RunState()
        field = deque([Obstacle(x=-53, gap_start=100), Obstacle(x=-10, gap_start=100)])
        passed, events = scoring.update(state, field)
        assert passed == 1
        assert state.score == 1
        assert events == [TickEvent.SCORED]
        assert [p.x for p in field] == [-10]

    def test_pipe_partly_visible_does_not_score(self, scoring):
        state = RunState()
        field = deque([Obstacle(x=-52, gap_start=100)])
        assert scoring.update(state, field) == (0, [])
        assert state.score == 0

    def test_retires_in_spawn_order(self, scoring):
        first, second, third = (Obstacle(x=-60, gap_start=90),
                                Obstacle(x=-55, gap_start=91),
                                Obstacle(x=100, gap_start=92))
        field = deque([first, second, third])
        state = RunState()
        passed, _ = scoring.update(state, field)
        assert passed == 2
        assert state.score == 2
        assert list(field) == [third]

    def test_leftmost_pipe_reaches_zero_after_scrolling(self, config):
        # One pipe at x=200 scrolling 2px a tick with nothing else spawning
        cfg = config.with_overrides(base_interval=10_000)
        generator = ObstacleGenerator(cfg)
        scoring = ScoringController(cfg)
        state = RunState()
        field = deque([Obstacle(x=200.0, gap_start=100)])

        for _ in range(126):
            generator.update(state, field, 480, 640)
            scoring.update(state, field)
        assert state.score == 0
        assert field[0].x == -52

        generator.update(state, field, 480, 640)
        scoring.update(state, field)
        assert state.score == 1
        assert len(field) == 0


class TestLevels:

    @pytest.mark.parametrize("score, level", [(0, 1), (9, 1), (10, 2), (25, 3)])
    def test_level_for(self, scoring, score, level):
        assert scoring.level_for(score) == level

    def test_level_up_on_tenth_point(self, scoring):
        state = RunState(score=9, level=1)
        field = deque([Obstacle(x=-100, gap_start=100)])
        _, events = scoring.update(state, field)
        assert state.score == 10
        assert state.level == 2
        assert events == [TickEvent.SCORED, TickEvent.LEVEL_UP]
