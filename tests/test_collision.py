"""
test_collision.py
-----------------
Inset hitbox checks between the player and pipe segments.
"""

import pytest

from why_flying.collision import CollisionDetector
from why_flying.data_models import CollisionKind, Obstacle, PlayerBody


@pytest.fixture
def detector(config):
    return CollisionDetector(config)


def body_at(y):
    return PlayerBody(x=50, y=y, w=40, h=40)


class TestHitbox:

    def test_hitbox_is_inset(self, detector):
        box = detector.hitbox(body_at(100))
        assert box == (55, 85, 105, 135)


class TestPipeHits:

    def test_above_gap_hits(self, detector):
        # hitbox top 185 is above the gap top at 200
        assert detector.check(body_at(180), [Obstacle(x=60, gap_start=200)]) is CollisionKind.PIPE

    def test_inside_gap_is_clear(self, detector):
        assert detector.check(body_at(220), [Obstacle(x=60, gap_start=200)]) is None

    def test_below_gap_hits(self, detector):
        # hitbox bottom 365 is below the gap bottom at 350
        assert detector.check(body_at(330), [Obstacle(x=60, gap_start=200)]) is CollisionKind.PIPE

    def test_margin_forgives_grazing(self, detector):
        # sprite top 196 is above the gap, hitbox top 201 is not
        assert detector.check(body_at(196), [Obstacle(x=60, gap_start=200)]) is None

    @pytest.mark.parametrize("pipe_x", [85, 2, 300, -100])
    def test_no_horizontal_overlap_is_clear(self, detector, pipe_x):
        assert detector.check(body_at(0), [Obstacle(x=pipe_x, gap_start=200)]) is None

    @pytest.mark.parametrize("pipe_x", [84, 3])
    def test_edge_overlap_hits(self, detector, pipe_x):
        assert detector.check(body_at(0), [Obstacle(x=pipe_x, gap_start=200)]) is CollisionKind.PIPE

    def test_any_pipe_in_field_counts(self, detector):
        field = [Obstacle(x=400, gap_start=100), Obstacle(x=60, gap_start=300)]
        assert detector.check(body_at(100), field) is CollisionKind.PIPE

    def test_empty_field(self, detector):
        assert detector.check(body_at(100), []) is None
