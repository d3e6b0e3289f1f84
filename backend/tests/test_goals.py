from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from weightwise.analytics import (
    days_until,
    goal_direction,
    goal_progress,
    is_goal_complete,
    split_goals,
    weight_to_go,
)
from weightwise.utils.enums import GoalDirection


def make_goal(start_weight=200.0, target_weight=150.0, is_active=True):
    return SimpleNamespace(
        start_weight=start_weight,
        target_weight=target_weight,
        direction=goal_direction(start_weight, target_weight),
        is_active=is_active,
    )


class TestGoalProgress:
    def test_halfway(self):
        assert goal_progress(make_goal(), current_weight=175, start_weight=200) == 50.0

    def test_reached_target(self):
        assert goal_progress(make_goal(), current_weight=150, start_weight=200) == 100

    def test_overshoot_is_clamped(self):
        assert goal_progress(make_goal(), current_weight=125, start_weight=200) == 100

    def test_uses_stored_start_weight_by_default(self):
        assert goal_progress(make_goal(start_weight=200), current_weight=190) == pytest.approx(20.0)

    def test_start_equals_target(self):
        goal = make_goal(start_weight=160, target_weight=160)
        assert goal_progress(goal, current_weight=170) == 100

    def test_gain_goal(self):
        goal = make_goal(start_weight=150, target_weight=170)
        assert goal_progress(goal, current_weight=160) == pytest.approx(50.0)

    def test_no_movement(self):
        assert goal_progress(make_goal(), current_weight=200) == 0


class TestGoalDirection:
    def test_direction_from_snapshot(self):
        assert goal_direction(200, 150) == GoalDirection.loss
        assert goal_direction(150, 170) == GoalDirection.gain
        assert goal_direction(150, 150) == GoalDirection.loss

    def test_loss_goal_completion(self):
        goal = make_goal(start_weight=200, target_weight=150)
        assert is_goal_complete(goal, 151) is False
        assert is_goal_complete(goal, 150) is True
        assert is_goal_complete(goal, 140) is True

    def test_gain_goal_completion(self):
        goal = make_goal(start_weight=150, target_weight=170)
        assert is_goal_complete(goal, 165) is False
        assert is_goal_complete(goal, 170) is True
        assert is_goal_complete(goal, 175) is True

    def test_gain_goal_below_start_is_not_complete(self):
        # A live comparison would read this as a loss goal and call it done
        goal = make_goal(start_weight=150, target_weight=170)
        assert is_goal_complete(goal, 145) is False

    def test_direction_accepts_stored_string(self):
        goal = make_goal()
        goal.direction = "loss"
        assert is_goal_complete(goal, 149) is True


class TestDaysUntil:
    @pytest.fixture
    def noon(self):
        return datetime(2026, 10, 19, 12, 0)

    def test_future_date_rounds_up(self, noon):
        assert days_until(date(2026, 10, 29), noon) == 10

    def test_today_is_zero(self, noon):
        assert days_until(date(2026, 10, 19), noon) == 0

    def test_overdue_is_negative(self, noon):
        assert days_until(date(2026, 10, 10), noon) == -9

    def test_datetime_target(self, noon):
        assert days_until(noon + timedelta(days=3), noon) == 3


def test_weight_to_go():
    assert weight_to_go(175, 150) == 25
    assert weight_to_go(140, 150) == 10


def test_split_goals():
    in_progress = make_goal(start_weight=200, target_weight=150)
    paused = make_goal(start_weight=200, target_weight=190, is_active=False)
    reached = make_goal(start_weight=200, target_weight=180)

    active, completed = split_goals([in_progress, paused, reached], current_weight=175)

    assert active == [in_progress, reached]
    assert completed == [paused, reached]
