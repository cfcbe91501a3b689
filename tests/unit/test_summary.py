"""Unit tests for monthly summary and goal progress"""

from datetime import date
from decimal import Decimal

from finance_advisor.domain.models import FinancialSnapshot, SavingsGoal
from finance_advisor.domain.summary import summarize_month, track_goal


def test_summarize_month(sample_snapshot):
    """Test savings, expense and goal ratios"""
    summary = summarize_month(sample_snapshot)

    assert summary.surplus_cents == 200_000
    assert summary.savings_rate == Decimal("62.5")
    assert summary.expense_rate == Decimal("37.5")
    assert summary.savings_goal_progress == Decimal("75")


def test_summarize_month_without_income_or_goal():
    """Test ratios with zero denominators are absent"""
    summary = summarize_month(FinancialSnapshot(10_000, 0, 5_000))

    assert summary.surplus_cents == -5_000
    assert summary.savings_rate is None
    assert summary.expense_rate is None
    assert summary.savings_goal_progress is None


def test_track_goal_in_progress():
    """Test partially funded emergency fund"""
    goal = SavingsGoal(
        title="Emergency fund",
        target_cents=720_000,
        current_cents=180_000,
        deadline=date(2024, 12, 31),
        category="Emergency",
    )
    progress = track_goal(goal, as_of=date(2024, 12, 1))

    assert progress.progress == Decimal("25")
    assert progress.remaining_cents == 540_000
    assert progress.days_left == 30


def test_track_goal_overfunded_and_overdue():
    """Test progress caps at 100 and overdue goals have negative days left"""
    goal = SavingsGoal("Laptop", target_cents=350_000, current_cents=400_000, deadline=date(2024, 6, 1))
    progress = track_goal(goal, as_of=date(2024, 6, 11))

    assert progress.progress == Decimal("100")
    assert progress.remaining_cents == 0
    assert progress.days_left == -10


def test_track_goal_zero_target():
    """Test zero target counts as complete"""
    progress = track_goal(SavingsGoal("Nothing", 0, 0, date(2024, 1, 1)), as_of=date(2024, 1, 1))

    assert progress.progress == Decimal("100")
    assert progress.days_left == 0
