"""Monthly summary ratios and savings goal progress"""

from datetime import date
from decimal import Decimal

from finance_advisor.domain.models import (
    FinancialSnapshot,
    GoalProgress,
    MonthlySummary,
    SavingsGoal,
)
from finance_advisor.utils.money import clamp, percentage


def summarize_month(snapshot: FinancialSnapshot) -> MonthlySummary:
    """
    Headline ratios for the snapshot's month.

    Ratios with a zero denominator (no income, no savings goal) are None.
    """
    return MonthlySummary(
        surplus_cents=snapshot.monthly_surplus_cents,
        savings_rate=percentage(snapshot.monthly_surplus_cents, snapshot.monthly_income_cents),
        expense_rate=percentage(snapshot.monthly_expenses_cents, snapshot.monthly_income_cents),
        savings_goal_progress=percentage(snapshot.current_savings_cents, snapshot.savings_goal_cents),
    )


def track_goal(goal: SavingsGoal, as_of: date) -> GoalProgress:
    """
    Progress towards a savings goal on a given day.

    Progress is capped to 0-100 and the remaining amount never goes below
    zero once the goal is reached. A zero target counts as complete.
    """
    progress = percentage(goal.current_cents, goal.target_cents)
    if progress is None:
        progress = Decimal(100)

    return GoalProgress(
        goal=goal,
        progress=clamp(progress, Decimal(0), Decimal(100)),
        remaining_cents=max(0, goal.target_cents - goal.current_cents),
        days_left=(goal.deadline - as_of).days,
    )
