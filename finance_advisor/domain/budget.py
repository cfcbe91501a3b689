"""Budget tracker - per-category planned vs actual spend"""

from decimal import Decimal, localcontext
from typing import Iterable, List

from finance_advisor.domain.exceptions import InvalidBudgetError
from finance_advisor.domain.models import (
    BudgetCategory,
    BudgetOverview,
    BudgetResult,
    BudgetStatus,
)


def evaluate_category(item: BudgetCategory) -> BudgetStatus:
    """
    Compare one category's actual spend against its plan.

    percentage_used = actual / planned * 100, over budget when actual > planned.

    Raises:
        InvalidBudgetError: planned <= 0 or actual < 0
    """
    if item.planned_cents <= 0:
        raise InvalidBudgetError(item.category, "planned budget must be positive")
    if item.actual_cents < 0:
        raise InvalidBudgetError(item.category, "actual spend cannot be negative")

    # Enough digits that the quotient never rounds onto 100 when actual != planned
    with localcontext() as ctx:
        ctx.prec = 28 + len(str(item.actual_cents)) + len(str(item.planned_cents))
        percentage_used = Decimal(item.actual_cents) * 100 / Decimal(item.planned_cents)

    return BudgetStatus(
        category=item.category,
        percentage_used=percentage_used,
        over_budget=item.actual_cents > item.planned_cents,
        overage_cents=max(0, item.actual_cents - item.planned_cents),
        actual_cents=item.actual_cents,
        planned_cents=item.planned_cents,
    )


def evaluate_budget(categories: Iterable[BudgetCategory]) -> List[BudgetResult]:
    """
    Evaluate every category, keeping going past invalid ones.

    Each result carries either a BudgetStatus or the InvalidBudgetError for
    that category, in input order.
    """
    results = []
    for item in categories:
        try:
            results.append(BudgetResult(category=item.category, status=evaluate_category(item)))
        except InvalidBudgetError as e:
            results.append(BudgetResult(category=item.category, error=e))
    return results


def summarize_budget(results: Iterable[BudgetResult]) -> BudgetOverview:
    """Totals over the results that evaluated successfully"""
    results = list(results)
    statuses = [r.status for r in results if r.ok]
    over = tuple(s.category for s in statuses if s.over_budget)

    return BudgetOverview(
        total_planned_cents=sum(s.planned_cents for s in statuses),
        total_actual_cents=sum(s.actual_cents for s in statuses),
        over_budget_count=len(over),
        failed_count=len(results) - len(statuses),
        over_budget_categories=over,
    )
