"""Balance projection engine - forward balance simulation over a month horizon"""

from decimal import Decimal
from typing import List, Optional

from finance_advisor.domain.exceptions import InvalidInputError
from finance_advisor.domain.models import FinancialSnapshot, ProjectionResult
from finance_advisor.utils.money import round_cents

DEFAULT_HORIZON_MONTHS = 12


def projected_amount(base_cents: int, growth_rate: Decimal, month: int) -> int:
    """
    Value of a monthly amount after `month` months of linear growth.

    Growth is applied to the base value scaled by the month index, not
    compounded month over month:

        base * (1 + rate * month)

    Example:
        3200.00 at 2%/month, month 3 → 3200 * 1.06 = 3392.00
    """
    return round_cents(Decimal(base_cents) * (1 + growth_rate * month))


def project_balance(
    snapshot: FinancialSnapshot,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    stop_at_insolvency: bool = False,
) -> ProjectionResult:
    """
    Project the account balance month by month.

    Requirements:
    - Running balance seeded at the current balance
    - Each month adds projected income and subtracts projected expenses
    - Insolvency month is the first month whose balance is <= 0, set once
    - Full horizon is simulated unless stop_at_insolvency is set, in which
      case the series ends at the insolvency month

    Raises:
        InvalidInputError: horizon_months < 1
    """
    if horizon_months < 1:
        raise InvalidInputError("horizon_months must be at least 1")

    balance = snapshot.current_balance_cents
    balances: List[int] = []
    insolvency_month: Optional[int] = None

    for month in range(1, horizon_months + 1):
        income = projected_amount(snapshot.monthly_income_cents, snapshot.income_growth_rate, month)
        expenses = projected_amount(snapshot.monthly_expenses_cents, snapshot.expense_growth_rate, month)
        balance += income - expenses
        balances.append(balance)

        if balance <= 0 and insolvency_month is None:
            insolvency_month = month
            if stop_at_insolvency:
                break

    return ProjectionResult(
        monthly_balances_cents=tuple(balances),
        insolvency_month=insolvency_month,
        final_balance_cents=balances[-1],
    )
