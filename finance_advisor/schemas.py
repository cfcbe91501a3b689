"""Pydantic schemas for validating loosely typed form payloads

Amounts arrive in currency units and are converted to the engine's integer
cents by the to_* methods. Money fields accept at most two decimal places,
so that conversion never has to round.
"""

import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, Field

from finance_advisor.domain.models import BudgetCategory, FinancialSnapshot, PurchaseRequest
from finance_advisor.utils.money import to_cents


class SnapshotInput(BaseModel):
    """Financial snapshot as submitted by a client"""

    current_balance: Decimal = Field(..., ge=0, decimal_places=2, description="Current account balance")
    monthly_income: Decimal = Field(..., ge=0, decimal_places=2)
    monthly_expenses: Decimal = Field(..., ge=0, decimal_places=2)
    income_growth_rate: Decimal = Field(Decimal("0"), description="Fractional growth per month")
    expense_growth_rate: Decimal = Field(Decimal("0"), description="Fractional growth per month")
    savings_goal: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)
    current_savings: Decimal = Field(Decimal("0"), ge=0, decimal_places=2)

    def to_snapshot(self) -> FinancialSnapshot:
        return FinancialSnapshot(
            current_balance_cents=to_cents(self.current_balance),
            monthly_income_cents=to_cents(self.monthly_income),
            monthly_expenses_cents=to_cents(self.monthly_expenses),
            income_growth_rate=self.income_growth_rate,
            expense_growth_rate=self.expense_growth_rate,
            savings_goal_cents=to_cents(self.savings_goal),
            current_savings_cents=to_cents(self.current_savings),
        )


class PurchaseInput(BaseModel):
    """Purchase simulation form"""

    amount: Decimal = Field(..., gt=0, decimal_places=2, description="Purchase amount")
    description: str = ""

    def to_request(self) -> PurchaseRequest:
        return PurchaseRequest(amount_cents=to_cents(self.amount), description=self.description)


class BudgetCategoryInput(BaseModel):
    """Budget line; a non-positive plan is reported per item by the tracker"""

    category: str = Field(..., min_length=1)
    actual: Decimal = Field(..., ge=0, decimal_places=2)
    planned: Decimal = Field(..., decimal_places=2)

    def to_category(self) -> BudgetCategory:
        return BudgetCategory(
            category=self.category,
            actual_cents=to_cents(self.actual),
            planned_cents=to_cents(self.planned),
        )


class TransactionInput(BaseModel):
    """Income or expense entry from the transaction form"""

    type: Literal["income", "expense"]
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    category: str = Field(..., min_length=1)
    description: str = ""
    date: datetime.date
    notes: Optional[str] = None


class TransactionTally(BaseModel):
    """Transactions aggregated into monthly totals"""

    income_cents: int = 0
    expense_cents: int = 0
    expenses_by_category: Dict[str, int] = Field(default_factory=dict)

    def to_budget(self, planned: Dict[str, Decimal]) -> List[BudgetCategory]:
        """Pair actual spend with planned amounts, one line per planned category"""
        return [
            BudgetCategory(
                category=category,
                actual_cents=self.expenses_by_category.get(category, 0),
                planned_cents=to_cents(amount),
            )
            for category, amount in planned.items()
        ]


def tally_transactions(transactions: Iterable[TransactionInput]) -> TransactionTally:
    """Sum income and expenses, grouping expenses by category in first-seen order"""
    tally = TransactionTally()
    for txn in transactions:
        cents = to_cents(txn.amount)
        if txn.type == "income":
            tally.income_cents += cents
        else:
            tally.expense_cents += cents
            tally.expenses_by_category[txn.category] = tally.expenses_by_category.get(txn.category, 0) + cents
    return tally
