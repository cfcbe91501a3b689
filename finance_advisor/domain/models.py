"""Domain models - pure Python dataclasses representing forecast inputs and results"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from finance_advisor.domain.exceptions import InvalidBudgetError, InvalidInputError
from finance_advisor.utils.money import rate


class RiskLevel(str, Enum):
    """Insolvency risk tier"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} risk"


class Difficulty(str, Enum):
    """How hard a saving suggestion is to put into practice"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class PurchaseVerdict(str, Enum):
    """Outcome of a what-if purchase simulation"""

    RECOMMENDED = "recommended"
    IMPACTS_SAVINGS = "impacts_savings"
    NOT_RECOMMENDED = "not_recommended"


@dataclass(frozen=True)
class FinancialSnapshot:
    """
    Point-in-time view of a user's finances.

    Money fields are integer cents and must be non-negative. Growth rates are
    fractional per-month values (0.05 = 5%/month); zero and negative rates are
    accepted as-is.
    """

    current_balance_cents: int
    monthly_income_cents: int
    monthly_expenses_cents: int
    income_growth_rate: Decimal = Decimal("0")
    expense_growth_rate: Decimal = Decimal("0")
    savings_goal_cents: int = 0
    current_savings_cents: int = 0

    def __post_init__(self) -> None:
        for name in (
            "current_balance_cents",
            "monthly_income_cents",
            "monthly_expenses_cents",
            "savings_goal_cents",
            "current_savings_cents",
        ):
            if getattr(self, name) < 0:
                raise InvalidInputError(f"{name} must be non-negative")

        object.__setattr__(self, "income_growth_rate", rate(self.income_growth_rate))
        object.__setattr__(self, "expense_growth_rate", rate(self.expense_growth_rate))

    @property
    def monthly_surplus_cents(self) -> int:
        """Income minus expenses; negative for a monthly deficit"""
        return self.monthly_income_cents - self.monthly_expenses_cents


@dataclass(frozen=True)
class ProjectionResult:
    """Forward balance projection over a horizon"""

    monthly_balances_cents: Tuple[int, ...]
    insolvency_month: Optional[int]  # 1-based, first month with balance <= 0
    final_balance_cents: int

    @property
    def is_insolvent(self) -> bool:
        return self.insolvency_month is not None


@dataclass(frozen=True)
class RiskAssessment:
    """Output of risk classification"""

    level: RiskLevel
    projection: ProjectionResult
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class PurchaseRequest:
    """Hypothetical one-time expenditure"""

    amount_cents: int
    description: str = ""


@dataclass(frozen=True)
class PurchaseImpactResult:
    """Output of a purchase simulation"""

    affordable: bool
    post_purchase_balance_cents: int  # may be negative
    safety_margin_cents: int  # may be negative
    savings_impact_cents: int
    # None when the monthly surplus is zero or negative (cannot recover)
    months_to_recover_impact: Optional[int]
    wait_months: Optional[int]
    verdict: PurchaseVerdict
    message: str
    alternative_advice: Optional[str] = None

    @property
    def recoverable(self) -> bool:
        return self.months_to_recover_impact is not None and self.wait_months is not None


@dataclass(frozen=True)
class SavingSuggestion:
    """Single savings idea from the catalog"""

    title: str
    description: str
    category: str
    potential_monthly_saving_cents: int
    difficulty: Difficulty


@dataclass(frozen=True)
class SuggestionSummary:
    """Catalog plus its aggregate savings"""

    suggestions: Tuple[SavingSuggestion, ...]
    total_monthly_cents: int

    @property
    def total_annual_cents(self) -> int:
        return self.total_monthly_cents * 12


@dataclass(frozen=True)
class BudgetCategory:
    """Planned vs actual spend for one category"""

    category: str
    actual_cents: int
    planned_cents: int


@dataclass(frozen=True)
class BudgetStatus:
    """Evaluated budget category"""

    category: str
    percentage_used: Decimal
    over_budget: bool
    overage_cents: int
    actual_cents: int = 0
    planned_cents: int = 0


@dataclass(frozen=True)
class BudgetResult:
    """Per-item outcome of a batch budget evaluation: a status or an error"""

    category: str
    status: Optional[BudgetStatus] = None
    error: Optional[InvalidBudgetError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BudgetOverview:
    """Totals across the successfully evaluated budget categories"""

    total_planned_cents: int
    total_actual_cents: int
    over_budget_count: int
    failed_count: int
    over_budget_categories: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MonthlySummary:
    """Headline ratios for the current month"""

    surplus_cents: int
    savings_rate: Optional[Decimal]  # surplus / income * 100
    expense_rate: Optional[Decimal]  # expenses / income * 100
    savings_goal_progress: Optional[Decimal]  # current savings / goal * 100


@dataclass(frozen=True)
class SavingsGoal:
    """Target the user is saving towards"""

    title: str
    target_cents: int
    current_cents: int
    deadline: date
    category: str = ""


@dataclass(frozen=True)
class GoalProgress:
    """Progress towards a savings goal as of a reference date"""

    goal: SavingsGoal
    progress: Decimal  # percent, capped to 0-100
    remaining_cents: int
    days_left: int  # negative once the deadline has passed
