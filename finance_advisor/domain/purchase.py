"""Purchase impact analyzer - what-if simulation of a one-time expenditure"""

from dataclasses import dataclass
from typing import Optional

from finance_advisor.domain.exceptions import InvalidInputError
from finance_advisor.domain.models import (
    FinancialSnapshot,
    PurchaseImpactResult,
    PurchaseRequest,
    PurchaseVerdict,
)
from finance_advisor.utils.money import ceil_div, from_cents


@dataclass(frozen=True)
class PurchaseMessages:
    """
    Text templates for purchase verdicts and advice.

    Placeholders: {impact} (formatted amount), {months} (integer).
    """

    recommended: str = "Purchase recommended: it will not significantly affect your finances."
    impacts_savings: str = "Purchase possible, but it will reduce your savings goal by {impact}."
    not_recommended: str = "Purchase not recommended: it would leave you with a negative balance."
    wait_advice: str = "Consider saving for {months} months before making this purchase."
    recover_advice: str = "You will need {months} months to recover the impact on your savings."
    unrecoverable_advice: str = (
        "Your monthly expenses match or exceed your income, so this gap will not close on its own."
    )


DEFAULT_PURCHASE_MESSAGES = PurchaseMessages()


def format_amount(cents: int) -> str:
    return f"{from_cents(cents):,.2f}"


def months_to_cover(shortfall_cents: int, monthly_surplus_cents: int) -> Optional[int]:
    """
    Months of surplus needed to cover a shortfall.

    Returns 0 for no shortfall and None when the surplus is zero or negative,
    since a perpetual deficit never covers anything.
    """
    if shortfall_cents <= 0:
        return 0
    if monthly_surplus_cents <= 0:
        return None
    return ceil_div(shortfall_cents, monthly_surplus_cents)


def analyze_purchase(
    snapshot: FinancialSnapshot,
    request: PurchaseRequest,
    messages: PurchaseMessages = DEFAULT_PURCHASE_MESSAGES,
) -> PurchaseImpactResult:
    """
    Simulate a one-time purchase against the current snapshot.

    Requirements:
    - Post-purchase balance = balance - amount (may go negative)
    - Safety margin = balance - savings goal (may be negative)
    - Savings impact = max(0, amount - safety margin)
    - Affordable iff post-purchase balance >= 0
    - Verdict: negative balance → not recommended with wait advice,
      savings impact → possible with recovery advice, else recommended

    Raises:
        InvalidInputError: amount is zero or negative
    """
    if request.amount_cents <= 0:
        raise InvalidInputError("Purchase amount must be positive")

    surplus = snapshot.monthly_surplus_cents
    post_purchase_balance = snapshot.current_balance_cents - request.amount_cents
    safety_margin = snapshot.current_balance_cents - snapshot.savings_goal_cents
    savings_impact = max(0, request.amount_cents - safety_margin)
    months_to_recover = months_to_cover(savings_impact, surplus)
    wait_months = months_to_cover(-post_purchase_balance, surplus)

    if post_purchase_balance < 0:
        verdict = PurchaseVerdict.NOT_RECOMMENDED
        message = messages.not_recommended
        if wait_months is None:
            advice = messages.unrecoverable_advice
        else:
            advice = messages.wait_advice.format(months=wait_months)
    elif savings_impact > 0:
        verdict = PurchaseVerdict.IMPACTS_SAVINGS
        message = messages.impacts_savings.format(impact=format_amount(savings_impact))
        if months_to_recover is None:
            advice = messages.unrecoverable_advice
        else:
            advice = messages.recover_advice.format(months=months_to_recover)
    else:
        verdict = PurchaseVerdict.RECOMMENDED
        message = messages.recommended
        advice = None

    return PurchaseImpactResult(
        affordable=post_purchase_balance >= 0,
        post_purchase_balance_cents=post_purchase_balance,
        safety_margin_cents=safety_margin,
        savings_impact_cents=savings_impact,
        months_to_recover_impact=months_to_recover,
        wait_months=wait_months,
        verdict=verdict,
        message=message,
        alternative_advice=advice,
    )
