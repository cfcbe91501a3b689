"""Savings suggestion catalog and aggregation"""

from typing import Dict, Iterable, Tuple

from finance_advisor.domain.models import Difficulty, SavingSuggestion, SuggestionSummary

DEFAULT_SAVING_SUGGESTIONS: Tuple[SavingSuggestion, ...] = (
    SavingSuggestion(
        title="Cut back on food delivery",
        description="Cooking at home twice a week instead of ordering delivery can save:",
        category="Food",
        potential_monthly_saving_cents=8_000,
        difficulty=Difficulty.EASY,
    ),
    SavingSuggestion(
        title="Renegotiate subscription plans",
        description="Review your streaming and phone plans, cheaper options are often available:",
        category="Bills",
        potential_monthly_saving_cents=4_500,
        difficulty=Difficulty.EASY,
    ),
    SavingSuggestion(
        title="Use public transport",
        description="Replacing ride-hailing with public transport three times a week can save:",
        category="Transport",
        potential_monthly_saving_cents=12_000,
        difficulty=Difficulty.MEDIUM,
    ),
    SavingSuggestion(
        title="Buy generic products",
        description="Switching to store brands at the supermarket can reduce the bill by:",
        category="Food",
        potential_monthly_saving_cents=6_000,
        difficulty=Difficulty.EASY,
    ),
    SavingSuggestion(
        title="Cancel the gym and work out at home",
        description="Workout apps and outdoor activities can replace a gym membership:",
        category="Health",
        potential_monthly_saving_cents=8_900,
        difficulty=Difficulty.HARD,
    ),
)


def summarize_suggestions(catalog: Iterable[SavingSuggestion]) -> SuggestionSummary:
    """
    Total the potential monthly savings of a catalog.

    Catalog order is preserved. The annual total is derived from the monthly
    total (x12) on the summary itself. An empty catalog totals zero.
    """
    suggestions = tuple(catalog)
    total_monthly = sum(s.potential_monthly_saving_cents for s in suggestions)

    return SuggestionSummary(suggestions=suggestions, total_monthly_cents=total_monthly)


def totals_by_category(catalog: Iterable[SavingSuggestion]) -> Dict[str, int]:
    """Potential monthly savings per category, in first-seen category order"""
    totals: Dict[str, int] = {}
    for suggestion in catalog:
        totals[suggestion.category] = totals.get(suggestion.category, 0) + suggestion.potential_monthly_saving_cents
    return totals
