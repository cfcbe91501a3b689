"""Unit tests for savings suggestion aggregation"""

from finance_advisor.domain.models import Difficulty, SavingSuggestion
from finance_advisor.domain.suggestions import (
    DEFAULT_SAVING_SUGGESTIONS,
    summarize_suggestions,
    totals_by_category,
)


def test_summarize_default_catalog():
    """Test canonical catalog totals: 394.00 per month"""
    summary = summarize_suggestions(DEFAULT_SAVING_SUGGESTIONS)

    assert len(summary.suggestions) == 5
    assert summary.total_monthly_cents == 39_400
    assert summary.total_annual_cents == 472_800


def test_summarize_preserves_order():
    """Test catalog order is kept for presentation"""
    summary = summarize_suggestions(reversed(DEFAULT_SAVING_SUGGESTIONS))

    assert summary.suggestions == tuple(reversed(DEFAULT_SAVING_SUGGESTIONS))
    assert summary.suggestions[0].title == "Cancel the gym and work out at home"


def test_summarize_empty_catalog():
    """Test empty catalog totals zero"""
    summary = summarize_suggestions([])

    assert summary.suggestions == ()
    assert summary.total_monthly_cents == 0
    assert summary.total_annual_cents == 0


def test_annual_total_is_twelve_times_monthly():
    """Test annual total identity for several catalogs"""
    custom = SavingSuggestion(
        title="Brew coffee at home",
        description="Skip the café on weekdays",
        category="Food",
        potential_monthly_saving_cents=3_333,
        difficulty=Difficulty.MEDIUM,
    )
    for catalog in ([], [custom], list(DEFAULT_SAVING_SUGGESTIONS) + [custom]):
        summary = summarize_suggestions(catalog)
        assert summary.total_annual_cents == summary.total_monthly_cents * 12


def test_totals_by_category():
    """Test grouping keeps first-seen category order"""
    totals = totals_by_category(DEFAULT_SAVING_SUGGESTIONS)

    assert totals == {"Food": 14_000, "Bills": 4_500, "Transport": 12_000, "Health": 8_900}
    assert list(totals) == ["Food", "Bills", "Transport", "Health"]


def test_difficulty_labels():
    """Test difficulty display labels"""
    assert Difficulty.EASY.label == "Easy"
    assert Difficulty("hard") is Difficulty.HARD
