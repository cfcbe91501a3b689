"""Advisor service - wires configuration and data tables into the engine and logs each call"""

from datetime import date
from typing import Iterable, List, Optional

from finance_advisor.config import Settings, settings as default_settings
from finance_advisor.domain.budget import evaluate_budget, summarize_budget
from finance_advisor.domain.models import (
    BudgetCategory,
    BudgetOverview,
    BudgetResult,
    FinancialSnapshot,
    GoalProgress,
    MonthlySummary,
    ProjectionResult,
    PurchaseImpactResult,
    PurchaseRequest,
    RiskAssessment,
    SavingsGoal,
    SavingSuggestion,
    SuggestionSummary,
)
from finance_advisor.domain.projection import project_balance
from finance_advisor.domain.purchase import DEFAULT_PURCHASE_MESSAGES, PurchaseMessages, analyze_purchase
from finance_advisor.domain.risk import DEFAULT_RECOMMENDATIONS, RecommendationTable, classify_risk
from finance_advisor.domain.suggestions import DEFAULT_SAVING_SUGGESTIONS, summarize_suggestions
from finance_advisor.domain.summary import summarize_month, track_goal
from finance_advisor.infrastructure.observability.logging import (
    log_assessment,
    log_budget_evaluation,
    log_forecast,
    log_goal_progress,
    log_monthly_summary,
    log_purchase_analysis,
    log_suggestion_summary,
    setup_logging,
)


class FinancialAdvisor:
    """
    Entry point for presentation code.

    Holds the settings and the injectable text/catalog tables; every call
    delegates to a pure engine function and logs the outcome.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        recommendations: Optional[RecommendationTable] = None,
        catalog: Optional[Iterable[SavingSuggestion]] = None,
        messages: Optional[PurchaseMessages] = None,
    ):
        self.settings = settings or default_settings
        self.recommendations = recommendations or DEFAULT_RECOMMENDATIONS
        self.catalog = tuple(DEFAULT_SAVING_SUGGESTIONS if catalog is None else catalog)
        self.messages = messages or DEFAULT_PURCHASE_MESSAGES

    def configure_logging(self) -> None:
        """Install the JSON log handler at the configured level and service name"""
        setup_logging(self.settings.log_level, service_name=self.settings.service_name)

    def forecast(self, snapshot: FinancialSnapshot, horizon_months: Optional[int] = None) -> ProjectionResult:
        if horizon_months is None:
            horizon_months = self.settings.default_horizon_months
        projection = project_balance(
            snapshot,
            horizon_months,
            stop_at_insolvency=self.settings.stop_at_insolvency,
        )
        log_forecast(projection.insolvency_month, horizon_months, projection.final_balance_cents)
        return projection

    def assess_risk(self, snapshot: FinancialSnapshot, horizon_months: Optional[int] = None) -> RiskAssessment:
        """Project the balance and classify the resulting insolvency risk"""
        horizon = self.settings.default_horizon_months if horizon_months is None else horizon_months
        projection = self.forecast(snapshot, horizon)
        assessment = classify_risk(
            snapshot,
            projection,
            recommendations=self.recommendations,
            low_surplus_threshold_cents=self.settings.low_surplus_threshold_cents,
            high_risk_max_month=self.settings.high_risk_max_month,
            medium_risk_max_month=self.settings.medium_risk_max_month,
        )

        log_assessment(
            assessment.level.value,
            projection.insolvency_month,
            horizon,
            projection.final_balance_cents,
        )
        return assessment

    def simulate_purchase(self, snapshot: FinancialSnapshot, request: PurchaseRequest) -> PurchaseImpactResult:
        result = analyze_purchase(snapshot, request, messages=self.messages)
        log_purchase_analysis(
            result.verdict.value,
            request.amount_cents,
            result.affordable,
            result.months_to_recover_impact,
        )
        return result

    def suggestions(self) -> SuggestionSummary:
        summary = summarize_suggestions(self.catalog)
        log_suggestion_summary(len(summary.suggestions), summary.total_monthly_cents)
        return summary

    def track_budget(self, categories: Iterable[BudgetCategory]) -> List[BudgetResult]:
        """Evaluate budget categories; invalid ones come back as per-item errors"""
        results = evaluate_budget(categories)
        failed = sum(1 for r in results if not r.ok)
        over = sum(1 for r in results if r.ok and r.status.over_budget)
        log_budget_evaluation(len(results) - failed, over, failed)
        return results

    def budget_overview(self, categories: Iterable[BudgetCategory]) -> BudgetOverview:
        return summarize_budget(self.track_budget(categories))

    def monthly_summary(self, snapshot: FinancialSnapshot) -> MonthlySummary:
        summary = summarize_month(snapshot)
        log_monthly_summary(summary.surplus_cents, summary.savings_rate)
        return summary

    def goal_progress(self, goal: SavingsGoal, as_of: date) -> GoalProgress:
        progress = track_goal(goal, as_of)
        log_goal_progress(goal.title, progress.progress, progress.days_left)
        return progress
