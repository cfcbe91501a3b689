"""Structured JSON logging for advisor calls"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "finance-advisor"

logger = logging.getLogger("finance_advisor")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def __init__(self, *args: Any, service_name: str = SERVICE_NAME, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str = "INFO", service_name: str = SERVICE_NAME) -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s",
        service_name=service_name,
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_assessment(
    risk_level: str,
    insolvency_month: Optional[int],
    horizon_months: int,
    final_balance_cents: int,
) -> None:
    """Log structured risk assessment outcome"""
    logger.info(
        "Risk assessment completed",
        extra={
            "step": "risk_assessment",
            "risk_level": risk_level,
            "insolvency_month": insolvency_month,
            "horizon_months": horizon_months,
            "final_balance_cents": final_balance_cents,
        },
    )


def log_purchase_analysis(
    verdict: str,
    amount_cents: int,
    affordable: bool,
    months_to_recover: Optional[int],
) -> None:
    """Log structured purchase simulation outcome"""
    logger.info(
        "Purchase simulation completed",
        extra={
            "step": "purchase_simulation",
            "verdict": verdict,
            "amount_cents": amount_cents,
            "affordability": "affordable" if affordable else "unaffordable",
            "months_to_recover": months_to_recover,
        },
    )


def log_budget_evaluation(evaluated: int, over_budget: int, failed: int) -> None:
    """Log structured budget evaluation outcome; invalid categories are warned"""
    level = logging.WARNING if failed else logging.INFO
    logger.log(
        level,
        "Budget evaluation completed",
        extra={
            "step": "budget_evaluation",
            "evaluated": evaluated,
            "over_budget": over_budget,
            "failed": failed,
        },
    )


def log_forecast(insolvency_month: Optional[int], horizon_months: int, final_balance_cents: int) -> None:
    """Log structured balance projection outcome"""
    logger.info(
        "Forecast completed",
        extra={
            "step": "forecast",
            "insolvency_month": insolvency_month,
            "horizon_months": horizon_months,
            "final_balance_cents": final_balance_cents,
        },
    )


def log_suggestion_summary(suggestion_count: int, total_monthly_cents: int) -> None:
    logger.info(
        "Suggestion summary completed",
        extra={
            "step": "suggestion_summary",
            "suggestion_count": suggestion_count,
            "total_monthly_cents": total_monthly_cents,
        },
    )


def log_monthly_summary(surplus_cents: int, savings_rate: Optional[Decimal]) -> None:
    logger.info(
        "Monthly summary completed",
        extra={
            "step": "monthly_summary",
            "surplus_cents": surplus_cents,
            "savings_rate": None if savings_rate is None else str(savings_rate),
        },
    )


def log_goal_progress(goal_title: str, progress: Decimal, days_left: int) -> None:
    logger.info(
        "Goal progress completed",
        extra={
            "step": "goal_progress",
            "goal_title": goal_title,
            "progress": str(progress),
            "days_left": days_left,
        },
    )
