"""Pytest fixtures for testing"""

import logging
from decimal import Decimal
from typing import Generator

import pytest

from finance_advisor.config import Settings
from finance_advisor.domain.models import BudgetCategory, FinancialSnapshot


@pytest.fixture
def sample_snapshot() -> FinancialSnapshot:
    """Healthy finances: 2000.00 monthly surplus that keeps growing"""
    return FinancialSnapshot(
        current_balance_cents=235_000,  # $2350
        monthly_income_cents=320_000,  # $3200
        monthly_expenses_cents=120_000,  # $1200
        income_growth_rate=Decimal("0.02"),
        expense_growth_rate=Decimal("0.05"),
        savings_goal_cents=100_000,  # $1000
        current_savings_cents=75_000,  # $750
    )


@pytest.fixture
def tight_snapshot() -> FinancialSnapshot:
    """Same user with expenses of 3100.00: surplus of 100.00 eroded by expense growth"""
    return FinancialSnapshot(
        current_balance_cents=235_000,
        monthly_income_cents=320_000,
        monthly_expenses_cents=310_000,
        income_growth_rate=Decimal("0.02"),
        expense_growth_rate=Decimal("0.05"),
        savings_goal_cents=100_000,
        current_savings_cents=75_000,
    )


@pytest.fixture
def budget_categories() -> list[BudgetCategory]:
    """Monthly budget with one category over plan"""
    return [
        BudgetCategory(category="Food", actual_cents=45_000, planned_cents=50_000),
        BudgetCategory(category="Transport", actual_cents=20_000, planned_cents=25_000),
        BudgetCategory(category="Bills", actual_cents=40_000, planned_cents=35_000),
        BudgetCategory(category="Leisure", actual_cents=15_000, planned_cents=20_000),
    ]


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file"""
    return Settings(_env_file=None)


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Undo handler changes made by setup_logging"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
