"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path
from typing import Any

import pytest

from monval.core.config import reload_config


@pytest.fixture
def statement_csv(tmp_path: Path) -> Path:
    """Write a small bank statement CSV with free-form amounts."""
    path = tmp_path / "statement.csv"
    path.write_text(
        "date,payee,amount\n"
        "2024-08-15,Coffee Shop,$4.50\n"
        "2024-08-16,Payroll,\"USD 1,234.56\"\n"
        "2024-08-17,Refund,-0.01 USD\n"
    )
    return path


@pytest.fixture
def amount_text_cases() -> list[dict[str, Any]]:
    """Monetary text paired with the expected amount in minor units."""
    return [
        {"input": "4", "amount": 400},
        {"input": "$ 4.00", "amount": 400},
        {"input": "USD 4.005", "amount": 400},
        {"input": "2.05", "amount": 205},
        {"input": "-$0.01", "amount": -1},
        {"input": "345,689.25", "amount": 34568925},
        {"input": "345 689.25", "amount": 34568925},
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("MONVAL_ENV", "test")
    monkeypatch.delenv("MONVAL_OVERFLOW", raising=False)
    monkeypatch.delenv("MONVAL_CURRENCY_CODE", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("DEBUG", "false")
    reload_config()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for amount parsing, formatting and precision"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )
