"""
Freelance Workflow Test Configuration

Shared fixtures for all tests.
"""
import pytest
from datetime import datetime
from pathlib import Path

from common.models import Client, Freelancer
from modules.receipts import ReceiptLogger
from modules.workflow import clear_cache


FROZEN_NOW = datetime(2026, 2, 1, 12, 0, 0)


# =============================================================================
# FIXTURES: Participants
# =============================================================================

@pytest.fixture
def client() -> Client:
    return Client("John", "john@x.com", "TechCorp")


@pytest.fixture
def freelancer() -> Freelancer:
    return Freelancer("Alice", "a@x.com", "Dev", 75.0)


# =============================================================================
# FIXTURES: Receipts
# =============================================================================

@pytest.fixture
def frozen_clock():
    """Clock returning a fixed instant for deterministic receipts."""
    return lambda: FROZEN_NOW


@pytest.fixture
def receipts_file(tmp_path) -> Path:
    return tmp_path / "payment_receipts.txt"


@pytest.fixture
def receipt_logger(receipts_file, frozen_clock) -> ReceiptLogger:
    return ReceiptLogger(receipts_file, clock=frozen_clock)


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Loaded YAML configs must not leak between tests."""
    clear_cache()
    yield
    clear_cache()
