"""
Shared test fixtures and path constants for pycabrillo tests.

Sample logs live in tests/data/. If files move or new ones are added,
update the constants here.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample log paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
DATA_DIR = Path(__file__).resolve().parent / "data"

ALLFIELDS_LOG = DATA_DIR / "allfields.log"
K1IR_LOG = DATA_DIR / "k1ir.log"
CRLF_LOG = DATA_DIR / "crlf.log"


@pytest.fixture
def allfields_text() -> str:
    return ALLFIELDS_LOG.read_text(encoding="utf-8")


@pytest.fixture
def k1ir_bytes() -> bytes:
    return K1IR_LOG.read_bytes()


@pytest.fixture
def crlf_bytes() -> bytes:
    return CRLF_LOG.read_bytes()


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (parses complete sample logs)",
    )
