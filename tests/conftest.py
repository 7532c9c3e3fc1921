"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, pure logic (paths, models, a single index)
- integration/ Real workspaces written to temp directories

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from config import AnalyzerSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")
    config.addinivalue_line("markers", "slow: Tests that take > 1s")


@pytest.fixture
def quiet_settings():
    """Settings with console output switched off."""
    return AnalyzerSettings(verbose=False)
