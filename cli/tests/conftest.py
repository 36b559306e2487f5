"""Shared test configuration for pytest.

Puts cli/ on sys.path so `applebridge` imports without installation.
"""

import sys
from pathlib import Path

cli_dir = Path(__file__).resolve().parents[1]
if str(cli_dir) not in sys.path:
    sys.path.insert(0, str(cli_dir))


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "macos: mark test as needing a real osascript"
    )
