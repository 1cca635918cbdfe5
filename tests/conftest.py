"""Shared pytest fixtures for portfolio_options tests."""

import sys
from pathlib import Path

# Add src (package) and repo root (tests.fixtures) to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

# Import all fixtures for global availability
from tests.fixtures.option_fixtures import *  # noqa: E402,F401,F403
