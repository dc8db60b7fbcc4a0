"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    │   ├── domain/            # Entities, store, resolver, services
    │   ├── application/       # Query objects (port delegation)
    │   ├── infrastructure/    # In-memory report adapter
    │   ├── presentation/      # CLI and formatting
    │   ├── config/            # Settings
    │   └── demo/              # Demo data generator
    └── shared/                # Shared fixtures and utilities
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from agrisales_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
