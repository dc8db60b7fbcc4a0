"""Fixtures for the in-memory report adapter tests."""

from datetime import date

import pytest

from agrisales.domain.sales.services import TimeWindowResolver
from agrisales.infrastructure.reporting import InMemoryReportAdapter
from agrisales_config.settings import Settings
from agrisales_demo.seed import generate_demo_store
from tests.shared.fixtures.factories import TestStoreFactory


@pytest.fixture
def resolver() -> TimeWindowResolver:
    return TimeWindowResolver(date(2024, 10, 1), date(2025, 9, 30))


@pytest.fixture
def scenario_adapter(resolver) -> InMemoryReportAdapter:
    return InMemoryReportAdapter(TestStoreFactory.scenario_store(), resolver)


@pytest.fixture(scope="module")
def demo_store():
    return generate_demo_store(Settings(_env_file=None))


@pytest.fixture
def demo_adapter(demo_store, resolver) -> InMemoryReportAdapter:
    return InMemoryReportAdapter(demo_store, resolver)
