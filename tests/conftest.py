"""Test configuration and fixtures for the Lending Catalog.

Every test gets fresh patrons, books and desks, and the cached configuration
is reset around each test so environment overrides never leak.
"""

from collections.abc import Generator

import pytest

from lending_catalog.catalog import Catalog
from lending_catalog.config import CatalogConfig, reset_config
from lending_catalog.desk import LendingDesk
from lending_catalog.models import Book, Patron
from lending_catalog.seed import build_sample_desk

# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def isolated_config() -> Generator[None, None, None]:
    """Reset the global configuration before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def test_config() -> CatalogConfig:
    """Configuration with debug output and no sample data."""
    return CatalogConfig(
        catalog_name="test-catalog",
        debug=True,
        log_level="DEBUG",
        load_sample_data=False,
    )


# === Patron Fixtures ===


@pytest.fixture
def alice() -> Patron:
    return Patron(name="Alice", is_privileged=True, credential="password123")


@pytest.fixture
def bob() -> Patron:
    return Patron(name="Bob")


@pytest.fixture
def carol() -> Patron:
    """A second premium patron, used to test reservation ownership."""
    return Patron(name="Carol", is_privileged=True, credential="s3cret")


# === Book Fixtures ===


@pytest.fixture
def emma() -> Book:
    return Book(title="Emma")


@pytest.fixture
def nineteen_eighty_four() -> Book:
    return Book(title="1984", requires_privilege=True)


@pytest.fixture
def catalog(emma: Book, nineteen_eighty_four: Book) -> Catalog:
    return Catalog([emma, nineteen_eighty_four])


@pytest.fixture
def desk(catalog: Catalog, alice: Patron, bob: Patron, carol: Patron) -> LendingDesk:
    """Desk with Emma and 1984 and three registered patrons."""
    return LendingDesk(catalog, [alice, bob, carol])


@pytest.fixture
def sample_desk() -> LendingDesk:
    return build_sample_desk()
