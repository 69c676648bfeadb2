"""
Tests for the Catalog collections.

These tests verify:
1. Lookup is exact and case-insensitive, optionally scoped by state
2. Applying a transition keeps book state and collection membership aligned
3. Browsing lists shelf books in catalogue order and can be restarted
"""

import pytest

from lending_catalog.catalog import Catalog
from lending_catalog.exceptions import (
    CatalogIntegrityError,
    DuplicateTitleError,
    NotFoundError,
)
from lending_catalog.models import Book, BrowseEntry, BrowseStatus, ItemState, Transition


class TestCatalogSetup:
    def test_books_start_available(self, catalog, emma, nineteen_eighty_four):
        assert len(catalog) == 2
        assert catalog.available == [emma, nineteen_eighty_four]
        assert catalog.borrowed == []
        assert catalog.reserved == []

    def test_duplicate_title_rejected(self, catalog):
        with pytest.raises(DuplicateTitleError):
            catalog.add(Book(title="EMMA"))

    def test_non_available_book_rejected(self):
        with pytest.raises(ValueError):
            Catalog([Book(title="Emma", state=ItemState.BORROWED)])

    def test_contains(self, catalog):
        assert "emma" in catalog
        assert " 1984 " in catalog
        assert "Persuasion" not in catalog
        assert 1984 not in catalog

    def test_iteration_follows_catalogue_order(self, catalog):
        assert [book.title for book in catalog] == ["Emma", "1984"]


class TestLookup:
    @pytest.mark.parametrize("title", ["Emma", "emma", "EMMA", "  Emma  "])
    def test_case_insensitive(self, catalog, emma, title):
        assert catalog.lookup(title) is emma

    def test_no_fuzzy_matching(self, catalog):
        for title in ("Emm", "Emma!", "The Emma"):
            with pytest.raises(NotFoundError):
                catalog.lookup(title)

    def test_not_found_message(self, catalog):
        with pytest.raises(NotFoundError) as exc_info:
            catalog.lookup("Persuasion")

        assert str(exc_info.value) == (
            "Book 'Persuasion' not found. Please check the title and try again."
        )
        assert exc_info.value.title is None

    def test_scoped_lookup(self, catalog, emma):
        catalog.apply(emma, Transition(target=ItemState.BORROWED, message="out"))

        assert catalog.lookup("Emma", states=[ItemState.BORROWED, ItemState.RESERVED]) is emma
        with pytest.raises(NotFoundError):
            catalog.lookup("Emma", states=[ItemState.AVAILABLE, ItemState.RESERVED])

    def test_state_of(self, catalog):
        assert catalog.state_of("emma") == ItemState.AVAILABLE


class TestApply:
    def test_borrow_moves_between_collections(self, catalog, emma):
        catalog.apply(emma, Transition(target=ItemState.BORROWED, message="out"))

        assert emma.state == ItemState.BORROWED
        assert catalog.borrowed == [emma]
        assert emma not in catalog.available
        catalog.check_consistency()

    def test_reserve_moves_exclusively(self, catalog, emma, bob):
        catalog.apply(
            emma, Transition(target=ItemState.RESERVED, reserved_by=bob, message="held")
        )

        assert catalog.reserved == [emma]
        assert emma not in catalog.available
        assert emma.reserved_by == bob
        catalog.check_consistency()

    def test_invalid_transition_leaves_catalog_untouched(self, catalog, emma):
        with pytest.raises(ValueError):
            catalog.apply(emma, Transition(target=ItemState.RESERVED, message="no holder"))

        assert emma.state == ItemState.AVAILABLE
        assert emma in catalog.available
        catalog.check_consistency()

    def test_foreign_book_rejected(self, catalog):
        stranger = Book(title="Emma")

        with pytest.raises(CatalogIntegrityError):
            catalog.apply(stranger, Transition(target=ItemState.BORROWED, message="out"))

        assert stranger.state == ItemState.AVAILABLE

    def test_round_trip(self, catalog, nineteen_eighty_four):
        catalog.apply(nineteen_eighty_four, Transition(target=ItemState.BORROWED, message="out"))
        catalog.apply(nineteen_eighty_four, Transition(target=ItemState.AVAILABLE, message="in"))

        assert nineteen_eighty_four.state == ItemState.AVAILABLE
        assert nineteen_eighty_four.title == "1984"
        assert nineteen_eighty_four.requires_privilege is True
        assert nineteen_eighty_four.reserved_by is None
        assert catalog.lookup("1984", states=[ItemState.AVAILABLE]) is nineteen_eighty_four


class TestConsistency:
    def test_detects_state_drift(self, catalog, emma):
        # Bypass the catalog to simulate a broken invariant
        emma.move_to(ItemState.BORROWED)

        with pytest.raises(CatalogIntegrityError):
            catalog.check_consistency()


class TestBrowse:
    def test_lists_shelf_in_order(self, catalog):
        assert list(catalog.browse()) == [
            BrowseEntry(title="Emma", status=BrowseStatus.AVAILABLE),
            BrowseEntry(title="1984", status=BrowseStatus.PREMIUM),
        ]

    def test_reserved_books_stay_listed(self, catalog, emma, bob):
        catalog.apply(
            emma, Transition(target=ItemState.RESERVED, reserved_by=bob, message="held")
        )

        assert [(e.title, e.status) for e in catalog.browse()] == [
            ("Emma", BrowseStatus.RESERVED),
            ("1984", BrowseStatus.PREMIUM),
        ]

    def test_borrowed_books_not_listed(self, catalog, nineteen_eighty_four):
        catalog.apply(nineteen_eighty_four, Transition(target=ItemState.BORROWED, message="out"))

        assert [e.title for e in catalog.browse()] == ["Emma"]

    def test_browse_is_lazy_and_restartable(self, catalog):
        listing = catalog.browse()

        assert next(listing).title == "Emma"
        assert [e.title for e in catalog.browse()] == ["Emma", "1984"]

    def test_entry_display(self):
        entry = BrowseEntry(title="1984", status=BrowseStatus.PREMIUM)

        assert str(entry) == "- 1984 (Status: Premium)"

    def test_empty_catalog(self):
        assert list(Catalog().browse()) == []
