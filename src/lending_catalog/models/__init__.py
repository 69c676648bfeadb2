"""
Lending Catalog Models.

Pydantic models for the entities the lending desk works with:
- Patron: the actor behind a request, standard or privileged
- Book: the circulating item and its lifecycle state
- Transition, Outcome, BrowseEntry: values passed between the core and callers
"""

from .book import Book, BrowseStatus, ItemState, title_key
from .outcome import BrowseEntry, Outcome, Transition
from .patron import Patron

__all__ = [
    "Book",
    "BrowseEntry",
    "BrowseStatus",
    "ItemState",
    "Outcome",
    "Patron",
    "Transition",
    "title_key",
]
