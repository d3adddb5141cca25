from .browser import CATEGORIES, CategorisedBooksState, CategoryBrowser
from .client import BookAPI
from .models import Author, Book, BookFormats, BookLanguage, BookSet
from .preferences import (
    PREFERRED_BOOK_LANG_STR,
    InMemoryPreferenceStore,
    JsonPreferenceStore,
    PreferenceStore,
)

__all__ = [
    "BookAPI",
    "CategoryBrowser",
    "CategorisedBooksState",
    "CATEGORIES",
    # Models
    "Author",
    "Book",
    "BookFormats",
    "BookLanguage",
    "BookSet",
    # Preferences
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JsonPreferenceStore",
    "PREFERRED_BOOK_LANG_STR",
]
