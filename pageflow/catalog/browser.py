from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from .._logging import logger
from ..exceptions import PaginatorNotConfiguredError
from ..paginator import Paginator
from ..result import Result
from ..source import increment_page
from .client import BookAPI
from .models import Book, BookLanguage, BookSet
from .preferences import PREFERRED_BOOK_LANG_STR, PreferenceStore

UNKNOWN_ERR = "Unknown error occurred!"

CATEGORIES = [
    "animal",
    "children",
    "classics",
    "countries",
    "crime",
    "education",
    "fiction",
    "geography",
    "history",
    "literature",
    "law",
    "music",
    "periodicals",
    "psychology",
    "philosophy",
    "religion",
    "romance",
    "science",
]


class CategorisedBooksState(BaseModel):
    """Snapshot of a category listing as shown to the user."""

    model_config = ConfigDict(frozen=True)

    is_loading: bool = False
    items: tuple[Book, ...] = ()
    error: str | None = None
    end_reached: bool = False
    page: int = 1


class CategoryBrowser:
    """
    Owner of a paginated category listing.

    Holds the accumulated state and feeds it from a Paginator over the
    catalog. Listeners registered through `on_state_changed` receive every
    new state snapshot.
    """

    def __init__(
        self,
        books_api: BookAPI,
        preferences: PreferenceStore,
        on_state_changed: Callable[[CategorisedBooksState], None] | None = None,
    ) -> None:
        self._books_api = books_api
        self._preferences = preferences
        self._on_state_changed = on_state_changed
        self._pagination: Paginator[int, BookSet] | None = None
        self._category: str | None = None
        self._state = CategorisedBooksState()
        self._language = self._get_preferred_language()

    @property
    def state(self) -> CategorisedBooksState:
        return self._state

    @state.setter
    def state(self, value: CategorisedBooksState) -> None:
        self._state = value
        if self._on_state_changed is not None:
            self._on_state_changed(value)

    @property
    def language(self) -> BookLanguage:
        return self._language

    @property
    def category(self) -> str | None:
        return self._category

    async def load_book_by_category(self, category: str) -> None:
        """Builds the paginator on first use, then loads the next page."""
        if self._pagination is None:
            self._category = category
            self._pagination = Paginator(
                initial_key=self.state.page,
                on_request=self._request_page,
                get_next_key=increment_page,
                on_loading_changed=self._set_loading,
                on_error=self._show_error,
                on_success=self._append_books,
                name=f"category:{category}",
            )
        elif category != self._category:
            logger.warning(
                "Browser already bound to another category",
                extra={"category": self._category, "requested": category},
            )

        await self.load_next_items()

    async def load_next_items(self) -> None:
        if self._pagination is None:
            raise PaginatorNotConfiguredError(type(self).__name__)
        await self._pagination.advance()

    async def reload_items(self) -> None:
        if self._pagination is None:
            raise PaginatorNotConfiguredError(type(self).__name__)
        self._pagination.reset()
        self.state = CategorisedBooksState()
        await self.load_next_items()

    async def change_language(self, language: BookLanguage) -> None:
        """Persists the new language and, if a category is open, reloads it."""
        self._language = language
        self._preferences.put_string(PREFERRED_BOOK_LANG_STR, language.iso_code)
        if self._pagination is not None:
            await self.reload_items()

    # --- PAGINATOR CALLBACKS ---

    async def _request_page(self, page: int) -> Result[BookSet]:
        try:
            return await self._books_api.get_books_by_category(
                self._category or "", page, self._language
            )
        except Exception as e:
            return Result.failure(e)

    def _set_loading(self, is_loading: bool) -> None:
        self.state = self.state.model_copy(update={"is_loading": is_loading})

    def _show_error(self, error: BaseException | None) -> None:
        message = str(error) if error is not None and str(error) else UNKNOWN_ERR
        self.state = self.state.model_copy(update={"error": message})

    def _append_books(self, book_set: BookSet, new_page: int) -> None:
        # Books without an EPUB download are useless to the reader
        books = tuple(book for book in book_set.books if book.has_epub)
        self.state = self.state.model_copy(
            update={
                "items": self.state.items + books,
                "page": new_page,
                "error": None,
                "end_reached": book_set.is_empty,
            }
        )

    def _get_preferred_language(self) -> BookLanguage:
        iso_code = self._preferences.get_string(
            PREFERRED_BOOK_LANG_STR, BookLanguage.ALL_BOOKS.iso_code
        )
        return BookLanguage.from_iso_code(iso_code)
