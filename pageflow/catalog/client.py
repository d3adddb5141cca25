from typing import Any

import httpx
from pydantic import ValidationError

from .._logging import logger
from ..config import CatalogOptions
from ..exceptions import CatalogResponseError, handle_http_errors
from ..result import Result
from .models import BookLanguage, BookSet

INVALID_PAGE_DETAIL = "Invalid page."


class BookAPI:
    """
    Async client for a Gutendex-compatible book catalog.

    Every call returns a Result instead of raising, so it can be plugged
    straight into a Paginator as its fetch function.

    Usage:
        async with BookAPI() as api:
            result = await api.get_books_by_category("science", page=1)
    """

    def __init__(
        self,
        options: CatalogOptions | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.options = options or CatalogOptions()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.options.base_url,
            timeout=httpx.Timeout(self.options.timeout),
            headers={"User-Agent": self.options.user_agent},
            follow_redirects=True,
        )

    async def __aenter__(self) -> "BookAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @staticmethod
    def build_params(
        page: int,
        language: BookLanguage = BookLanguage.ALL_BOOKS,
        topic: str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"page": page}
        if topic:
            params["topic"] = topic
        if language is not BookLanguage.ALL_BOOKS:
            params["languages"] = language.iso_code
        return params

    async def get_all_books(
        self, page: int, language: BookLanguage = BookLanguage.ALL_BOOKS
    ) -> Result[BookSet]:
        return await Result.acatching(self._get_book_set, self.build_params(page, language))

    async def get_books_by_category(
        self, category: str, page: int, language: BookLanguage = BookLanguage.ALL_BOOKS
    ) -> Result[BookSet]:
        """
        Fetches one page of books whose subjects or bookshelves match `category`.

        Returns:
            Result.success(BookSet), possibly empty when the page is past the end,
            or Result.failure(CatalogError) on transport or parsing problems.
        """
        params = self.build_params(page, language, topic=category)
        return await Result.acatching(self._get_book_set, params)

    async def _get_book_set(self, params: dict[str, Any]) -> BookSet:
        logger.debug("Requesting catalog page", extra={"params": params})

        with handle_http_errors(endpoint="/books"):
            response = await self._client.get("/books/", params=params)
            if response.status_code == httpx.codes.NOT_FOUND:
                detail = self._detail_of(response)
                if detail == INVALID_PAGE_DETAIL:
                    # Past the last page: report as an empty page, not an error
                    logger.info("Catalog page out of range", extra={"params": params})
                    return BookSet(detail=detail)
            response.raise_for_status()

        try:
            book_set = BookSet.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CatalogResponseError(
                f"Malformed catalog response for page {params.get('page')}", original_error=e
            ) from e

        logger.info(
            "Catalog page received",
            extra={"page": params.get("page"), "books": len(book_set.books)},
        )
        return book_set

    @staticmethod
    def _detail_of(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        return body.get("detail") if isinstance(body, dict) else None
