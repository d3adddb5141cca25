from collections.abc import Generator
from contextlib import contextmanager

import httpx


class PageflowError(Exception):
    """Base exception for all Pageflow errors."""

    def __init__(self, message: str, original_error: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(PageflowError):
    """Raised when a paginator is constructed with an incomplete configuration."""

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class PaginatorNotConfiguredError(PageflowError):
    """Raised when an owner asks for more items before it has built its paginator."""

    def __init__(self, owner: str = "owner") -> None:
        super().__init__(f"Paginator for {owner} is not configured yet")
        self.owner = owner


class CatalogError(PageflowError):
    """Base class for failures talking to the book catalog."""


class CatalogRequestError(CatalogError):
    """Raised when the catalog answers with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.status_code = status_code


class CatalogTimeoutError(CatalogError):
    """Raised when a request to the catalog times out."""

    def __init__(
        self, message: str = "Request timed out", original_error: BaseException | None = None
    ) -> None:
        super().__init__(message, original_error)


class CatalogResponseError(CatalogError):
    """Raised when the catalog response body cannot be parsed."""

    def __init__(self, message: str, original_error: BaseException | None = None) -> None:
        super().__init__(message, original_error)


@contextmanager
def handle_http_errors(endpoint: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches httpx exceptions
    and raises the appropriate CatalogError subclass.

    Args:
        endpoint: Optional endpoint description for better error messages

    Usage:
        with handle_http_errors(endpoint="/books"):
            response = await client.get("/books")
            response.raise_for_status()
    """
    where = endpoint or "catalog"
    try:
        yield
    except httpx.TimeoutException as e:
        raise CatalogTimeoutError(message=f"Request to {where} timed out", original_error=e) from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise CatalogRequestError(
            message=f"Catalog error ({status}) from {where}",
            status_code=status,
            original_error=e,
        ) from e
    except httpx.HTTPError as e:
        # Connection refused, DNS failure, protocol errors...
        raise CatalogError(message=f"Request to {where} failed: {e}", original_error=e) from e
