from .config import CatalogOptions, PaginatorOptions
from .exceptions import (
    CatalogError,
    CatalogRequestError,
    CatalogResponseError,
    CatalogTimeoutError,
    ConfigurationError,
    PageflowError,
    PaginatorNotConfiguredError,
)
from .paginator import Paginator, ThreadedPaginator
from .result import Result
from .source import CallbackSource, PageSource, increment_page

__all__ = [
    "Paginator",
    "ThreadedPaginator",
    "PaginatorOptions",
    "Result",
    # Sources
    "PageSource",
    "CallbackSource",
    "increment_page",
    # Catalog settings
    "CatalogOptions",
    # Exceptions
    "PageflowError",
    "ConfigurationError",
    "PaginatorNotConfiguredError",
    "CatalogError",
    "CatalogRequestError",
    "CatalogTimeoutError",
    "CatalogResponseError",
]
