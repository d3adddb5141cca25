"""
Pydantic models for Gutendex catalog responses.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookLanguage(str, Enum):
    """Languages the catalog can be filtered by, keyed by ISO 639-1 code."""

    ALL_BOOKS = "all"
    ENGLISH = "en"
    CHINESE = "zh"
    DANISH = "da"
    DUTCH = "nl"
    ESPERANTO = "eo"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HUNGARIAN = "hu"
    ITALIAN = "it"
    LATIN = "la"
    PORTUGUESE = "pt"
    SPANISH = "es"
    SWEDISH = "sv"
    TAGALOG = "tl"

    @property
    def iso_code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        if self is BookLanguage.ALL_BOOKS:
            return "All Books"
        return self.name.replace("_", " ").title()

    @classmethod
    def from_iso_code(cls, iso_code: str | None) -> "BookLanguage":
        """Looks up a language by code, falling back to ALL_BOOKS for unknown codes."""
        for language in cls:
            if language.value == iso_code:
                return language
        return cls.ALL_BOOKS


class Author(BaseModel):
    name: str
    birth_year: int | None = None
    death_year: int | None = None


class BookFormats(BaseModel):
    """
    Download links keyed by MIME type.
    Only the types the reader cares about get attributes; the rest are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    text_html: str | None = Field(default=None, alias="text/html")
    epub: str | None = Field(default=None, alias="application/epub+zip")
    mobi: str | None = Field(default=None, alias="application/x-mobipocket-ebook")
    rdf: str | None = Field(default=None, alias="application/rdf+xml")
    image_jpeg: str | None = Field(default=None, alias="image/jpeg")
    text_plain: str | None = Field(default=None, alias="text/plain; charset=us-ascii")
    octet_stream: str | None = Field(default=None, alias="application/octet-stream")


class Book(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    authors: list[Author] = []
    translators: list[Author] = []
    subjects: list[str] = []
    bookshelves: list[str] = []
    languages: list[str] = []
    copyright: bool | None = None
    media_type: str = "Text"
    formats: BookFormats = Field(default_factory=BookFormats)
    download_count: int = 0

    @property
    def has_epub(self) -> bool:
        return self.formats.epub is not None


class BookSet(BaseModel):
    """
    One page of catalog results.

    The catalog answers an out-of-range page with {"detail": "Invalid page."};
    that parses into an empty set with `detail` filled in.
    """

    model_config = ConfigDict(populate_by_name=True)

    count: int = 0
    next: str | None = None
    previous: str | None = None
    books: list[Book] = Field(default_factory=list, alias="results")
    detail: str | None = None

    @field_validator("books", mode="before")
    @classmethod
    def _null_results_as_empty(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def is_empty(self) -> bool:
        return not self.books
