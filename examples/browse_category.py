"""
Category Browsing Example

Pages through one Gutendex category until the catalog runs out of books,
printing each state snapshot the browser publishes.
"""

import asyncio
import logging

from pageflow.catalog import (
    BookAPI,
    CategorisedBooksState,
    CategoryBrowser,
    JsonPreferenceStore,
)


def render(state: CategorisedBooksState) -> None:
    if state.is_loading:
        print("Loading...")
    elif state.error:
        print(f"Error: {state.error}")
    else:
        print(f"{len(state.items)} books loaded (next page {state.page})")


async def main(category: str = "science", max_pages: int = 3) -> None:
    async with BookAPI() as api:
        browser = CategoryBrowser(api, JsonPreferenceStore(), on_state_changed=render)

        await browser.load_book_by_category(category)
        for _ in range(max_pages - 1):
            if browser.state.end_reached:
                break
            await browser.load_next_items()

        for book in browser.state.items:
            authors = ", ".join(author.name for author in book.authors) or "Unknown"
            print(f"- {book.title} ({authors})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
