"""
Cursor Paginator Example

Drives a Paginator over an opaque-cursor source (a continuation token
instead of a page number) and shows that rapid repeated calls fetch once.
"""

import asyncio

from pageflow import Paginator, Result

RECORDS = [f"record-{i}" for i in range(7)]
PAGE_SIZE = 3


class TokenSource:
    """Pretend remote API returning (items, next_token) pairs."""

    async def fetch(self, token: str | None) -> Result[tuple[list[str], str | None]]:
        await asyncio.sleep(0.05)
        start = int(token or 0)
        end = start + PAGE_SIZE
        next_token = str(end) if end < len(RECORDS) else None
        return Result.success((RECORDS[start:end], next_token))

    def next_key(self, current_key: str | None, batch: tuple[list[str], str | None]) -> str | None:
        return batch[1]


async def main() -> None:
    collected: list[str] = []
    done = False

    def on_success(batch: tuple[list[str], str | None], next_token: str | None) -> None:
        nonlocal done
        collected.extend(batch[0])
        done = next_token is None

    paginator: Paginator[str | None, tuple[list[str], str | None]] = Paginator(
        None,
        TokenSource(),
        on_loading_changed=lambda loading: print("loading" if loading else "idle"),
        on_success=on_success,
        on_error=lambda err: print(f"failed: {err}"),
    )

    while not done:
        # Three "scroll events" at once: only one fetch runs
        outcomes = await asyncio.gather(*(paginator.advance() for _ in range(3)))
        print(f"fetched={outcomes.count(True)} skipped={outcomes.count(False)}")

    print(collected)


if __name__ == "__main__":
    asyncio.run(main())
