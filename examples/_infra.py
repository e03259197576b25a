"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine

from paysheet.gateway import PaymentToken
from paysheet.pricing import LineItems


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def show(items: LineItems) -> None:
    for row in items:
        print(f"  {row.label:<32} {row.amount:>10}")


def report(success: bool, token: PaymentToken | None) -> None:
    print(f"  completion: success={success} token={token.transaction_id if token else None}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(name)s: %(message)s")
    asyncio.run(main())
