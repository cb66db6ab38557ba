from __future__ import annotations

import asyncio
from typing import Any


class CustomerType:
    """Schema-style object wrapping a domain value alongside query context."""

    def __init__(self, object: Any, context: Any = None) -> None:
        self.object = object
        self.context = context

    @classmethod
    def authorized_new(cls, object: Any, context: Any = None) -> CustomerType:
        return cls(object, context)


class Pending:
    """Awaitable that is never scheduled."""

    def __await__(self):
        return iter(())


async def resolve_later(value: Any, delay: float = 0.0, order: list[Any] | None = None) -> Any:
    await asyncio.sleep(delay)
    if order is not None:
        order.append(value)
    return value


async def reject(error: Exception) -> Any:
    await asyncio.sleep(0)
    raise error
