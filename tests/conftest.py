from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger


@pytest.fixture
def query_context() -> dict[str, Any]:
    return {"current_user": "u1"}


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message).strip()), level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
