"""Shared fixtures for client tests."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect loguru records emitted while the test runs."""

    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)
