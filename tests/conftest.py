"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


class FlakySink:
    """Sink that refuses the writes at the given indices."""

    def __init__(self, fail_at: set[int]) -> None:
        self.fail_at = fail_at
        self.attempts: list[int] = []

    def put_octet(self, value: int) -> bool:
        index = len(self.attempts)
        self.attempts.append(value)
        return index not in self.fail_at


@pytest.fixture
def pi_bytes() -> bytes:
    """math.pi as big-endian binary64."""
    return bytes.fromhex("400921fb54442d18")


@pytest.fixture
def flaky_sink() -> FlakySink:
    """Sink whose second write fails."""
    return FlakySink(fail_at={1})
