from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a manually advanced clock starting at 1000 seconds."""
    return FakeClock(start=1000.0)


@pytest.fixture
def mock_sleep(fake_clock: FakeClock) -> Generator[Mock, None, None]:
    """Patch time.sleep so that sleeping advances the fake clock
    instantly."""
    with patch("time.sleep", side_effect=fake_clock.advance) as mock:
        yield mock


@pytest.fixture
def mock_asleep(fake_clock: FakeClock) -> Generator[Mock, None, None]:
    """Patch asyncio.sleep so that sleeping advances the fake clock
    instantly."""
    with patch("asyncio.sleep", side_effect=fake_clock.advance) as mock:
        yield mock


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
