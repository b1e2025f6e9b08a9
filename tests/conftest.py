"""Global pytest fixtures and default marks for UNDERBAR."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from underbar.scheduling import TimerQueue

TESTS_ROOT = Path(__file__).parent.resolve()

# first directory under tests/ -> mark applied to every test inside it
DIRECTORY_MARKS = {"unit": "unit", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Add the default mark of each test's top-level test directory."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := DIRECTORY_MARKS.get(top)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def timer_queue() -> Iterator[TimerQueue]:
    """A private timer queue, shut down (pending calls cancelled) after the test."""
    queue = TimerQueue(thread_name="underbar-test-timer")
    try:
        yield queue
    finally:
        queue.shutdown(cancel_pending=True, wait=True)
