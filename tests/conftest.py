"""Global pytest fixtures and default marks for assegai-util.

Tests get a marker named after the top-level directory they live in
(`unit`, `functional` or `e2e`) unless they already carry it.
"""

from pathlib import Path

import pytest

from assegai_util.path import POSIX, WINDOWS, ResolutionContext

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "functional": "functional",
    TESTS_ROOT / "e2e": "e2e",
}

POSIX_CWD = "/home/user"
WINDOWS_CWD = "C:\\Users\\me"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item after the test directory that contains it."""
    for item in items:
        parents = item.path.resolve().parents  # pytest>=8: pathlib.Path
        for directory, marker_name in DIRECTORY_MARKERS.items():
            if directory not in parents:
                continue
            if not any(marker.name == marker_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def posix_ctx() -> ResolutionContext:
    """POSIX resolution context rooted at ``/home/user``."""
    return ResolutionContext(POSIX_CWD, POSIX)


@pytest.fixture
def windows_ctx() -> ResolutionContext:
    """Windows resolution context rooted at ``C:\\Users\\me``."""
    return ResolutionContext(WINDOWS_CWD, WINDOWS)
