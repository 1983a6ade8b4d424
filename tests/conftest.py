"""Shared fixtures for the demo tests."""

from pathlib import Path

import pytest

from perf_demo.config import DemoConfig


@pytest.fixture
def demo_config(tmp_path: Path) -> DemoConfig:
    """Small demo configuration writing into a temporary directory."""
    return DemoConfig(
        iterations=25,
        good_dir=tmp_path / "goodfile",
        bad_dir=tmp_path / "badfile",
        profile=False,
    )


@pytest.fixture
def scripted_input():
    """Factory for input functions that replay lines and then hit EOF."""

    def _make(*lines):
        remaining = list(lines)

        def _input():
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return _input

    return _make
