"""Pytest fixtures for Fuzzinator tests."""

import io
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
from rich.console import Console

from fuzzinator.models import FuzzyConfig, RankedString
from fuzzinator.ranking import Fuzzinator
from fuzzinator.scoring import ScalarTable, VectorEncoder
from fuzzinator.ui import RankTUI


def pytest_configure(config: pytest.Config) -> None:
    """Register the markers used across the test suite."""
    config.addinivalue_line("markers", "unit: fast tests of a single component")
    config.addinivalue_line("markers", "integration: tests spanning several components")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def default_engine() -> Fuzzinator:
    """Create a Fuzzinator with the default configuration (L2 formula)."""
    return Fuzzinator()


@pytest.fixture
def l1_engine() -> Fuzzinator:
    """Create a Fuzzinator using the L1 formula."""
    return Fuzzinator({"scoring": {"formula": "l1"}})


@pytest.fixture
def sample_space() -> List[str]:
    """Candidate strings with known default-config L2 distances from "cat".

    Returns:
        ["dog", "bat", "cat"] at distances 131, 1 and 0.
    """
    return ["dog", "bat", "cat"]


@pytest.fixture
def sample_results(default_engine: Fuzzinator, sample_space: List[str]) -> List[RankedString]:
    """Ranked results for "cat" against the sample space."""
    return default_engine.rank("cat", sample_space)


def make_encoder(**multiplier) -> VectorEncoder:
    """Build an encoder over the default alphabet with multiplier overrides."""
    config = FuzzyConfig.from_overrides({"scoring": {"multiplier": multiplier}})
    table = ScalarTable.from_config(config.scalars)
    return VectorEncoder(table, config.scoring.multiplier)


@pytest.fixture
def encoder_factory():
    """Return make_encoder for tests that need custom multiplier rules."""
    return make_encoder


@pytest.fixture
def tui_with_captured_output() -> RankTUI:
    """Create a RankTUI instance with Console output captured to StringIO.

    Access captured output via: tui.console.file.getvalue()
    """
    output = io.StringIO()
    console = Console(file=output, width=120, color_system=None)
    return RankTUI(console=console)
