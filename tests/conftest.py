"""
Shared pytest fixtures for tellersim tests.
"""

import logging
from pathlib import Path

import pytest

from tellersim.core.config import SimulationConfig


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """Directory for plots and tables written by tests; kept after the run."""
    root = Path(__file__).parent.parent / "test_output"
    root.mkdir(exist_ok=True)
    return root


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """Per-test output directory: test_output/<module>/<test>/."""
    directory = test_output_root / request.module.__name__.split(".")[-1] / request.node.name
    directory.mkdir(parents=True, exist_ok=True)
    return directory


@pytest.fixture
def bank_day() -> SimulationConfig:
    """The 08:00-16:00, two teller day at 5.8 arrivals and 6 services per hour."""
    return SimulationConfig.bank_day(seed=2021)


@pytest.fixture(autouse=True)
def reset_tellersim_logging():
    """Leave only a NullHandler on the tellersim logger around every test."""
    logger = logging.getLogger("tellersim")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
