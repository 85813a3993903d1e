"""
Shared pytest fixtures and utilities for testing fmatrix.

This module provides:
- Sample matrices used across the matrix test modules
- A helper asserting on MatrixError type and structured details
- Isolation of cached settings and the ``fmatrix`` logger
"""

import logging
from typing import Any, Callable, Type

import pytest

from fmatrix import Matrix, MatrixError
from fmatrix.core.config import get_settings
from fmatrix.core.logging import ROOT_LOGGER_NAME


# Each inner list is one row of the matrix.
SAMPLE_ROWS = {
    "wide": [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]],
    "column": [[1], [2], [3]],
    "single": [[1]],
    "two_by_four": [[1, 2, 3, 4], [5, 6, 7, 8]],
    "four_by_two": [[1, 2], [3, 4], [5, 6], [7, 8]],
    "identity": [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
    "not_square_identity": [[1, 0, 0, 0], [0, 1, 0, 0]],
    "zeros": [[0, 0, 0], [0, 0, 0], [0, 0, 0]],
}


@pytest.fixture
def sample_matrices() -> dict[str, Matrix]:
    """Fresh Matrix instances built from SAMPLE_ROWS."""
    return {name: Matrix(rows) for name, rows in SAMPLE_ROWS.items()}


@pytest.fixture
def assert_matrix_error():
    """Helper to assert that a call raises a MatrixError with expected details."""
    def _assert_error(
        error_class: Type[MatrixError],
        func: Callable[..., Any],
        *args: Any,
        expected_details: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> MatrixError:
        """
        Assert that calling func raises error_class.

        Args:
            error_class: Expected MatrixError subclass
            func: Callable to invoke
            expected_details: Key/value pairs that must appear in error.details

        Returns:
            The error that was raised
        """
        with pytest.raises(error_class) as exc_info:
            func(*args, **kwargs)

        error = exc_info.value
        for key, value in (expected_details or {}).items():
            assert error.details.get(key) == value, (
                f"Expected details[{key!r}] == {value!r}, got {error.details!r}"
            )
        assert error.message == str(error)

        return error

    return _assert_error


@pytest.fixture(autouse=True)
def isolated_settings():
    """Clear cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fmatrix_logger():
    """The library logger, restored to its original state after the test."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    original_handlers = list(logger.handlers)
    original_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
