"""fmatrix - dense, row-major, fixed-shape 2-D matrices.

Submodules:
- fmatrix.matrix: the Matrix value type
- fmatrix.core: errors, settings and logging
"""

__version__ = "0.1.0"

from .core import (  # noqa: E402
    InvalidInputError,
    InvalidShapeError,
    MatrixError,
    OutOfBoundsError,
    UnsupportedOperationError,
    get_context_logger,
    get_logger,
    get_settings,
    setup_logging,
)
from .matrix import Matrix  # noqa: E402

__all__ = [
    "__version__",
    "Matrix",
    "MatrixError",
    "InvalidShapeError",
    "InvalidInputError",
    "OutOfBoundsError",
    "UnsupportedOperationError",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
]
