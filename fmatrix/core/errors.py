"""
Matrix exceptions.

Every error raised by the library derives from ``MatrixError`` and carries
a human-readable ``message`` plus a ``details`` mapping for structured logs.
Each subclass also derives from the builtin exception callers would expect
(``ValueError``, ``IndexError``, ``NotImplementedError``).
"""

from typing import Any, Dict, Optional


class MatrixError(Exception):
    """Base exception for matrix errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidShapeError(MatrixError, ValueError):
    """Raised when requested dimensions are not positive integers"""

    def __init__(self, rows: Any, cols: Any):
        super().__init__(
            message=f"Invalid dims provided for setting up matrix: {rows} x {cols}",
            details={"rows": rows, "cols": cols}
        )


class InvalidInputError(MatrixError, ValueError):
    """Raised when row data is empty, ragged or not a sequence of sequences"""

    def __init__(self, message: str, row: Optional[int] = None):
        details = {"row": row} if row is not None else {}
        super().__init__(message=message, details=details)


class OutOfBoundsError(MatrixError, IndexError):
    """Raised when a position falls outside the matrix"""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            message=(
                f"({row}, {col}) out of bounds. Matrix dimensions are "
                f"{rows} x {cols} with 0-indexing"
            ),
            details={"row": row, "col": col, "rows": rows, "cols": cols}
        )


class UnsupportedOperationError(MatrixError, NotImplementedError):
    """Raised by operations that are part of the interface but not provided"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Matrix.{operation}() is not supported",
            details={"operation": operation}
        )
