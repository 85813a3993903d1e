"""
Dense 2-D matrix value type.

A Matrix owns a flat, row-major list of cells: the element at (row, col)
lives at index ``row * cols + col``. The shape is fixed at construction;
single cells are mutable through ``set``. Every derived matrix (row, column,
transpose, copy) copies its values.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any, Callable, Iterator, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, StrictInt

from .core.errors import (
    InvalidInputError,
    InvalidShapeError,
    OutOfBoundsError,
    UnsupportedOperationError,
)
from .core.logging import get_context_logger

logger = get_context_logger(__name__)

Initializer = Callable[["Matrix", int, int], Any]

_FIELD_KEYWORDS = frozenset({"rows", "cols", "elements"})


def _is_sequence(value: Any) -> bool:
    """Strings and bytes are sequences too, but never rows of numbers."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_dimension(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value > 0


class Matrix(BaseModel):
    """
    Dense, row-major, fixed-shape matrix.

    Construction modes:

        Matrix(rows, cols)                  # rows x cols, zero-filled
        Matrix(rows, cols, initializer)     # initializer(matrix, row, col) per cell
        Matrix(rows=2, cols=3)              # same, by keyword
        Matrix(rows=1, cols=2, elements=[1, 2])
        Matrix([[1, 2, 3], [4, 5, 6]])      # from row data

    Elements are stored as given; ints and floats may be mixed and compare
    by value (``Matrix([[1]]) == Matrix([[1.0]])``).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    rows: StrictInt = Field(gt=0, frozen=True)
    cols: StrictInt = Field(gt=0, frozen=True)

    _cells: list[Any] = PrivateAttr(default_factory=list)

    def __init__(
        self,
        *args: Any,
        initializer: Optional[Initializer] = None,
        **fields: Any,
    ) -> None:
        """
        Create a matrix from dimensions or from row data.

        Args:
            *args: Either ``(rows, cols)``, ``(rows, cols, initializer)`` or
                ``(row_data,)``.
            initializer: Optional callable invoked as ``initializer(matrix, row, col)``
                for every cell in row-major order after zero-filling. Only valid
                with explicit dimensions and no ``elements``.
            **fields: ``rows`` and ``cols`` as keywords instead of positional
                arguments, optionally with a flat row-major ``elements`` sequence.

        Raises:
            InvalidShapeError: If dimensions are not positive integers
            InvalidInputError: If row data or elements do not fit the shape
        """
        if args and fields:
            raise TypeError(
                f"Matrix() got unexpected keyword arguments: {', '.join(sorted(fields))}"
            )

        if fields:
            unknown = set(fields) - _FIELD_KEYWORDS
            if unknown:
                raise TypeError(
                    f"Matrix() got unexpected keyword arguments: {', '.join(sorted(unknown))}"
                )
            if "rows" not in fields or "cols" not in fields:
                raise TypeError("Matrix() needs both 'rows' and 'cols' keywords")
            if "elements" in fields:
                if initializer is not None:
                    raise InvalidInputError("An initializer cannot be combined with elements")
                rows, cols = self._validate_dims(fields["rows"], fields["cols"])
                cells = self._coerce_elements(fields["elements"], rows, cols)
                self._init_storage(rows, cols, cells, source="elements")
                return
            args = (fields["rows"], fields["cols"])

        if not args:
            raise TypeError("Matrix() takes row data or (rows, cols[, initializer])")

        if len(args) == 1:
            if initializer is not None:
                raise InvalidInputError("An initializer requires explicit dimensions")
            rows, cols, cells = self._coerce_rows(args[0])
            self._init_storage(rows, cols, cells, source="rows")
            return

        if len(args) == 3:
            if initializer is not None:
                raise TypeError("Matrix() got multiple values for 'initializer'")
            initializer = args[2]
        elif len(args) != 2:
            raise TypeError(
                f"Matrix() takes row data or (rows, cols[, initializer]), got {len(args)} arguments"
            )

        rows, cols = self._validate_dims(args[0], args[1])
        self._init_storage(
            rows, cols, [0] * (rows * cols),
            source="dimensions", initializer=initializer is not None,
        )

        if initializer is not None:
            for index in range(rows * cols):
                initializer(self, self.row_of(index), self.col_of(index))

    def _init_storage(self, rows: int, cols: int, cells: list[Any], **log_extra: Any) -> None:
        super().__init__(rows=rows, cols=cols)
        self._cells = cells
        logger.debug(
            "Matrix created",
            extra_data={"rows": rows, "cols": cols, **log_extra},
        )

    def model_post_init(self, __context: Any) -> None:
        """Zero-fill storage; constructors then overwrite it with their cells."""
        self._cells = [0] * (self.rows * self.cols)

    @staticmethod
    def _validate_dims(rows: Any, cols: Any) -> tuple[int, int]:
        if not (_is_dimension(rows) and _is_dimension(cols)):
            raise InvalidShapeError(rows, cols)
        return int(rows), int(cols)

    @staticmethod
    def _coerce_elements(raw_elements: Any, rows: int, cols: int) -> list[Any]:
        """Copy a flat, row-major element sequence that must hold rows * cols values."""
        if isinstance(raw_elements, np.ndarray):
            raw_elements = raw_elements.ravel().tolist()
        if not _is_sequence(raw_elements):
            raise InvalidInputError(
                f"Matrix elements must be a flat sequence, got {type(raw_elements).__name__}"
            )
        if len(raw_elements) != rows * cols:
            raise InvalidInputError(
                f"Matrix of shape {rows} x {cols} needs {rows * cols} elements, "
                f"got {len(raw_elements)}"
            )
        return list(raw_elements)

    @staticmethod
    def _coerce_rows(raw_rows: Any) -> tuple[int, int, list[Any]]:
        """Flatten row data into (rows, cols, cells), validating its structure."""
        if isinstance(raw_rows, Matrix):
            return raw_rows.rows, raw_rows.cols, raw_rows.to_array()

        if isinstance(raw_rows, np.ndarray):
            if raw_rows.ndim != 2:
                raise InvalidInputError(
                    f"Matrix row data must be 2-dimensional, got a {raw_rows.ndim}-d array"
                )
            raw_rows = raw_rows.tolist()

        if not _is_sequence(raw_rows) or len(raw_rows) == 0:
            raise InvalidInputError(
                "Invalid input to create matrix from rows: expected a non-empty sequence of rows"
            )

        cells: list[Any] = []
        expected_row_size = 0
        for index, row in enumerate(raw_rows):
            if isinstance(row, np.ndarray):
                if row.ndim != 1:
                    raise InvalidInputError(
                        f"Row {index} must be 1-dimensional, got a {row.ndim}-d array",
                        row=index,
                    )
                row = row.tolist()
            if not _is_sequence(row):
                raise InvalidInputError(f"Row {index} is not a sequence: {row!r}", row=index)

            if index == 0:
                if len(row) == 0:
                    raise InvalidInputError("Matrix rows must not be empty", row=0)
                expected_row_size = len(row)
            elif len(row) != expected_row_size:
                raise InvalidInputError(
                    f"Provided rows are not all the same size: row {index} has "
                    f"{len(row)} elements, expected {expected_row_size}",
                    row=index,
                )
            cells.extend(row)

        return len(raw_rows), expected_row_size, cells

    @property
    def shape(self) -> tuple[int, int]:
        """Get matrix dimensions (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def elements(self) -> tuple[Any, ...]:
        """Read-only snapshot of the row-major cells."""
        return tuple(self._cells)

    # Element access

    def validate_position(self, row: int, col: int) -> None:
        """
        Check that (row, col) lies inside the matrix.

        Raises:
            TypeError: If either index is not an integer
            OutOfBoundsError: If either index is negative or past the last row/column
        """
        for index in (row, col):
            if not isinstance(index, numbers.Integral):
                raise TypeError(
                    f"Matrix indices must be integers, not {type(index).__name__}"
                )
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def get(self, row: int, col: int) -> Any:
        """Get the value at (row, col)."""
        self.validate_position(row, col)
        return self._cells[row * self.cols + col]

    def set(self, row: int, col: int, value: Any) -> None:
        """Overwrite the single cell at (row, col)."""
        self.validate_position(row, col)
        self._cells[row * self.cols + col] = value

    def row_of(self, index: int) -> int:
        """Row of a flat storage index."""
        return index // self.cols

    def col_of(self, index: int) -> int:
        """Column of a flat storage index."""
        return index % self.cols

    @staticmethod
    def _position(index: Any) -> tuple[Any, Any]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Matrix index must be (row, col)")
        return index

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col), or a row as a 1 x cols matrix."""
        if isinstance(index, tuple):
            row, col = self._position(index)
            return self.get(row, col)
        return self.get_row(index)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        row, col = self._position(index)
        self.set(row, col, value)

    # Derived matrices

    def get_row(self, row: int) -> Matrix:
        """
        Extract a row as a row vector.

        Args:
            row: Row index (0-based)

        Returns:
            New 1 x cols Matrix holding a copy of the row
        """
        self.validate_position(row, 0)
        start = row * self.cols
        return Matrix([self._cells[start:start + self.cols]])

    def get_column(self, col: int) -> Matrix:
        """
        Extract a column as a column vector.

        Args:
            col: Column index (0-based)

        Returns:
            New rows x 1 Matrix holding a copy of the column
        """
        self.validate_position(0, col)
        return Matrix([[self._cells[index]] for index in range(col, len(self._cells), self.cols)])

    def transpose(self) -> Matrix:
        """Return a new cols x rows matrix T with T.get(i, j) == self.get(j, i)."""
        return Matrix(
            self.cols,
            self.rows,
            initializer=lambda matrix, row, col: matrix.set(row, col, self.get(col, row)),
        )

    def transpose_in_place(self) -> None:
        """Not supported: the shape of a Matrix never changes."""
        raise UnsupportedOperationError("transpose_in_place")

    def copy(self) -> Matrix:
        """Create an independent matrix with the same shape and values."""
        return Matrix(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    # Predicates

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_identity(self) -> bool:
        """
        Check for the identity matrix: square, 1 on the diagonal, 0 elsewhere.

        Values compare numerically, so 1.0 counts as 1.
        """
        if not self.is_square():
            return False

        for value, row, col in self.each_with_index():
            expected = 1 if row == col else 0
            if value != expected:
                return False
        return True

    def is_row_vector(self) -> bool:
        raise UnsupportedOperationError("is_row_vector")

    def is_column_vector(self) -> bool:
        raise UnsupportedOperationError("is_column_vector")

    def __eq__(self, other: Any) -> bool:
        """Same shape and elementwise-equal values, without tolerance."""
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows != other.rows or self.cols != other.cols:
            return False
        return all(a == b for a, b in zip(self._cells, other._cells))

    # Iteration and conversions

    def each_with_index(self) -> Iterator[tuple[Any, int, int]]:
        """Yield (value, row, col) for every cell in row-major order."""
        for index, value in enumerate(self._cells):
            yield value, self.row_of(index), self.col_of(index)

    def to_array(self) -> list[Any]:
        """Copy of the flat, row-major element list."""
        return list(self._cells)

    def to_python(self) -> list[list[Any]]:
        """Convert to Python nested list of rows."""
        return [self._cells[start:start + self.cols] for start in range(0, len(self._cells), self.cols)]

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.to_python())

    def to_string(self) -> str:
        """Render as ``Matrix <rows x cols>: [[row 0], [row 1], ...]``."""
        return f"{self.__class__.__name__} <{self.rows} x {self.cols}>: {self.to_python()}"

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(
            " & ".join(str(el) for el in row) for row in self.to_python()
        )
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_python()!r})"
