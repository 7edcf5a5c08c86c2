from __future__ import annotations

from dataclasses import dataclass, field
from math import fsum
from typing import Dict, List, Sequence

import numpy as np


class InvalidDistanceMatrix(ValueError):
    """Raised when matrix data cannot be used as travel costs."""


class InvalidMatrixShape(InvalidDistanceMatrix):
    """Raised when matrix data is not a non-empty square table."""


class IndexOutOfRange(IndexError):
    """Raised when a location index falls outside [0, N)."""


@dataclass(frozen=True)
class City:
    """
    Represents a named location.

    Attributes:
        name: Display name used by reporters.
    """
    name: str


UNKNOWN_CITY = "Error retrieving city info..."


def toronto_locations() -> List[City]:
    """
    Return the five Greater Toronto Area locations of the sample problem.

    Index order matches the rows of sample_distance_matrix().
    """
    return [City(name) for name in ("Toronto", "Mississauga", "Markham", "Brampton", "Etobicoke")]


def city_label(index: int, names: Sequence[str]) -> str:
    """Display name for a location index, or UNKNOWN_CITY if it has none."""
    return names[index] if 0 <= index < len(names) else UNKNOWN_CITY


def sample_distance_matrix() -> List[List[float]]:
    """Fixed 5x5 cost table between the toronto_locations() entries."""
    return [
        [0, 25, 30, 20, 35],
        [25, 0, 40, 15, 30],
        [30, 40, 0, 45, 20],
        [20, 15, 45, 0, 40],
        [35, 30, 20, 40, 0],
    ]


@dataclass(frozen=True, eq=False)
class DistanceMatrix:
    """
    Immutable square table of directed travel costs between N locations.

    Locations are identified by the integers 0..N-1. The matrix need not be
    symmetric and a zero diagonal is assumed but not enforced here (see
    validate_distance_matrix).

    Attributes:
        values: Read-only NxN float array; cost of travelling from row to column.

    Raises:
        InvalidMatrixShape: If the data is ragged, empty or not square.
        InvalidDistanceMatrix: If an entry is not a finite, non-negative number.
    """
    values: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        data = self.values
        if not isinstance(data, np.ndarray):
            rows = list(data)
            if any(isinstance(row, str) or not hasattr(row, "__len__") for row in rows):
                raise InvalidMatrixShape("Every row of the distance matrix must be a sequence.")
            widths = {len(row) for row in rows}
            if len(widths) > 1:
                raise InvalidMatrixShape(f"Rows have inconsistent lengths: {sorted(widths)}")
            data = rows
        try:
            arr = np.array(data, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidDistanceMatrix(f"Matrix entries must be numbers: {exc}") from exc

        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise InvalidMatrixShape(f"Distance matrix must be square, got shape {arr.shape}")
        if arr.shape[0] == 0:
            raise InvalidMatrixShape("Distance matrix must describe at least one location.")
        if not np.all(np.isfinite(arr)):
            raise InvalidDistanceMatrix("Distance matrix contains non-finite values.")
        if np.any(arr < 0):
            raise InvalidDistanceMatrix("Distance matrix contains negative costs.")

        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @property
    def size(self) -> int:
        return int(self.values.shape[0])

    def __len__(self) -> int:
        return self.size

    def cost(self, i: int, j: int) -> float:
        """
        Directed travel cost from location i to location j.

        Negative indices are rejected rather than wrapped.
        """
        n = self.size
        if not (0 <= i < n and 0 <= j < n):
            raise IndexOutOfRange(f"Location pair ({i}, {j}) outside [0, {n})")
        return float(self.values[i, j])


def validate_distance_matrix(D: DistanceMatrix, require_symmetric: bool = False) -> Dict[str, bool]:
    """
    Check the properties the search assumes of a distance matrix.

    Args:
        D: Matrix to check.
        require_symmetric: Also fail when D[i, j] != D[j, i].

    Returns:
        Dictionary of flags: {"square": bool, "symmetric": bool, "diag_zero": bool}

    Raises:
        ValueError: If the diagonal is not zero, or symmetry is required and missing.
    """
    values = D.values
    symmetric = bool(np.allclose(values, values.T, atol=1e-9))
    diag_zero = bool(np.allclose(np.diag(values), 0.0, atol=1e-12))

    if not diag_zero:
        raise ValueError("Distance matrix diagonal is not zero.")
    if require_symmetric and not symmetric:
        raise ValueError("Distance matrix is not symmetric.")

    return {"square": True, "symmetric": symmetric, "diag_zero": diag_zero}


def tour_length(tour: Sequence[int], D: DistanceMatrix) -> float:
    """
    Compute closed tour length from distance matrix.

    Sums consecutive edges plus the edge from the last city back to the
    first. Tours with fewer than two cities have length 0.0. The sum is
    correctly rounded, so every rotation of a cycle has the same length.

    Args:
        tour: Sequence of city indices, not closed back to the start.
        D: Distance matrix.

    Returns:
        Total closed tour length.
    """
    n = len(tour)
    if n < 2:
        for city in tour:
            D.cost(city, city)
        return 0.0
    return fsum(D.cost(tour[k], tour[(k + 1) % n]) for k in range(n))
