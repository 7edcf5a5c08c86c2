from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .problem import DistanceMatrix, city_label, tour_length

if TYPE_CHECKING:
    from .report import Reporter

START = 0


class SearchCancelled(RuntimeError):
    """Raised when a cooperative stop check ends a search early."""


@dataclass(frozen=True)
class Route:
    """
    A visiting order and its round-trip distance.

    Attributes:
        cities: Location indices in visiting order. Routes returned by
            ExactTSPSolver.solve() are closed: the start index is repeated
            at the end.
        total_distance: Length of the cycle, including the return edge.
    """
    cities: Tuple[int, ...]
    total_distance: float

    @property
    def is_closed(self) -> bool:
        return len(self.cities) > 1 and self.cities[0] == self.cities[-1]

    @property
    def open_cities(self) -> Tuple[int, ...]:
        """Visiting order without the repeated start index."""
        return self.cities[:-1] if self.is_closed else self.cities

    def named(self, names: Sequence[str]) -> List[str]:
        return [city_label(i, names) for i in self.cities]


def search_space_size(n: int, fix_start: bool = False) -> int:
    """Number of candidate orders the solver scores for n locations."""
    if n <= 1:
        return 1
    return math.factorial(n - 1) if fix_start else math.factorial(n)


class ExactTSPSolver:
    """
    Exact TSP solver by exhaustive enumeration.

    Every permutation of the location indices is scored in lexicographic
    order, starting from the identity (0, 1, ..., N-1). A candidate replaces
    the best only when strictly shorter, so among equally short tours the
    lexicographically first one wins.

    Args:
        matrix: DistanceMatrix, or raw NxN data to wrap in one.
        fix_start: Only enumerate orders that begin at location 0. Every
            cycle has such a rotation and those come first in lexicographic
            order, so the result is the same as the full search; only the
            number of scored candidates drops from N! to (N-1)!.
        max_size: Refuse matrices with more locations than this.

    Raises:
        InvalidMatrixShape: If raw data is not a square table.
        ValueError: If the matrix has more than max_size locations.
    """

    def __init__(
        self,
        matrix: Union[DistanceMatrix, Sequence[Sequence[float]], np.ndarray],
        fix_start: bool = False,
        max_size: Optional[int] = None,
    ):
        if not isinstance(matrix, DistanceMatrix):
            matrix = DistanceMatrix(matrix)
        if max_size is not None and matrix.size > max_size:
            raise ValueError(
                f"{matrix.size} locations exceed the limit of {max_size} "
                f"({search_space_size(matrix.size, fix_start)} candidate tours)"
            )
        self.matrix = matrix
        self.fix_start = fix_start

    @property
    def size(self) -> int:
        return self.matrix.size

    def evaluate(self, route: Sequence[int]) -> float:
        """
        Round-trip distance of an open route.

        Routes of length 0 or 1 have distance 0.0.

        Raises:
            IndexOutOfRange: If any element is outside [0, N).
        """
        return tour_length(route, self.matrix)

    def _orders(self) -> Iterator[Tuple[int, ...]]:
        n = self.size
        # permutations() of a sorted input yields lexicographic order
        if self.fix_start and n > 1:
            for perm in itertools.permutations(range(1, n)):
                yield (START,) + perm
        else:
            yield from itertools.permutations(range(n))

    def solve(
        self,
        reporter: Optional["Reporter"] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> Route:
        """
        Find the shortest round trip visiting every location once.

        Args:
            reporter: Receives every candidate before it is compared, then
                the final route. Has no influence on the result.
            should_stop: Checked before each candidate; returning True
                aborts the search.

        Returns:
            Closed Route (N+1 indices, starting and ending at 0) and its distance.

        Raises:
            SearchCancelled: If should_stop returned True.
        """
        best_distance = float("inf")
        best_order: Tuple[int, ...] = ()

        for iteration, order in enumerate(self._orders(), start=1):
            if should_stop is not None and should_stop():
                total = search_space_size(self.size, self.fix_start)
                raise SearchCancelled(
                    f"Search stopped after {iteration - 1} of {total} candidates"
                )

            distance = self.evaluate(order)
            if reporter is not None:
                reporter.on_candidate(order, distance, iteration)

            if distance < best_distance:
                best_distance = distance
                best_order = order

        route = Route(cities=best_order + (START,), total_distance=best_distance)
        if reporter is not None:
            reporter.finish(route)
        return route
