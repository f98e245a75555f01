"""A tensor dimension given as a range of sizes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimension:
    """A dimension with a minimum and a maximum size.

    A dimension is static when both bounds are the same non-negative size;
    otherwise it is dynamic.
    """

    min: int
    max: int

    def is_dynamic(self) -> bool:
        """Return True unless the dimension has one fixed size."""
        return not (self.min == self.max and self.min >= 0)