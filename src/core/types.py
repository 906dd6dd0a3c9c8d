from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HashPlan:
    """What the serial hasher will do for one input.

    `single_pass` and `iterations` are decided independently: a zero count sets
    `single_pass` and leaves a zero-length loop.
    """

    marker_count: int
    single_pass: bool
    iterations: int

    def describe(self) -> str:
        return f"count={self.marker_count} single_pass={self.single_pass} iterations={self.iterations}"


@dataclass(frozen=True, slots=True)
class HashResult:
    serial: str
    digest: str
    plan: HashPlan
