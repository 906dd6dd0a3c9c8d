from __future__ import annotations

import hashlib

from core.config import HashingConfig
from core.errors import HashingError
from core.types import HashPlan, HashResult


DEFAULT_MARKER = "E"
DEFAULT_SINGLE_ALGORITHM = "sha256"
DEFAULT_ITERATIVE_ALGORITHM = "md5"


def _hex_digest(algorithm: str, text: str) -> str:
    # Serial digests are identifiers, not credentials.
    return hashlib.new(algorithm, text.encode("utf-8"), usedforsecurity=False).hexdigest()


def count_marker(serial: str, marker: str = DEFAULT_MARKER) -> int:
    """Count case-sensitive, non-overlapping occurrences of `marker`."""

    return serial.count(marker)


def plan_for(serial: str, marker: str = DEFAULT_MARKER) -> HashPlan:
    """Decide both branches for `serial`.

    Branch A (one single-algorithm pass) fires for a zero or odd count.
    Branch B (the iterative loop) fires for any even count, zero included,
    where it runs zero times. The two are not an if/else.
    """

    count = count_marker(serial, marker)
    single_pass = count == 0 or count % 2 != 0
    iterations = count if count % 2 == 0 else 0
    return HashPlan(marker_count=count, single_pass=single_pass, iterations=iterations)


def _apply(
    serial: str,
    plan: HashPlan,
    *,
    single_algorithm: str,
    iterative_algorithm: str,
) -> str:
    if plan.single_pass:
        serial = _hex_digest(single_algorithm, serial)

    for _ in range(plan.iterations):
        serial = _hex_digest(iterative_algorithm, serial)

    return serial


def hash_serial_number(serial: str) -> str:
    """Hash a serial number.

    Zero or an odd number of 'E's: SHA-256 once (64 hex chars).
    A positive even number n: MD5 n times, each round over the previous
    round's hex string (32 hex chars).
    """

    return _apply(
        serial,
        plan_for(serial),
        single_algorithm=DEFAULT_SINGLE_ALGORITHM,
        iterative_algorithm=DEFAULT_ITERATIVE_ALGORITHM,
    )


def _check_algorithm(name: str, *, field: str) -> str:
    if not isinstance(name, str) or not name:
        raise HashingError(f"{field} must be a non-empty string")
    algo = name.lower()
    if algo not in hashlib.algorithms_available:
        raise HashingError(f"{field}: unsupported hash algorithm {name!r}")
    if algo.startswith("shake_"):
        raise HashingError(f"{field}: variable-length digest {name!r} is not supported")
    # Listed names can still be unavailable at runtime (e.g. OpenSSL 3 legacy digests).
    try:
        hashlib.new(algo, usedforsecurity=False)
    except ValueError as e:
        raise HashingError(f"{field}: hash algorithm {name!r} is not usable: {e}") from e
    return algo


class SerialHasher:
    """Configurable form of `hash_serial_number`.

    The defaults reproduce `hash_serial_number` exactly; the marker and both
    algorithms can be swapped through `HashingConfig`.
    """

    def __init__(
        self,
        *,
        marker: str = DEFAULT_MARKER,
        single_algorithm: str = DEFAULT_SINGLE_ALGORITHM,
        iterative_algorithm: str = DEFAULT_ITERATIVE_ALGORITHM,
    ):
        if not isinstance(marker, str) or not marker:
            raise HashingError("marker must be a non-empty string")
        self.marker = marker
        self.single_algorithm = _check_algorithm(single_algorithm, field="single_algorithm")
        self.iterative_algorithm = _check_algorithm(iterative_algorithm, field="iterative_algorithm")

    @classmethod
    def from_config(cls, cfg: HashingConfig) -> SerialHasher:
        return cls(
            marker=cfg.marker,
            single_algorithm=cfg.single_algorithm,
            iterative_algorithm=cfg.iterative_algorithm,
        )

    def plan(self, serial: str) -> HashPlan:
        return plan_for(serial, self.marker)

    def hash(self, serial: str) -> HashResult:
        plan = self.plan(serial)
        digest = _apply(
            serial,
            plan,
            single_algorithm=self.single_algorithm,
            iterative_algorithm=self.iterative_algorithm,
        )
        return HashResult(serial=serial, digest=digest, plan=plan)

    def digest(self, serial: str) -> str:
        return self.hash(serial).digest

    def __repr__(self) -> str:
        return (
            f"SerialHasher(marker={self.marker!r}, single_algorithm={self.single_algorithm!r}, "
            f"iterative_algorithm={self.iterative_algorithm!r})"
        )
