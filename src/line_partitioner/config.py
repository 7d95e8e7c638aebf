"""Settings loaded from environment variables."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from line_partitioner.partition.types import DEFAULT_LOOKAHEAD

# Environment variables providing defaults for the command-line flags.
LP_WORKERS_ENV = "LP_WORKERS"
LP_LOOKAHEAD_ENV = "LP_LOOKAHEAD"
LP_MAX_LOOKAHEAD_ENV = "LP_MAX_LOOKAHEAD"


@dataclass(frozen=True, slots=True)
class PartitionSettings:
    """Parameters for one partitioning run."""

    workers: int
    lookahead: int = DEFAULT_LOOKAHEAD
    max_lookahead: int | None = None


def default_workers() -> int:
    """One worker per available CPU."""
    return os.cpu_count() or 1


def _positive_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name, "").strip()
    if not raw:
        return None

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> PartitionSettings:
    """
    Build settings from LP_* environment variables.

    Unset or empty variables fall back to the defaults: one worker per CPU,
    a 50-byte lookahead and an unbounded search.
    """
    if environ is None:
        environ = os.environ

    workers = _positive_int(environ, LP_WORKERS_ENV)
    lookahead = _positive_int(environ, LP_LOOKAHEAD_ENV)

    return PartitionSettings(
        workers=default_workers() if workers is None else workers,
        lookahead=DEFAULT_LOOKAHEAD if lookahead is None else lookahead,
        max_lookahead=_positive_int(environ, LP_MAX_LOOKAHEAD_ENV),
    )
