# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import time

from tmr_voting.modules import (
    TRUE_VALUE,
    Reliabilities,
    validate_reliabilities,
    validate_value,
)


@dataclass(frozen=True)
class TMRSpec:
    """
    Parameters of one Monte Carlo run.
    """
    trials: int
    seed: int
    reliabilities: Reliabilities
    true_value: int = TRUE_VALUE

    def __post_init__(self) -> None:
        if self.trials < 0:
            raise ValueError("trials must be >= 0")
        validate_value(self.true_value)
        # frozen: normalize through object.__setattr__
        object.__setattr__(
            self, "reliabilities", validate_reliabilities(self.reliabilities)
        )


def success_rate(ok: int, trials: int) -> float:
    """
    ok / trials as a fraction in [0, 1]; 0.0 for an empty run.
    """
    if trials == 0:
        return 0.0
    return ok / trials


@dataclass
class TMRResult:
    """
    Final counters of one run. Counters are only ever compared against the
    true value; individual trial outcomes are not kept.
    """
    spec: TMRSpec
    classic_ok: int
    map_ok: int

    runtime_s: Optional[float] = None

    def __post_init__(self) -> None:
        n = self.spec.trials
        for name, ok in (("classic_ok", self.classic_ok), ("map_ok", self.map_ok)):
            if not 0 <= ok <= n:
                raise ValueError(f"{name} out of range: expected 0..{n}, got {ok}")

    @property
    def classic_rate(self) -> float:
        return success_rate(self.classic_ok, self.spec.trials)

    @property
    def map_rate(self) -> float:
        return success_rate(self.map_ok, self.spec.trials)

    def counts(self) -> Tuple[int, int]:
        return self.classic_ok, self.map_ok


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def mean_counts(results: Sequence[TMRResult]) -> Tuple[float, float]:
    """
    Average (classic_ok, map_ok) over several runs, e.g. a seed sweep.
    """
    if not results:
        raise ValueError("results must be non-empty")

    classic_total = 0
    map_total = 0
    for r in results:
        classic_total += r.classic_ok
        map_total += r.map_ok
    k = len(results)
    return classic_total / k, map_total / k


def format_report_lines(result: TMRResult) -> List[str]:
    """
    The three plain-text report lines printed by the CLI.
    """
    s = result.spec
    return [
        f"N={s.trials} seed={s.seed}",
        f"classic_ok={result.classic_ok} classic_rate={result.classic_rate}",
        f"map_ok={result.map_ok} map_rate={result.map_rate}",
    ]
