# simulations/run.py

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .common import TMRSpec, TMRResult
from .methods import simulate_tmr


def run_experiment(
    trials: int,
    seed: int,
    reliabilities: Sequence[float],
) -> TMRResult:
    """
    Run a single simulation and return a TMRResult.

    Parameters
    ----------
    trials:
        Number of independent trials (>= 0).
    seed:
        RNG seed; identical arguments reproduce identical counters.
    reliabilities:
        (R0, R1, R2), one probability in [0, 1] per module.

    Returns
    -------
    TMRResult
    """
    spec = TMRSpec(trials=trials, seed=seed, reliabilities=tuple(reliabilities))
    return simulate_tmr(spec)


def run(n: int, seed: int, reliabilities: Sequence[float]) -> Tuple[int, int]:
    """
    Counters-only form: returns (classic_ok, map_ok).
    """
    return run_experiment(n, seed, reliabilities).counts()


def run_seed_sweep(
    trials: int,
    seeds: Iterable[int],
    reliabilities: Sequence[float],
) -> List[TMRResult]:
    """
    Convenience helper: repeat the same experiment over several seeds, for
    statements that only hold on average (see common.mean_counts).
    """
    return [run_experiment(trials, seed, reliabilities) for seed in seeds]
