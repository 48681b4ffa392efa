# simulations/methods.py

from __future__ import annotations

import logging
import random

from .common import TMRSpec, TMRResult, Timer

from tmr_voting.modules import sample_outputs
from tmr_voting.voters import classic_vote, map_vote


logger = logging.getLogger(__name__)


def simulate_tmr(spec: TMRSpec) -> TMRResult:
    """
    Run spec.trials independent TMR trials and count, per voter, how often
    the voted value equals the true value.

    Each trial:
      - samples modules 0, 1, 2 in that order (each with its own reliability)
      - runs the classic voter (may draw once for a three-way tie)
      - runs the MAP voter on the same outputs (no draws)

    A single RNG seeded from spec.seed is consumed in exactly that order,
    so the same spec always reproduces the same counters.
    """
    rng = random.Random(spec.seed)
    rs = spec.reliabilities
    t_val = spec.true_value

    classic_ok = 0
    map_ok = 0

    logger.debug(
        "starting TMR run: trials=%d seed=%d reliabilities=%s",
        spec.trials, spec.seed, rs,
    )

    with Timer() as t:
        for _ in range(spec.trials):
            o = sample_outputs(rng, rs, t_val)
            if classic_vote(rng, o) == t_val:
                classic_ok += 1
            if map_vote(o, rs) == t_val:
                map_ok += 1

    logger.debug(
        "finished TMR run: classic_ok=%d map_ok=%d in %.3fs",
        classic_ok, map_ok, t.elapsed_s,
    )

    return TMRResult(
        spec=spec,
        classic_ok=classic_ok,
        map_ok=map_ok,
        runtime_s=t.elapsed_s,
    )
