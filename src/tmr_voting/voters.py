import math
import random
from typing import Sequence

from .modules import NUM_VALUES, Outputs, validate_reliabilities


# ------------------------------------------------------------
# Classic voter
# ------------------------------------------------------------

def classic_vote(rng: random.Random, outputs: Outputs) -> int:
    """
    Plurality vote over three module outputs.

    Any agreeing pair wins. If all three values differ, one of them is picked
    uniformly at random; that is the only branch that touches `rng`
    (exactly one rng.randrange(3) draw).
    """
    a, b, c = outputs
    if a == b or a == c:
        return a
    if b == c:
        return b
    return outputs[rng.randrange(3)]


# ------------------------------------------------------------
# MAP voter
# ------------------------------------------------------------

def _ln(x: float) -> float:
    # ln(0) is -inf here rather than a math domain error
    if x <= 0.0:
        return -math.inf
    return math.log(x)


def map_log_likelihood(
    candidate: int,
    outputs: Outputs,
    reliabilities: Sequence[float],
) -> float:
    """
    Log-likelihood that `candidate` is the true value given `outputs`.

    Module i contributes ln(R_i) if it reported `candidate`, and
    ln((1 - R_i) / 63) otherwise (uniform-error model over the 63 wrong
    values). Contributions are combined with math.fsum, so the result does
    not depend on module order.
    """
    wrong = NUM_VALUES - 1
    terms = []
    for o, r in zip(outputs, reliabilities):
        if o == candidate:
            terms.append(_ln(r))
        else:
            terms.append(_ln((1.0 - r) / wrong))
    return math.fsum(terms)


def map_vote(outputs: Outputs, reliabilities: Sequence[float]) -> int:
    """
    Maximum-a-posteriori vote using known per-module reliabilities.

    Only values that actually appear in `outputs` are candidates. The scan
    goes in module order and replaces the running best only on a strictly
    greater log-likelihood, so ties go to the lowest-indexed module. When
    every candidate is -inf, outputs[0] is returned.

    Deterministic: no randomness is consumed.
    """
    rs = validate_reliabilities(reliabilities)

    best_v = outputs[0]
    best_logp = -math.inf
    for v in dict.fromkeys(outputs):
        logp = map_log_likelihood(v, outputs, rs)
        if logp > best_logp:
            best_logp = logp
            best_v = v
    return best_v
