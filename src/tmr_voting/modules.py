import random
from typing import Sequence, Tuple


# 6-bit output space shared by all modules
NUM_VALUES = 64
TRUE_VALUE = 27

Outputs = Tuple[int, int, int]
Reliabilities = Tuple[float, float, float]


class InvalidReliability(ValueError):
    """
    Raised when a reliability is outside [0, 1] (or NaN), or when a
    reliability vector is not exactly three values.
    """


def validate_reliability(reliability: float) -> float:
    r = float(reliability)
    # NaN fails both comparisons
    if not (0.0 <= r <= 1.0):
        raise InvalidReliability(f"reliability must be in [0, 1], got {reliability!r}")
    return r


def validate_reliabilities(reliabilities: Sequence[float]) -> Reliabilities:
    """
    Check a per-module reliability vector and return it as a plain tuple.
    Order is significant: entry i belongs to module i.
    """
    values = tuple(reliabilities)
    if len(values) != 3:
        raise InvalidReliability(
            f"expected 3 reliabilities (one per module), got {len(values)}"
        )
    return (
        validate_reliability(values[0]),
        validate_reliability(values[1]),
        validate_reliability(values[2]),
    )


def validate_value(value: int) -> int:
    if not 0 <= value < NUM_VALUES:
        raise ValueError(f"value must be in [0, {NUM_VALUES - 1}], got {value}")
    return value


# ------------------------------------------------------------
# Module sampler
# ------------------------------------------------------------

def sample_module(
    rng: random.Random,
    reliability: float,
    true_value: int = TRUE_VALUE,
) -> int:
    """
    Draw one simulated module output.

    With probability `reliability` the module reports `true_value`. Otherwise
    it reports one of the other NUM_VALUES - 1 values, uniformly:

        x ~ U{0, ..., NUM_VALUES - 2}
        x += 1 if x >= true_value

    so the error branch can never produce `true_value`.

    RNG consumption is part of the contract (seeded runs depend on it):
      - exactly one rng.random() per call
      - plus one rng.randrange() only on the error branch
    """
    reliability = validate_reliability(reliability)

    if rng.random() < reliability:
        return true_value

    x = rng.randrange(NUM_VALUES - 1)
    if x >= true_value:
        x += 1
    return x


def sample_outputs(
    rng: random.Random,
    reliabilities: Reliabilities,
    true_value: int = TRUE_VALUE,
) -> Outputs:
    """
    One trial outcome: modules 0, 1, 2 sampled in that order.
    """
    return (
        sample_module(rng, reliabilities[0], true_value),
        sample_module(rng, reliabilities[1], true_value),
        sample_module(rng, reliabilities[2], true_value),
    )
