from dataclasses import dataclass
from datetime import timedelta

# FSRS v4 default parameters (w0-w12)
DEFAULT_WEIGHTS = (0.4, 0.6, 2.4, 5.8, 4.93, 0.94, 0.86, 0.01, 1.49, 0.14, 0.94, 2.18, 0.05)

MIN_STABILITY = 0.1
MIN_DIFFICULTY = 1.0
MAX_DIFFICULTY = 10.0

# Stability kept after a failed recall
LEARNING_AGAIN_FACTOR = 0.5
LAPSE_FACTOR = 0.2

LEARNING_STEP = timedelta(minutes=1)

DUE_LIMIT = 20
MIN_OCCURRENCES = 2


@dataclass(frozen=True)
class FsrsWeights:
    """Immutable FSRS weight vector.

    ``w[0..3]`` initial stability per rating, ``w[4..5]`` initial difficulty,
    ``w[6..7]`` difficulty update and mean reversion, ``w[8..10]`` recall
    stability growth, ``w[11]`` Hard multiplier, ``w[12]`` Easy multiplier.
    """

    w: tuple = DEFAULT_WEIGHTS

    def __post_init__(self):
        values = tuple(float(x) for x in self.w)
        if len(values) != len(DEFAULT_WEIGHTS):
            raise ValueError(
                f"FSRS weights need {len(DEFAULT_WEIGHTS)} values, got {len(values)}"
            )
        object.__setattr__(self, "w", values)

    def __getitem__(self, index):
        return self.w[index]


DEFAULT_FSRS_WEIGHTS = FsrsWeights()


def _scheduler_settings():
    from django.conf import settings

    return getattr(settings, "SCHEDULER", {})


def get_weights() -> FsrsWeights:
    weights = _scheduler_settings().get("WEIGHTS")
    if weights is None:
        return DEFAULT_FSRS_WEIGHTS
    return FsrsWeights(tuple(weights))


def get_due_limit() -> int:
    return int(_scheduler_settings().get("DUE_LIMIT", DUE_LIMIT))


def get_min_occurrences() -> int:
    return int(_scheduler_settings().get("MIN_OCCURRENCES", MIN_OCCURRENCES))
