"""Best-layout selection."""

from markpretty.select.best import best, first, first_of, fits, fitting_choices, non_empty_set

__all__ = [
    "best",
    "first",
    "first_of",
    "fits",
    "fitting_choices",
    "non_empty_set",
]
