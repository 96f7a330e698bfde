"""Deterministic permutation algorithms and step animators."""

from .algorithms import (
    constrained_shuffle,
    fisher_yates,
    interleave,
    max_run_predicate,
    overhand_shuffle,
    partial_shuffle,
    perfect_shuffle,
    reservoir_shuffle,
    riffle_shuffle,
    sattolo,
    shuffle_copy,
    smooth_shuffle,
    weighted_shuffle,
)
from .animators import OverhandAnimator, OverhandState, RiffleAnimator, RiffleState

__all__ = [
    "OverhandAnimator",
    "OverhandState",
    "RiffleAnimator",
    "RiffleState",
    "constrained_shuffle",
    "fisher_yates",
    "interleave",
    "max_run_predicate",
    "overhand_shuffle",
    "partial_shuffle",
    "perfect_shuffle",
    "reservoir_shuffle",
    "riffle_shuffle",
    "sattolo",
    "shuffle_copy",
    "smooth_shuffle",
    "weighted_shuffle",
]
