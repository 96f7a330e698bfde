"""
Permutation algorithms over a caller-owned Rng.

In-place algorithms return None (like random.shuffle); the rest return new
lists. Every algorithm consumes draws from the given Rng in a fixed order, so
the same seed always gives the same arrangement.

Usage:
    >>> rng = Rng(42)
    >>> deck = list(range(52))
    >>> fisher_yates(deck, rng)
    >>> hand = shuffle_copy(deck, rng)[:5]
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Hashable, Iterable, MutableSequence, Sequence
from typing import TypeVar

from ..config import get_settings
from ..rng import Rng

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[Sequence[T]], bool]


def fisher_yates(items: MutableSequence[T], rng: Rng) -> None:
    """Uniform in-place shuffle (Durstenfeld)."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.below(i + 1)
        items[i], items[j] = items[j], items[i]


def sattolo(items: MutableSequence[T], rng: Rng) -> None:
    """Uniform in-place cyclic permutation: no element stays put (n >= 2)."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.below(i)
        items[i], items[j] = items[j], items[i]


def partial_shuffle(items: MutableSequence[T], k: int, rng: Rng) -> None:
    """
    Fisher-Yates stopped after k swaps.

    Afterwards items[:k] is a uniform random k-permutation of the input; the
    rest of the list holds the remaining elements in unspecified order.
    """
    n = len(items)
    k = max(0, min(int(k), n))
    for i in range(k):
        j = i + rng.below(n - i)
        items[i], items[j] = items[j], items[i]


def shuffle_copy(items: Iterable[T], rng: Rng) -> list[T]:
    """Non-destructive Fisher-Yates."""
    result = list(items)
    fisher_yates(result, rng)
    return result


def weighted_shuffle(items: Sequence[T], weights: Sequence[float], rng: Rng) -> list[T]:
    """
    Order items by weighted sampling without replacement.

    Efraimidis-Spirakis: each item gets key u ** (1 / w) and items are sorted
    by descending key. Items whose weight is zero, negative or not finite sort
    after every positive-weight item, so they are never chosen first while a
    positive weight exists. Missing weights count as 1.
    """
    keyed: list[tuple[int, float, int]] = []
    for index in range(len(items)):
        weight = float(weights[index]) if index < len(weights) else 1.0
        u = rng.uniform()
        if math.isfinite(weight) and weight > 0.0:
            # log(u) / w orders like u ** (1 / w) without underflow
            key = math.log(u) / weight if u > 0.0 else -math.inf
            keyed.append((1, key, index))
        else:
            keyed.append((0, u, index))
    keyed.sort(key=lambda entry: (entry[0], entry[1]), reverse=True)
    return [items[index] for _, _, index in keyed]


def max_run_predicate(key: Callable[[T], Hashable], max_run: int) -> Predicate:
    """Predicate rejecting arrangements with more than max_run equal keys in a row."""

    def predicate(arrangement: Sequence[T]) -> bool:
        run = 0
        previous: object = object()
        for item in arrangement:
            current = key(item)
            run = run + 1 if current == previous else 1
            if run > max_run:
                return False
            previous = current
        return True

    return predicate


def constrained_shuffle(
    items: MutableSequence[T],
    predicate: Predicate,
    rng: Rng,
    budget: int | None = None,
) -> bool:
    """
    Uniform shuffle conditioned on a predicate, in place.

    Tries up to `budget` independent shuffles (default from settings). If all
    are rejected, runs a deterministic repair over the last candidate: every
    pair swap (i, j) is tried in order and the first arrangement that passes is
    kept. If nothing passes, the last candidate is kept.

    Args:
        items: Sequence to shuffle in place
        predicate: Returns True for acceptable arrangements
        rng: Random source
        budget: Maximum rejection-sampling attempts

    Returns:
        True if the final arrangement satisfies the predicate
    """
    if budget is None:
        budget = get_settings().constrained_shuffle_budget
    candidate = list(items)
    for _ in range(max(0, budget)):
        candidate = list(items)
        fisher_yates(candidate, rng)
        if predicate(candidate):
            items[:] = candidate
            return True

    logger.warning(f"Constrained shuffle exhausted {budget} attempts, repairing")
    n = len(candidate)
    for i in range(n):
        for j in range(i + 1, n):
            candidate[i], candidate[j] = candidate[j], candidate[i]
            if predicate(candidate):
                items[:] = candidate
                return True
            candidate[i], candidate[j] = candidate[j], candidate[i]

    logger.warning("Constrained shuffle found no arrangement satisfying the predicate")
    items[:] = candidate
    return False


def interleave(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Alternate a0, b0, a1, b1, ..., then append whatever remains."""
    result: list[T] = []
    shared = min(len(a), len(b))
    for i in range(shared):
        result.append(a[i])
        result.append(b[i])
    result.extend(a[shared:])
    result.extend(b[shared:])
    return result


def perfect_shuffle(items: MutableSequence[T], out: bool = True) -> None:
    """
    Faro shuffle in place: split in half and interleave exactly.

    An out-shuffle keeps the top card on top; an in-shuffle moves it to second.
    Odd lengths put the extra card in the first half.
    """
    half = (len(items) + 1) // 2
    top, bottom = list(items[:half]), list(items[half:])
    items[:] = interleave(top, bottom) if out else interleave(bottom, top)


def gsr_cut(n: int, rng: Rng) -> int:
    """Binomial(n, 1/2) cut point of the Gilbert-Shannon-Reeds model."""
    return sum(1 for _ in range(n) if rng.next_u64() >> 63)


def gsr_take_left(left: int, right: int, rng: Rng) -> bool:
    """Drop from the left packet with probability left / (left + right)."""
    return rng.below(left + right) < left


def riffle_shuffle(items: MutableSequence[T], passes: int, rng: Rng) -> None:
    """
    `passes` Gilbert-Shannon-Reeds riffles in place.

    Each pass cuts at a Binomial(n, 1/2) point and drops cards from the two
    packets with probability proportional to their remaining sizes. A draw is
    only made while both packets hold cards.
    """
    for _ in range(max(0, int(passes))):
        cut = gsr_cut(len(items), rng)
        left, right = list(items[:cut]), list(items[cut:])
        li = ri = 0
        merged: list[T] = []
        while li < len(left) or ri < len(right):
            remaining_left = len(left) - li
            remaining_right = len(right) - ri
            if remaining_right == 0 or (
                remaining_left and gsr_take_left(remaining_left, remaining_right, rng)
            ):
                merged.append(left[li])
                li += 1
            else:
                merged.append(right[ri])
                ri += 1
        items[:] = merged


def overhand_packet(n: int, remaining: int, rng: Rng) -> int:
    """Uniform packet size in [1, max(1, n // 4)], capped by what remains in hand."""
    return min(remaining, 1 + rng.below(max(1, n // 4)))


def overhand_shuffle(items: MutableSequence[T], passes: int, rng: Rng) -> None:
    """
    `passes` overhand passes in place.

    Packets are taken from the top of the hand and dropped on top of a new
    pile, which reverses packet order while keeping order inside a packet.
    """
    n = len(items)
    for _ in range(max(0, int(passes))):
        hand = list(items)
        pile: list[T] = []
        while hand:
            size = overhand_packet(n, len(hand), rng)
            packet, hand = hand[:size], hand[size:]
            pile = packet + pile
        items[:] = pile


def reservoir_shuffle(stream: Iterable[T], k: int | None, rng: Rng) -> list[T]:
    """
    Uniform sample of k items from a stream of unknown length, in random order.

    Algorithm R fills the reservoir, then Fisher-Yates orders it. With
    k=None the whole stream is shuffled (inside-out Fisher-Yates).
    """
    if k is None:
        result: list[T] = []
        for i, item in enumerate(stream):
            j = rng.below(i + 1)
            if j == i:
                result.append(item)
            else:
                result.append(result[j])
                result[j] = item
        return result

    k = max(0, int(k))
    reservoir: list[T] = []
    if k == 0:
        return reservoir
    for i, item in enumerate(stream):
        if i < k:
            reservoir.append(item)
        else:
            j = rng.below(i + 1)
            if j < k:
                reservoir[j] = item
    fisher_yates(reservoir, rng)
    return reservoir


def smooth_shuffle(items: MutableSequence[T], strength: float, rng: Rng) -> None:
    """
    Local shuffle where no element moves more than floor(strength * n) places.

    Each index i gets the key i + u * D with u uniform in [0, 1) and
    D = floor(strength * n); sorting by key only reorders elements closer
    than D, which bounds every displacement by D. strength is clamped to
    [0, 1]; 0 leaves the order unchanged.
    """
    n = len(items)
    if not math.isfinite(strength):
        strength = 0.0
    spread = math.floor(min(max(strength, 0.0), 1.0) * n)
    if spread == 0 or n < 2:
        return
    keys = [(i + rng.uniform() * spread, i) for i in range(n)]
    keys.sort()
    original = list(items)
    items[:] = [original[i] for _, i in keys]
