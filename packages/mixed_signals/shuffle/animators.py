"""
Step-wise shuffle animators.

Each animator replays one of the physical shuffles one visible move at a
time, so a renderer can draw every intermediate arrangement. The animators
make exactly the same Rng draws in the same order as riffle_shuffle and
overhand_shuffle, so running one to completion gives the same result as the
one-shot function with an identically seeded Rng.

Usage:
    >>> animator = RiffleAnimator(list("ABCDEFGH"), passes=3, rng=Rng(7))
    >>> for frame in animator:
    ...     render(frame)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Generic, TypeVar

from ..rng import Rng
from .algorithms import gsr_cut, gsr_take_left, overhand_packet

T = TypeVar("T")


class RiffleState(Enum):
    """Riffle animator state"""
    IDLE = "idle"
    SPLITTING = "splitting"
    INTERLEAVING = "interleaving"
    DONE = "done"


class OverhandState(Enum):
    """Overhand animator state"""
    IDLE = "idle"
    GRABBING = "grabbing"
    DROPPING = "dropping"
    DONE = "done"


class _Animator(ABC, Generic[T]):
    """Shared pass counting, cancellation and iteration."""

    def __init__(self, items: Sequence[T], passes: int, rng: Rng):
        self._items: list[T] = list(items)
        self._passes = max(0, int(passes))
        self._pass_index = 0
        self._rng = rng

    @property
    def passes_done(self) -> int:
        return self._pass_index

    @property
    @abstractmethod
    def done(self) -> bool:
        """True once every pass has finished or the animation was cancelled."""

    @property
    @abstractmethod
    def arrangement(self) -> list[T]:
        """Current order of the items."""

    @abstractmethod
    def step(self) -> bool:
        """Advance one move; False when there is nothing left to do."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop at the current arrangement."""

    def run(self) -> list[T]:
        """Step until finished and return the final arrangement."""
        while self.step():
            pass
        return self.arrangement

    def __iter__(self) -> Iterator[list[T]]:
        """Yield the arrangement after every move."""
        while self.step():
            yield self.arrangement


class RiffleAnimator(_Animator[T]):
    """
    Gilbert-Shannon-Reeds riffle, one card per step.

    States:
        IDLE -> SPLITTING -> INTERLEAVING -> DONE, with SPLITTING revisited
        once per remaining pass.

    During interleaving the arrangement is the merged cards followed by what
    is left of the left packet, then the right packet.
    """

    def __init__(self, items: Sequence[T], passes: int, rng: Rng):
        super().__init__(items, passes, rng)
        self.state = RiffleState.IDLE
        self._left: list[T] = []
        self._right: list[T] = []
        self._merged: list[T] = []

    @property
    def done(self) -> bool:
        return self.state == RiffleState.DONE

    @property
    def arrangement(self) -> list[T]:
        if self.state == RiffleState.INTERLEAVING:
            return self._merged + self._left + self._right
        return list(self._items)

    def step(self) -> bool:
        """
        Advance by one move.

        Returns:
            False once the animator is DONE, True otherwise
        """
        if self.state == RiffleState.DONE:
            return False
        if self.state == RiffleState.IDLE:
            self.state = RiffleState.SPLITTING if self._passes else RiffleState.DONE
            return True
        if self.state == RiffleState.SPLITTING:
            cut = gsr_cut(len(self._items), self._rng)
            self._left = self._items[:cut]
            self._right = self._items[cut:]
            self._merged = []
            self.state = RiffleState.INTERLEAVING
            if not self._left and not self._right:
                self._finish_pass()
            return True

        if not self._right or (
            self._left and gsr_take_left(len(self._left), len(self._right), self._rng)
        ):
            self._merged.append(self._left.pop(0))
        else:
            self._merged.append(self._right.pop(0))
        if not self._left and not self._right:
            self._finish_pass()
        return True

    def _finish_pass(self) -> None:
        self._items = self._merged
        self._merged = []
        self._pass_index += 1
        if self._pass_index < self._passes:
            self.state = RiffleState.SPLITTING
        else:
            self.state = RiffleState.DONE

    def cancel(self) -> None:
        """Stop immediately, keeping the current arrangement."""
        self._items = self.arrangement
        self._left, self._right, self._merged = [], [], []
        self.state = RiffleState.DONE


class OverhandAnimator(_Animator[T]):
    """
    Overhand shuffle, one grab or drop per step.

    States:
        IDLE -> GRABBING -> DROPPING -> DONE, alternating GRABBING and
        DROPPING until the hand is empty on the last pass.

    The arrangement is the packet in flight, then the new pile, then the
    cards still in hand.
    """

    def __init__(self, items: Sequence[T], passes: int, rng: Rng):
        super().__init__(items, passes, rng)
        self.state = OverhandState.IDLE
        self._size = len(self._items)
        self._hand: list[T] = []
        self._pile: list[T] = []
        self._packet: list[T] = []

    @property
    def done(self) -> bool:
        return self.state == OverhandState.DONE

    @property
    def arrangement(self) -> list[T]:
        if self.state in (OverhandState.GRABBING, OverhandState.DROPPING):
            return self._packet + self._pile + self._hand
        return list(self._items)

    def step(self) -> bool:
        """
        Advance by one move.

        Returns:
            False once the animator is DONE, True otherwise
        """
        if self.state == OverhandState.DONE:
            return False
        if self.state == OverhandState.IDLE:
            if self._passes:
                self._start_pass()
            else:
                self.state = OverhandState.DONE
            return True
        if self.state == OverhandState.GRABBING:
            size = overhand_packet(self._size, len(self._hand), self._rng)
            self._packet, self._hand = self._hand[:size], self._hand[size:]
            self.state = OverhandState.DROPPING
            return True

        self._pile = self._packet + self._pile
        self._packet = []
        if self._hand:
            self.state = OverhandState.GRABBING
        else:
            self._finish_pass()
        return True

    def _start_pass(self) -> None:
        self._hand = list(self._items)
        self._pile = []
        self._packet = []
        self.state = OverhandState.GRABBING
        if not self._hand:
            self._finish_pass()

    def _finish_pass(self) -> None:
        self._items = self._pile
        self._pile = []
        self._pass_index += 1
        if self._pass_index < self._passes:
            self._start_pass()
        else:
            self.state = OverhandState.DONE

    def cancel(self) -> None:
        """Stop immediately, keeping the current arrangement."""
        self._items = self.arrangement
        self._hand, self._pile, self._packet = [], [], []
        self.state = OverhandState.DONE
