"""Easing curves for ramps and keyframes."""

from .curves import EASINGS, ease, easing_extent, validate_easing

__all__ = ["EASINGS", "ease", "easing_extent", "validate_easing"]
