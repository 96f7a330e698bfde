"""Envelopes: ADSR, LinearEnvelope, Impact."""

from .envelopes import ADSR, Impact, LinearEnvelope

__all__ = ["ADSR", "Impact", "LinearEnvelope"]
