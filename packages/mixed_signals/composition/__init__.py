"""Combinators that compose two or more signals."""

from .arithmetic import Add, Mix, Multiply
from .modulation import FrequencyMod, VcaCentered

__all__ = ["Add", "FrequencyMod", "Mix", "Multiply", "VcaCentered"]
