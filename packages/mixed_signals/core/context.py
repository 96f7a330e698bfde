"""Per-sample coordinates orthogonal to time."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..constants import MASK64


@dataclass(frozen=True, slots=True)
class SignalContext:
    """
    Extra coordinates for a sample.

    instance_id disambiguates parallel samples that should differ,
    spatial_seed co-salts spatial and per-character noise, and char_index is
    the index of the character being drawn.

    Example:
        >>> ctx = DEFAULT_CONTEXT.with_char_index(3)
        >>> noise.sample_with_context(0.0, ctx)
    """

    instance_id: int = 0
    spatial_seed: int = 0
    char_index: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "instance_id", int(self.instance_id) & MASK64)
        object.__setattr__(self, "spatial_seed", int(self.spatial_seed) & MASK64)
        if self.char_index is not None:
            object.__setattr__(self, "char_index", int(self.char_index) & 0xFFFF_FFFF)

    def with_char_index(self, index: int | None) -> SignalContext:
        return replace(self, char_index=index)

    def with_spatial_seed(self, seed: int) -> SignalContext:
        return replace(self, spatial_seed=seed)

    def with_instance(self, instance_id: int) -> SignalContext:
        return replace(self, instance_id=instance_id)


DEFAULT_CONTEXT = SignalContext()
