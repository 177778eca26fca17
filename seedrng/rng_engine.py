from __future__ import annotations

"""Engine contract shared by every generator in this package."""

from abc import ABC, abstractmethod

UINT32_MASK = 0xFFFFFFFF
UINT32_SCALE = float(UINT32_MASK) + 1.0
UINT64_MASK = 0xFFFFFFFFFFFFFFFF
UINT64_SCALE = 1 << 64


class RngEngine(ABC):
    """Deterministic generator of floats in [0, 1) with a serializable state.

    Two engines of the same variant holding the same state produce the same
    future sequence. Instances are mutable and must not be shared across
    threads without external locking.
    """

    #: Factory tag of the concrete engine (e.g. ``"mulberry32"``).
    variant: str = ""

    @abstractmethod
    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""

    @abstractmethod
    def get_state(self) -> str:
        """Return the current state as an opaque string snapshot."""

    @abstractmethod
    def set_state(self, state: str) -> None:
        """Restore a snapshot previously produced by :meth:`get_state`.

        Raises:
            InvalidStateError: if the snapshot is malformed.
        """

    def random(self) -> float:
        """Alias of :meth:`next` so ``engine.random`` works as a ``rand_fn``."""
        return self.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self.get_state()[:48]!r})"
