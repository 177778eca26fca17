from __future__ import annotations

"""Exception types raised by the engines, the factory and the sampling helpers."""


class RngError(Exception):
    """Base class for every error raised by seedrng."""


class InvalidArgumentError(RngError, ValueError):
    """A caller-supplied argument is outside what the operation accepts."""


class InvalidStateError(RngError, ValueError):
    """A serialized engine state could not be parsed or has the wrong shape."""


class UnsupportedVariantError(RngError, ValueError):
    """The factory was asked for an engine tag it does not know."""

    def __init__(self, variant: object) -> None:
        super().__init__(f"Unsupported RNG type: {variant!r}")
        self.variant = variant
