"""Exceptions raised by polychrome."""
from __future__ import annotations
from typing import Any


class PolychromeError(Exception):
    """Base class for every error raised by this package."""


class InvalidChannelValue(PolychromeError, ValueError):
    """A channel could not be interpreted as a value of its color model.

    Finite out-of-range numbers never raise this; they are clamped (or wrapped,
    for hue). It is raised for NaN, infinities, non-numeric input, a wrong
    number of channels and malformed hex codes.
    """

    def __init__(self, model: str, channel: str | None, value: Any, reason: str = "must be a finite real number") -> None:
        self.model = model
        self.channel = channel
        self.value = value
        where = f"{model} channel {channel!r}" if channel is not None else model
        super().__init__(f"{where} {reason}, got {value!r}")


class UnsupportedOperation(PolychromeError, AttributeError):
    """An operation or color space that no color model defines."""
