"""Base types for bulk and control command buffers."""

from __future__ import annotations

from dataclasses import dataclass

from .bulk_codes import BulkCode
from .control_codes import ControlCode


@dataclass(frozen=True)
class BitField:
    """A packed bit field of ``width`` bits starting at bit ``shift`` of one byte.

    Like a C bit-field, values wider than the field are truncated on :meth:`set`.
    """

    shift: int
    width: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.shift < 0 or self.shift + self.width > 8:
            raise ValueError(f"bit field does not fit in a byte: shift={self.shift}, width={self.width}")

    @property
    def mask(self) -> int:
        """Mask of the field's bits, unshifted."""
        return (1 << self.width) - 1

    def get(self, byte: int) -> int:
        """Extract the field's value from ``byte``."""
        return (byte >> self.shift) & self.mask

    def set(self, byte: int, value: int) -> int:
        """Return ``byte`` with the field replaced by ``value``."""
        cleared = byte & ~(self.mask << self.shift) & 0xFF
        return cleared | ((int(value) & self.mask) << self.shift)


class BulkCommand(bytearray):
    """A zero-filled bulk command buffer tagged with its :class:`BulkCode`."""

    def __init__(self, code: BulkCode, size: int) -> None:
        if size < 0:
            raise ValueError(f"command size must not be negative, got {size}")
        super().__init__(size)
        self.code = BulkCode(code)
        self.pending = False
        self.next: BulkCommand | None = None


class ControlCommand(bytearray):
    """A zero-filled control command buffer tagged with its :class:`ControlCode`."""

    def __init__(self, code: ControlCode, size: int) -> None:
        if size < 0:
            raise ValueError(f"command size must not be negative, got {size}")
        super().__init__(size)
        self.code = ControlCode(code)
        self.value = 0
        self.pending = False
        self.next: ControlCommand | None = None