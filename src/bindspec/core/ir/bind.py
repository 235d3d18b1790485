"""
Per-platform address tables for bindspec IR.

A bind table records where a method's compiled code lives on each concrete
platform. `None` means "no address": the platform was not listed, the method
is `inline` there, or the address was written as an explicit zero. The last
two are deliberately indistinguishable since no real address is ever zero.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .platforms import Platform

# Addresses are pointer-width unsigned integers
MAX_ADDRESS = 2**64 - 1


def normalize_address(value: int | None) -> int | None:
    """Collapse an explicit zero address to None."""
    if value == 0:
        return None
    return value


class BindTable(BaseModel):
    """
    Binary addresses of one method, one optional slot per concrete platform.

    Attributes:
        win: Windows
        intel_mac: Intel macOS
        m1_mac: Apple-silicon macOS
        ios: iOS
        android32: 32-bit Android
        android64: 64-bit Android
    """

    win: int | None = None
    intel_mac: int | None = None
    m1_mac: int | None = None
    ios: int | None = None
    android32: int | None = None
    android64: int | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("win", "intel_mac", "m1_mac", "ios", "android32", "android64")
    @classmethod
    def validate_address(cls, v: int | None) -> int | None:
        """Ensure stored addresses are non-zero and fit in 64 bits."""
        if v is not None and not 0 < v <= MAX_ADDRESS:
            raise ValueError(f"Address {v:#x} is not a non-zero 64-bit value")
        return v

    def with_address(self, platform: Platform, address: int | None) -> BindTable:
        """
        Return a copy with every slot of `platform` set to `address`.

        Generic aliases (`mac`, `android`) write both of their slots; any
        other slot keeps its current value.
        """
        address = normalize_address(address)
        return self.model_copy(update={slot: address for slot in platform.slots})

    def get(self, platform: Platform) -> int | None:
        """
        Address for a platform.

        For a generic alias this is the shared address only when both
        concrete slots agree, otherwise None.
        """
        values = {getattr(self, slot) for slot in platform.slots}
        if len(values) == 1:
            return values.pop()
        return None

    @property
    def is_empty(self) -> bool:
        """True when no platform has an address."""
        return all(value is None for value in self.model_dump().values())
