"""
Target platform tags for bindspec IR.

Six concrete platforms have their own address slot in a bind table. The
generic `mac` and `android` tags are write-time aliases that fan out to both
of their concrete architectures; they are never stored.
"""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """Platform keyword as written in a bind list."""

    WINDOWS = "win"
    MAC = "mac"
    INTEL_MAC = "imac"
    M1_MAC = "m1"
    IOS = "ios"
    ANDROID = "android"
    ANDROID32 = "android32"
    ANDROID64 = "android64"

    @property
    def slots(self) -> tuple[str, ...]:
        """BindTable field names written by this platform."""
        if self is Platform.MAC:
            return ("intel_mac", "m1_mac")
        if self is Platform.ANDROID:
            return ("android32", "android64")
        if self is Platform.WINDOWS:
            return ("win",)
        if self is Platform.INTEL_MAC:
            return ("intel_mac",)
        if self is Platform.M1_MAC:
            return ("m1_mac",)
        # ios, android32 and android64 share their slot name with the keyword
        return (self.value,)

    @property
    def is_alias(self) -> bool:
        """True for generic tags that write more than one slot."""
        return len(self.slots) > 1
