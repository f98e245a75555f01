"""Accelerator device names."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import ClassVar

_KNOWN_DEVICES = ("CPU", "GPU", "NPU", "GNA")


@functools.total_ordering
@dataclass(frozen=True)
class DeviceType:
    """An accelerator device, either a well-known one or an arbitrary name.

    Devices order with the well-known ones first (CPU, GPU, NPU, GNA) and
    arbitrary names after them, alphabetically. GNA is deprecated in favour
    of NPU.
    """

    name: str

    CPU: ClassVar[DeviceType]
    GPU: ClassVar[DeviceType]
    NPU: ClassVar[DeviceType]
    GNA: ClassVar[DeviceType]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"device name must be a string, got {self.name!r}")

    @classmethod
    def parse(cls, text: str) -> DeviceType:
        """Build a device type from its name; any string is accepted."""
        return cls(text)

    def is_other(self) -> bool:
        """Return True if this is not one of the well-known devices."""
        return self.name not in _KNOWN_DEVICES

    def _sort_key(self) -> tuple[int, str]:
        if self.is_other():
            return (len(_KNOWN_DEVICES), self.name)
        return (_KNOWN_DEVICES.index(self.name), "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DeviceType):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return self.name


DeviceType.CPU = DeviceType("CPU")
DeviceType.GPU = DeviceType("GPU")
DeviceType.NPU = DeviceType("NPU")
DeviceType.GNA = DeviceType("GNA")