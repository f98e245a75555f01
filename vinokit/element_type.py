"""Tensor element types."""

from __future__ import annotations

import enum


class ElementType(enum.IntEnum):
    """The element type of a tensor."""

    DYNAMIC = 0
    BOOLEAN = 1
    BF16 = 2
    F16 = 3
    F32 = 4
    F64 = 5
    I4 = 6
    I8 = 7
    I16 = 8
    I32 = 9
    I64 = 10
    U1 = 11
    U2 = 12
    U3 = 13
    U4 = 14
    U6 = 15
    U8 = 16
    U16 = 17
    U32 = 18
    U64 = 19
    NF4 = 20
    F8E4M3 = 21
    F8E5M3 = 22
    STRING = 23
    F4E2M1 = 24
    F8E8M0 = 25

    def __str__(self) -> str:
        return _LABELS.get(self, self.name)


_LABELS = {
    ElementType.DYNAMIC: "Dynamic",
    ElementType.BOOLEAN: "Boolean",
    ElementType.STRING: "String",
}