"""AArch64 general-purpose register descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_INDEX_MASK = 0x7F
_MAX_NAMED_INDEX = 30


class RegisterKind(Enum):
    """Width of a register view: 32-bit W or 64-bit X."""

    W = 0
    X = 1


@dataclass(frozen=True)
class Register:
    """A register of a given kind; the index is stored in seven bits."""

    kind: RegisterKind
    index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "index", self.index & _INDEX_MASK)

    def is32(self) -> bool:
        return self.kind is RegisterKind.W

    def is64(self) -> bool:
        return self.kind is RegisterKind.X

    def __str__(self) -> str:
        if self.is64() and self.index == 31:
            return "sp"
        return f"{'w' if self.is32() else 'x'}{self.index}"


def _named(kind: RegisterKind, index: int) -> Register:
    if not 0 <= index <= _MAX_NAMED_INDEX:
        raise ValueError(f"register index must be in 0..{_MAX_NAMED_INDEX}, got {index}")
    return Register(kind, index)


def w(index: int) -> Register:
    """The 32-bit register W<index>."""
    return _named(RegisterKind.W, index)


def x(index: int) -> Register:
    """The 64-bit register X<index>."""
    return _named(RegisterKind.X, index)


LR = x(30)
SP = Register(RegisterKind.X, 31)
NONE32 = Register(RegisterKind.W, -1)
NONE64 = Register(RegisterKind.X, -1)