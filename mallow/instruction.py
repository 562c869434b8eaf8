"""Bit-field model of 32-bit AArch64 instruction words."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WORD_BITS = 32


@dataclass(frozen=True)
class Field:
    """Bits ``low`` up to (not including) ``high`` of an instruction word.

    With ``high`` left out the field is the single bit at ``low``.
    """

    low: int
    high: int | None = None

    def __post_init__(self) -> None:
        high = self.low + 1 if self.high is None else self.high
        if not 0 <= self.low < high <= WORD_BITS:
            raise ValueError(f"invalid bit range {self.low}..{high}")
        object.__setattr__(self, "high", high)

    def width(self) -> int:
        return self.high - self.low

    def mask(self) -> int:
        return ((1 << self.width()) - 1) << self.low

    def extract(self, word: int) -> int:
        return (word & self.mask()) >> self.low

    def insert(self, word: int, value: int) -> int:
        """Return ``word`` with this field replaced by ``value``, truncated to fit."""
        return (word & ~self.mask()) | ((int(value) << self.low) & self.mask())


class ShiftType(IntEnum):
    LSL = 0b00
    LSR = 0b01
    ASR = 0b10
    ROR = 0b11


class ExtendType(IntEnum):
    UXTB = 0b000
    UXTH = 0b001
    UXTW = 0b010
    UXTX = 0b011
    LSL = 0b011
    SXTB = 0b100
    SXTH = 0b101
    SXTW = 0b110
    SXTX = 0b111


class Instruction:
    """A 32-bit instruction word built from named fields."""

    MAIN_OP0 = Field(25, 29)

    def __init__(self, op0: int) -> None:
        self.value = 0
        self.set(self.MAIN_OP0, op0)

    def get(self, field: Field) -> int:
        return field.extract(self.value)

    def set(self, field: Field, value: int) -> None:
        self.value = field.insert(self.value, value)

    def to_bytes(self) -> bytes:
        """The word in little-endian byte order, as it sits in memory."""
        return self.value.to_bytes(4, "little")

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Instruction):
            return self.value == other.value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.value:08X})"


class Op100xInstruction(Instruction):
    """Data processing with immediate operands."""

    OP0 = Field(23, 26)

    def __init__(self, op0: int) -> None:
        super().__init__(0b1000)
        self.set(self.OP0, op0)


class Op101xInstruction(Instruction):
    """Branches, exception generation and system instructions."""

    OP0 = Field(29, 32)
    OP1 = Field(12, 26)
    OP2 = Field(0, 5)

    def __init__(self, op0: int) -> None:
        super().__init__(0b1010)
        self.set(self.OP0, op0)


class Opx101Instruction(Instruction):
    """Data processing with register operands."""

    OP0 = Field(30)
    OP1 = Field(28)
    OP2 = Field(20, 24)
    OP3 = Field(10, 15)

    def __init__(self, op0: int, op1: int, op2: int, op3: int) -> None:
        super().__init__(0b0101)
        self.set(self.OP0, op0)
        self.set(self.OP1, op1)
        self.set(self.OP2, op2)
        self.set(self.OP3, op3)


class Opx1x0Instruction(Instruction):
    """Loads and stores."""

    OP0 = Field(28, 32)
    OP1 = Field(26)
    OP2 = Field(23, 25)
    OP3 = Field(16, 22)
    OP4 = Field(10, 12)

    def __init__(self, op0: int) -> None:
        super().__init__(0b0100)
        self.set(self.OP0, op0)