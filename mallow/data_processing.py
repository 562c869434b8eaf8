"""Data-processing instructions with immediate operands."""

from __future__ import annotations

from enum import IntEnum

from .instruction import Field, Op100xInstruction
from .registers import NONE32, NONE64, Register

_U32_MASK = 0xFFFFFFFF


class AddSubtractImmediate(Op100xInstruction):
    """ADD/ADDS/SUB/SUBS with a 12-bit, optionally shifted, immediate."""

    OP0_VALUE = 0b010

    IMM_SHIFT = 12
    MASK_FOR_IMM_SHIFT = (1 << IMM_SHIFT) - 1

    SF = Field(31)
    OP = Field(30)
    S = Field(29)
    SH = Field(22)
    IMM12 = Field(10, 22)
    RN = Field(5, 10)
    RD = Field(0, 5)

    def __init__(self, sf: bool, op: bool, s: bool) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.SF, sf)
        self.set(self.OP, op)
        self.set(self.S, s)

    @staticmethod
    def calc_sh(imm: int) -> bool:
        """Whether the immediate is encoded shifted left by twelve bits."""
        imm &= _U32_MASK
        return imm != 0 and (imm & AddSubtractImmediate.MASK_FOR_IMM_SHIFT) == 0

    @staticmethod
    def calc_imm(imm: int) -> int:
        imm &= _U32_MASK
        if AddSubtractImmediate.calc_sh(imm):
            imm >>= AddSubtractImmediate.IMM_SHIFT
        return imm & 0xFFFF


class _AddSubtractImmediateForm(AddSubtractImmediate):
    OPERATION = 0
    SETS_FLAGS = 0

    def __init__(self, rd: Register, rn: Register, imm: int) -> None:
        super().__init__(rd.is64(), self.OPERATION, self.SETS_FLAGS)
        self.set(self.RD, rd.index)
        self.set(self.RN, rn.index)
        self.set(self.IMM12, self.calc_imm(imm))
        self.set(self.SH, self.calc_sh(imm))


class AddImmediate(_AddSubtractImmediateForm):
    OPERATION = 0
    SETS_FLAGS = 0


class AddsImmediate(_AddSubtractImmediateForm):
    OPERATION = 0
    SETS_FLAGS = 1


class SubImmediate(_AddSubtractImmediateForm):
    OPERATION = 1
    SETS_FLAGS = 0


class SubsImmediate(_AddSubtractImmediateForm):
    OPERATION = 1
    SETS_FLAGS = 1


def _discard_register(reg: Register) -> Register:
    return NONE64 if reg.is64() else NONE32


class CmnImmediate(AddsImmediate):
    """CMN: ADDS with the result discarded."""

    def __init__(self, reg: Register, imm: int) -> None:
        super().__init__(self.get_rd(reg), reg, imm)

    @staticmethod
    def get_rd(reg: Register) -> Register:
        return _discard_register(reg)


class CmpImmediate(SubsImmediate):
    """CMP: SUBS with the result discarded."""

    def __init__(self, reg: Register, imm: int) -> None:
        super().__init__(self.get_rd(reg), reg, imm)

    @staticmethod
    def get_rd(reg: Register) -> Register:
        return _discard_register(reg)


class LogicalImmediate(Op100xInstruction):
    """AND/ORR/EOR/ANDS with a bitmask immediate; fields only."""

    OP0_VALUE = 0b100

    SF = Field(31)
    OPC = Field(29, 31)
    N = Field(22)
    IMMR = Field(16, 22)
    IMMS = Field(10, 16)
    RN = Field(5, 10)
    RD = Field(0, 5)

    def __init__(self, sf: int, opc: int) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.SF, sf)
        self.set(self.OPC, opc)


class MoveWideImmediate(Op100xInstruction):
    """MOVN/MOVZ/MOVK with a 16-bit immediate."""

    OP0_VALUE = 0b101

    SF = Field(31)
    OPC = Field(29, 31)
    HW = Field(21, 23)
    IMM16 = Field(5, 21)
    RD = Field(0, 5)

    def __init__(self, reg: Register, opc: int, hw: int, imm: int) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.SF, reg.is64())
        self.set(self.OPC, opc)
        self.set(self.HW, hw)
        self.set(self.IMM16, imm & 0xFFFF)
        self.set(self.RD, reg.index)


class _MoveWideForm(MoveWideImmediate):
    OPC_VALUE = 0
    HW_VALUE = 0b00

    def __init__(self, reg: Register, imm: int) -> None:
        super().__init__(reg, self.OPC_VALUE, self.HW_VALUE, imm)


class Movk(_MoveWideForm):
    OPC_VALUE = 0b11


class Movn(_MoveWideForm):
    OPC_VALUE = 0b00


class Movz(_MoveWideForm):
    OPC_VALUE = 0b10


class PcRelAddressing(Op100xInstruction):
    """ADR/ADRP: PC-relative address formation."""

    OP0_VALUE = 0b000

    OP = Field(31)
    IMMLO = Field(29, 31)
    IMMHI = Field(5, 24)
    RD = Field(0, 5)

    class Operation(IntEnum):
        ADR = 0
        ADRP = 1

    def __init__(self, reg: Register, imm: int, op: int) -> None:
        super().__init__(self.OP0_VALUE)
        imm &= _U32_MASK
        self.set(self.OP, op)
        self.set(self.IMMLO, imm)
        self.set(self.IMMHI, imm >> self.IMMLO.width())
        self.set(self.RD, reg.index)


class Adr(PcRelAddressing):
    def __init__(self, reg: Register, imm: int) -> None:
        super().__init__(reg, imm, PcRelAddressing.Operation.ADR)


class Adrp(PcRelAddressing):
    """ADRP; ``imm`` is a byte offset, of which only whole pages are encoded."""

    def __init__(self, reg: Register, imm: int) -> None:
        super().__init__(reg, (imm & _U32_MASK) >> 12, PcRelAddressing.Operation.ADRP)