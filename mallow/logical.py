"""Logical instructions with a shifted register operand."""

from __future__ import annotations

from .instruction import Field, Opx101Instruction, ShiftType
from .registers import NONE32, NONE64, Register


class LogicalShiftedRegister(Opx101Instruction):
    """AND/ORR/EOR/ANDS with a shifted register; fields only."""

    OP0_VALUE = 0b0
    OP1_VALUE = 0b0
    OP2_VALUE = 0b0000
    OP3_VALUE = 0b000000

    SF = Field(31)
    OPC = Field(29, 31)
    N = Field(21)
    IMMR = Field(16, 22)
    IMMS = Field(10, 16)
    RN = Field(5, 10)
    RD = Field(0, 5)

    def __init__(self, sf: int, opc: int) -> None:
        super().__init__(self.OP0_VALUE, self.OP1_VALUE, self.OP2_VALUE, self.OP3_VALUE)
        self.set(self.SF, sf)
        self.set(self.OPC, opc)


class OrrShiftedRegister(LogicalShiftedRegister):
    """ORR rd, rn, rm{, shift #amount}."""

    OPC_VALUE = 0b01

    SHIFT = Field(22, 24)
    RM = Field(16, 21)
    IMM6 = Field(10, 16)

    def __init__(
        self,
        rd: Register,
        rn: Register,
        rm: Register,
        shift: ShiftType = ShiftType.LSL,
        amount: int = 0,
    ) -> None:
        super().__init__(self.get_sf(rd, rn, rm), self.OPC_VALUE)
        self.set(self.SHIFT, shift)
        self.set(self.N, 0)
        self.set(self.RM, rm.index)
        self.set(self.IMM6, amount)
        self.set(self.RN, rn.index)
        self.set(self.RD, rd.index)

    @staticmethod
    def get_sf(rd: Register, rn: Register, rm: Register) -> bool:
        return rd.is64()


class MovRegister(OrrShiftedRegister):
    """MOV rd, rm: ORR with the zero register as first operand."""

    def __init__(self, rd: Register, rm: Register) -> None:
        super().__init__(rd, self.get_rn(rd, rm), rm)

    @staticmethod
    def get_rn(rd: Register, rm: Register) -> Register:
        return NONE64 if rd.is64() else NONE32