"""Hints and unconditional branch instructions."""

from __future__ import annotations

from enum import IntEnum

from .instruction import Field, Op101xInstruction
from .registers import LR, Register

_U32_MASK = 0xFFFFFFFF


class Hints(Op101xInstruction):
    """The HINT space: NOP, YIELD, WFE and the like."""

    OP0_VALUE = 0b110
    OP1_VALUE = 0b01000000110010
    OP2_VALUE = 0b11111

    CRM = Field(8, 12)
    LOCAL_OP2 = Field(5, 8)

    def __init__(self) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.OP1, self.OP1_VALUE)
        self.set(self.OP2, self.OP2_VALUE)


class Nop(Hints):
    """NOP."""

    CRM_VALUE = 0b0000
    LOCAL_OP2_VALUE = 0b000

    def __init__(self) -> None:
        super().__init__()
        self.set(self.CRM, self.CRM_VALUE)
        self.set(self.LOCAL_OP2, self.LOCAL_OP2_VALUE)


class UnconditionalBranchImmediate(Op101xInstruction):
    """B/BL with a 26-bit word offset."""

    OP0_VALUE = 0b000

    OP = Field(31)
    IMM26 = Field(0, 26)

    class Operation(IntEnum):
        B = 0
        BL = 1

    def __init__(self, op: int, relative_address: int) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.OP, op)
        self.set(self.IMM26, (relative_address & _U32_MASK) // 4)


class Branch(UnconditionalBranchImmediate):
    """B: branch by a byte offset relative to this instruction."""

    def __init__(self, relative_address: int) -> None:
        super().__init__(UnconditionalBranchImmediate.Operation.B, relative_address)


class BranchLink(UnconditionalBranchImmediate):
    """BL: branch with link by a byte offset relative to this instruction."""

    def __init__(self, relative_address: int) -> None:
        super().__init__(UnconditionalBranchImmediate.Operation.BL, relative_address)


class UnconditionalBranchRegister(Op101xInstruction):
    """BR/BLR/RET: branch to an address held in a register."""

    OP0_VALUE = 0b110
    OP1_VALUE = 0b10000000000000

    OPC = Field(21, 25)
    UBR_OP2 = Field(16, 21)
    OP3 = Field(10, 16)
    RN = Field(5, 10)
    OP4 = Field(0, 5)

    def __init__(self, opc: int, op2: int) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.OP1, self.OP1_VALUE)
        self.set(self.OPC, opc)
        self.set(self.UBR_OP2, op2)


class _RegisterBranchForm(UnconditionalBranchRegister):
    OPC_VALUE = 0b0000
    OP2_VALUE = 0b11111
    OP3_VALUE = 0b000000
    OP4_VALUE = 0b00000

    def __init__(self, rn: Register) -> None:
        super().__init__(self.OPC_VALUE, self.OP2_VALUE)
        self.set(self.OP3, self.OP3_VALUE)
        self.set(self.RN, rn.index)
        self.set(self.OP4, self.OP4_VALUE)


class BranchRegister(_RegisterBranchForm):
    """BR: branch to the address in ``rn``."""

    OPC_VALUE = 0b0000


class Ret(_RegisterBranchForm):
    """RET: return to the address in ``rn``, the link register by default."""

    OPC_VALUE = 0b0010

    def __init__(self, rn: Register = LR) -> None:
        super().__init__(rn)