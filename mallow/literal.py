"""PC-relative literal loads."""

from __future__ import annotations

from .instruction import Field, Opx1x0Instruction
from .registers import Register

_U32_MASK = 0xFFFFFFFF


class LoadRegisterLiteral(Opx1x0Instruction):
    """LDR (literal) family with a signed 19-bit word offset."""

    OP0_VALUE = 0b0001
    OP2_VALUE = 0b00

    OPC = Field(30, 31)
    V = Field(26)
    IMM19 = Field(5, 24)
    RT = Field(0, 5)

    def __init__(self, rt: Register, imm19: int, v: int, opc: int) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.OP0, self.OP0_VALUE)
        self.set(self.OP2, self.OP2_VALUE)
        self.set(self.OPC, opc)
        self.set(self.V, v)
        # Negative offsets are stored in two's complement within the field.
        self.set(self.IMM19, imm19 & ((1 << self.IMM19.width()) - 1))
        self.set(self.RT, rt.index)


class LdrLiteral(LoadRegisterLiteral):
    """LDR rt, <label>; ``relative_distance`` is a byte offset from this instruction."""

    V_VALUE = 0b0

    def __init__(self, rt: Register, relative_distance: int) -> None:
        super().__init__(
            rt, (relative_distance & _U32_MASK) // 4, self.V_VALUE, self.get_opc(rt)
        )

    @staticmethod
    def get_opc(rt: Register) -> int:
        return 0b00 | int(rt.is64())