"""Loads and stores with register, unscaled and unsigned immediate offsets."""

from __future__ import annotations

from .instruction import ExtendType, Field, Opx1x0Instruction
from .registers import Register


def _size_for(rt: Register) -> int:
    """Access size field: 0b10 for a 32-bit register, 0b11 for a 64-bit one."""
    return 0b10 | int(rt.is64())


class LoadStoreRegisterOffset(Opx1x0Instruction):
    """LDR/STR with an offset held in a register, optionally extended and scaled."""

    OP0_VALUE = 0b0011
    OP1_VALUE = 0
    OP2_VALUE = 0b00
    OP3_VALUE = 0b100000
    OP4_VALUE = 0b10

    SIZE = Field(30, 32)
    V = Field(26)
    OPC = Field(22, 24)
    RM = Field(16, 21)
    OPTION = Field(13, 16)
    S = Field(12)
    RN = Field(5, 10)
    RT = Field(0, 5)

    _OPTIONS = {
        ExtendType.UXTW: 0b010,
        ExtendType.LSL: 0b011,
        ExtendType.SXTW: 0b110,
        ExtendType.SXTX: 0b111,
    }

    def __init__(self, size: int, v: int, opc: int) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.SIZE, size)
        self.set(self.OPC, opc)
        self.set(self.OP1, self.OP1_VALUE)
        self.set(self.OP2, self.OP2_VALUE)
        self.set(self.OP3, self.OP3_VALUE)
        self.set(self.OP4, self.OP4_VALUE)
        self.set(self.V, v)

    @staticmethod
    def create_option(extend: ExtendType) -> int:
        """The option field for an extend type; unsupported extends give 0."""
        return LoadStoreRegisterOffset._OPTIONS.get(ExtendType(extend), 0b000)

    @staticmethod
    def create_s(rt: Register, amount: int) -> bool:
        """Whether the offset is scaled by the access size."""
        if amount == 0:
            return False
        if rt.is64() and amount == 3:
            return True
        if rt.is32() and amount == 2:
            return True
        return False


class _RegisterOffsetForm(LoadStoreRegisterOffset):
    V_VALUE = 0b0
    OPC_VALUE = 0b00

    def __init__(
        self,
        rt: Register,
        rn: Register,
        rm: Register,
        extend: ExtendType = ExtendType.LSL,
        amount: int = 0,
    ) -> None:
        super().__init__(_size_for(rt), self.V_VALUE, self.OPC_VALUE)
        self.set(self.SIZE, _size_for(rt))
        self.set(self.RM, rm.index)
        self.set(self.OPTION, self.create_option(extend))
        self.set(self.S, self.create_s(rt, amount))
        self.set(self.RT, rt.index)
        self.set(self.RN, rn.index)

    @staticmethod
    def get_size(rt: Register) -> int:
        return _size_for(rt)


class LdrRegisterOffset(_RegisterOffsetForm):
    """LDR rt, [rn, rm{, extend #amount}]."""

    OPC_VALUE = 0b01


class StrRegisterOffset(_RegisterOffsetForm):
    """STR rt, [rn, rm{, extend #amount}]."""

    OPC_VALUE = 0b00


class LoadStoreRegisterUnscaledImmediate(Opx1x0Instruction):
    """LDUR/STUR with a signed 9-bit byte offset."""

    OP0_VALUE = 0b0011
    OP2_VALUE = 0b00
    OP3_VALUE = 0b000000
    OP4_VALUE = 0b00

    SIZE = Field(30, 32)
    V = Field(26)
    OPC = Field(22, 24)
    IMM9 = Field(12, 21)
    RN = Field(5, 10)
    RT = Field(0, 5)

    def __init__(
        self, size: int, v: int, opc: int, imm9: int, rn: Register, rt: Register
    ) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.OP2, self.OP2_VALUE)
        self.set(self.OP3, self.OP3_VALUE)
        self.set(self.OP4, self.OP4_VALUE)
        self.set(self.SIZE, size)
        self.set(self.V, v)
        self.set(self.OPC, opc)
        # Negative offsets are stored in two's complement within the field.
        self.set(self.IMM9, imm9 & ((1 << self.IMM9.width()) - 1))
        self.set(self.RN, rn.index)
        self.set(self.RT, rt.index)


class _UnscaledForm(LoadStoreRegisterUnscaledImmediate):
    V_VALUE = 0b0
    OPC_VALUE = 0b00

    def __init__(self, rt: Register, rn: Register, imm9: int = 0) -> None:
        super().__init__(_size_for(rt), self.V_VALUE, self.OPC_VALUE, imm9, rn, rt)

    @staticmethod
    def get_size(rt: Register) -> int:
        return _size_for(rt)


class LdurUnscaledImmediate(_UnscaledForm):
    """LDUR rt, [rn, #imm9]."""

    OPC_VALUE = 0b01


class SturUnscaledImmediate(_UnscaledForm):
    """STUR rt, [rn, #imm9]."""

    OPC_VALUE = 0b00


class LoadStoreRegisterUnsignedImmediate(Opx1x0Instruction):
    """LDR/STR with an unsigned 12-bit offset, in units of the access size."""

    OP0_VALUE = 0b0011
    OP2_VALUE = 0b10

    SIZE = Field(30, 32)
    V = Field(26)
    OPC = Field(22, 24)
    IMM12 = Field(10, 22)
    RN = Field(5, 10)
    RT = Field(0, 5)

    def __init__(
        self, size: int, v: int, opc: int, imm12: int, rn: Register, rt: Register
    ) -> None:
        super().__init__(self.OP0_VALUE)
        self.set(self.OP2, self.OP2_VALUE)
        self.set(self.SIZE, size)
        self.set(self.V, v)
        self.set(self.OPC, opc)
        self.set(self.IMM12, imm12 & 0xFFFF)
        self.set(self.RN, rn.index)
        self.set(self.RT, rt.index)


class _UnsignedForm(LoadStoreRegisterUnsignedImmediate):
    V_VALUE = 0b0
    OPC_VALUE = 0b00

    def __init__(self, rt: Register, rn: Register, imm12: int = 0) -> None:
        super().__init__(_size_for(rt), self.V_VALUE, self.OPC_VALUE, imm12, rn, rt)

    @staticmethod
    def get_size(rt: Register) -> int:
        return _size_for(rt)


class LdrRegisterImmediate(_UnsignedForm):
    """LDR rt, [rn, #imm12]."""

    OPC_VALUE = 0b01


class StrRegisterImmediate(_UnsignedForm):
    """STR rt, [rn, #imm12]."""

    OPC_VALUE = 0b00