import pytest

from mallow.instruction import ShiftType
from mallow.logical import LogicalShiftedRegister, MovRegister, OrrShiftedRegister
from mallow.registers import w, x

_TRIPLES = [(0, 1, 2), (3, 4, 5), (6, 7, 8), (9, 10, 11)]


@pytest.mark.parametrize(
    "regs, expected",
    zip(_TRIPLES, [0xAA020020, 0xAA050083, 0xAA0800E6, 0xAA0B0149]),
)
def test_orr_plain(regs, expected):
    rd, rn, rm = regs
    assert OrrShiftedRegister(x(rd), x(rn), x(rm)).value == expected


@pytest.mark.parametrize(
    "regs, expected",
    zip(_TRIPLES, [0xAA422020, 0xAA452083, 0xAA4820E6, 0xAA4B2149]),
)
def test_orr_lsr(regs, expected):
    rd, rn, rm = regs
    assert OrrShiftedRegister(x(rd), x(rn), x(rm), ShiftType.LSR, 8).value == expected


@pytest.mark.parametrize(
    "regs, expected",
    zip(_TRIPLES, [0xAA822020, 0xAA852083, 0xAA8820E6, 0xAA8B2149]),
)
def test_orr_asr(regs, expected):
    rd, rn, rm = regs
    assert OrrShiftedRegister(x(rd), x(rn), x(rm), ShiftType.ASR, 8).value == expected


@pytest.mark.parametrize(
    "regs, expected",
    zip(_TRIPLES, [0xAAC22020, 0xAAC52083, 0xAAC820E6, 0xAACB2149]),
)
def test_orr_ror(regs, expected):
    rd, rn, rm = regs
    assert OrrShiftedRegister(x(rd), x(rn), x(rm), ShiftType.ROR, 8).value == expected


@pytest.mark.parametrize(
    "rd, rm, expected",
    [(0, 1, 0xAA0103E0), (2, 3, 0xAA0303E2), (4, 5, 0xAA0503E4), (6, 7, 0xAA0703E6)],
)
def test_mov_register(rd, rm, expected):
    assert MovRegister(x(rd), x(rm)).value == expected


def test_orr_fields_round_trip():
    orr = OrrShiftedRegister(x(12), x(13), x(14), ShiftType.ASR, 17)
    assert orr.get(OrrShiftedRegister.RD) == 12
    assert orr.get(OrrShiftedRegister.RN) == 13
    assert orr.get(OrrShiftedRegister.RM) == 14
    assert orr.get(OrrShiftedRegister.SHIFT) == ShiftType.ASR
    assert orr.get(OrrShiftedRegister.IMM6) == 17
    assert orr.get(LogicalShiftedRegister.N) == 0


def test_mov_32bit_clears_sf_and_uses_zero_register():
    mov = MovRegister(w(3), w(4))
    assert mov.get(LogicalShiftedRegister.SF) == 0
    assert mov.get(OrrShiftedRegister.RN) == 31
    assert mov.value | LogicalShiftedRegister.SF.mask() == MovRegister(x(3), x(4)).value


def test_mov_is_orr_with_zero_register():
    assert MovRegister(x(5), x(9)) == OrrShiftedRegister(x(5), MovRegister.get_rn(x(5), x(9)), x(9))