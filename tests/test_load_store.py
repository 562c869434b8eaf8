import pytest

from mallow.instruction import ExtendType
from mallow.load_store import (
    LdrRegisterImmediate,
    LdrRegisterOffset,
    LdurUnscaledImmediate,
    LoadStoreRegisterOffset,
    StrRegisterImmediate,
    StrRegisterOffset,
    SturUnscaledImmediate,
)
from mallow.registers import LR, SP, w, x


@pytest.mark.parametrize(
    "args, kwargs, expected",
    [
        ((x(0), x(1), x(2)), {}, 0xF8626820),
        ((x(3), x(4), x(5)), {}, 0xF8656883),
        ((x(6), x(7), x(8)), {}, 0xF86868E6),
        ((x(0), x(1), w(2), ExtendType.UXTW, 3), {}, 0xF8625820),
        ((x(3), x(4), w(5), ExtendType.UXTW, 3), {}, 0xF8655883),
        ((x(6), x(7), w(8), ExtendType.UXTW, 3), {}, 0xF86858E6),
        ((x(0), x(1), x(2), ExtendType.SXTX, 3), {}, 0xF862F820),
        ((x(3), x(4), x(5), ExtendType.SXTX, 3), {}, 0xF865F883),
        ((x(6), x(7), x(8)), {"extend": ExtendType.SXTX, "amount": 3}, 0xF868F8E6),
    ],
)
def test_ldr_register_offset(args, kwargs, expected):
    assert LdrRegisterOffset(*args, **kwargs).value == expected


@pytest.mark.parametrize(
    "args, expected",
    [
        ((x(0), x(1), x(2)), 0xF8226820),
        ((x(3), x(4), x(5)), 0xF8256883),
        ((x(6), x(7), x(8)), 0xF82868E6),
        ((x(0), x(1), w(2), ExtendType.UXTW, 3), 0xF8225820),
        ((x(3), x(4), w(5), ExtendType.UXTW, 3), 0xF8255883),
        ((x(6), x(7), w(8), ExtendType.UXTW, 3), 0xF82858E6),
        ((x(0), x(1), x(2), ExtendType.SXTX, 3), 0xF822F820),
        ((x(3), x(4), x(5), ExtendType.SXTX, 3), 0xF825F883),
        ((x(6), x(7), x(8), ExtendType.SXTX, 3), 0xF828F8E6),
    ],
)
def test_str_register_offset(args, expected):
    assert StrRegisterOffset(*args).value == expected


@pytest.mark.parametrize(
    "extend, option",
    [
        (ExtendType.UXTW, 0b010),
        (ExtendType.LSL, 0b011),
        (ExtendType.UXTX, 0b011),
        (ExtendType.SXTW, 0b110),
        (ExtendType.SXTX, 0b111),
        (ExtendType.UXTB, 0b000),
        (ExtendType.SXTH, 0b000),
    ],
)
def test_create_option(extend, option):
    assert LoadStoreRegisterOffset.create_option(extend) == option


@pytest.mark.parametrize(
    "rt, amount, scaled",
    [
        (x(0), 0, False),
        (x(0), 3, True),
        (x(0), 2, False),
        (w(0), 2, True),
        (w(0), 3, False),
        (w(0), 0, False),
    ],
)
def test_create_s(rt, amount, scaled):
    assert LoadStoreRegisterOffset.create_s(rt, amount) is scaled


def test_register_offset_fields_for_w_register():
    inst = LdrRegisterOffset(w(9), x(10), x(11), ExtendType.LSL, 2)
    assert inst.get(inst.SIZE) == 0b10
    assert inst.get(inst.S) == 1
    assert inst.get(inst.RT) == 9
    assert inst.get(inst.RN) == 10
    assert inst.get(inst.RM) == 11


def test_ldr_and_str_offset_differ_only_in_opc():
    ldr = LdrRegisterOffset(x(3), x(4), x(5))
    st = StrRegisterOffset(x(3), x(4), x(5))
    assert ldr.get(ldr.OPC) == 1
    assert st.get(st.OPC) == 0
    assert ldr.value & ~ldr.OPC.mask() == st.value & ~st.OPC.mask()


@pytest.mark.parametrize(
    "rt, rn, imm, expected",
    [
        (x(0), x(1), -1, 0xF85FF020),
        (x(2), x(3), 1, 0xF8401062),
        (x(4), x(5), -2, 0xF85FE0A4),
        (x(6), x(7), 2, 0xF84020E6),
        (x(8), x(9), -3, 0xF85FD128),
        (x(10), x(11), -4, 0xF85FC16A),
        (x(12), x(13), 2, 0xF84021AC),
        (x(14), x(15), -4, 0xF85FC1EE),
        (w(16), x(17), 20, 0xB8414230),
        (w(18), x(19), -52, 0xB85CC272),
        (w(20), x(21), 41, 0xB84292B4),
        (w(22), x(23), -75, 0xB85B52F6),
        (w(24), x(25), 95, 0xB845F338),
        (w(26), x(27), -69, 0xB85BB37A),
        (w(28), x(29), -1, 0xB85FF3BC),
        (x(30), SP, -5, 0xF85FB3FE),
        (LR, SP, -5, 0xF85FB3FE),
    ],
)
def test_ldur_unscaled_immediate(rt, rn, imm, expected):
    assert LdurUnscaledImmediate(rt, rn, imm).value == expected


@pytest.mark.parametrize(
    "rt, rn, imm, expected",
    [
        (x(0), x(1), -1, 0xF81FF020),
        (x(2), x(3), 1, 0xF8001062),
        (x(4), x(5), -2, 0xF81FE0A4),
        (x(6), x(7), 2, 0xF80020E6),
        (x(8), x(9), -3, 0xF81FD128),
        (x(10), x(11), -4, 0xF81FC16A),
        (x(12), x(13), 2, 0xF80021AC),
        (x(14), x(15), -4, 0xF81FC1EE),
        (w(16), x(17), 20, 0xB8014230),
        (w(18), x(19), -52, 0xB81CC272),
        (w(20), x(21), 41, 0xB80292B4),
        (w(22), x(23), -75, 0xB81B52F6),
        (w(24), x(25), 95, 0xB805F338),
        (w(26), x(27), -69, 0xB81BB37A),
        (w(28), x(29), -1, 0xB81FF3BC),
        (x(30), SP, -5, 0xF81FB3FE),
        (LR, SP, -5, 0xF81FB3FE),
    ],
)
def test_stur_unscaled_immediate(rt, rn, imm, expected):
    assert SturUnscaledImmediate(rt, rn, imm).value == expected


def test_unscaled_default_offset_is_zero():
    inst = LdurUnscaledImmediate(x(2), x(3))
    assert inst.get(inst.IMM9) == 0
    assert inst.get(inst.RT) == 2
    assert inst.get(inst.RN) == 3


@pytest.mark.parametrize(
    "args, expected",
    [
        ((x(0), x(1)), 0xF9400020),
        ((x(2), x(3)), 0xF9400062),
        ((x(4), x(5)), 0xF94000A4),
        ((x(6), x(7)), 0xF94000E6),
        ((x(8), x(9)), 0xF9400128),
        ((x(10), x(11), 1), 0xF940056A),
        ((x(12), x(13), 2), 0xF94009AC),
        ((x(14), x(15), 4), 0xF94011EE),
        ((w(16), x(17), 20), 0xB9405230),
        ((w(18), x(19), 52), 0xB940D272),
        ((w(20), x(21), 41), 0xB940A6B4),
        ((w(22), x(23), 75), 0xB9412EF6),
        ((w(24), x(25), 95), 0xB9417F38),
        ((w(26), x(27), 69), 0xB941177A),
        ((w(28), x(29)), 0xB94003BC),
        ((x(30), SP), 0xF94003FE),
        ((LR, SP), 0xF94003FE),
    ],
)
def test_ldr_register_immediate(args, expected):
    assert LdrRegisterImmediate(*args).value == expected


@pytest.mark.parametrize(
    "args, expected",
    [
        ((x(0), x(1)), 0xF9000020),
        ((x(2), x(3)), 0xF9000062),
        ((x(4), x(5)), 0xF90000A4),
        ((x(6), x(7)), 0xF90000E6),
        ((x(8), x(9)), 0xF9000128),
        ((x(10), x(11), 1), 0xF900056A),
        ((x(12), x(13), 2), 0xF90009AC),
        ((x(14), x(15), 4), 0xF90011EE),
        ((w(16), x(17), 20), 0xB9005230),
        ((w(18), x(19), 52), 0xB900D272),
        ((w(20), x(21), 41), 0xB900A6B4),
        ((w(22), x(23), 75), 0xB9012EF6),
        ((w(24), x(25), 95), 0xB9017F38),
        ((w(26), x(27), 69), 0xB901177A),
        ((w(28), x(29)), 0xB90003BC),
        ((x(30), SP), 0xF90003FE),
        ((LR, SP), 0xF90003FE),
    ],
)
def test_str_register_immediate(args, expected):
    assert StrRegisterImmediate(*args).value == expected


def test_unsigned_immediate_field_round_trip():
    inst = StrRegisterImmediate(w(24), x(25), 95)
    assert inst.get(inst.IMM12) == 95
    assert inst.get(inst.SIZE) == 0b10
    assert inst.get(inst.OPC) == 0


def test_to_bytes_is_little_endian():
    inst = LdrRegisterImmediate(x(0), x(1))
    assert inst.to_bytes() == bytes([0x20, 0x00, 0x40, 0xF9])
    assert int.from_bytes(inst.to_bytes(), "little") == inst.value