"""Result codes, alignment helpers and runtime sizing constants."""

from __future__ import annotations

from enum import IntEnum

MODULE_NAME = "exlaunch"

PAGE_SIZE = 0x1000

HEAP_SIZE = 0x5000
"""Size of the fake .bss heap."""

JIT_SIZE = 0x5000
"""Size of the JIT area used for hooks."""

INLINE_POOL_SIZE = 0x5000
"""Size of the inline hook pool."""

EXL_MODULE = 252
SUCCESS_VALUE = 0

_MODULE_BITS = 9
_MODULE_MASK = (1 << _MODULE_BITS) - 1
_DESCRIPTION_MASK = (1 << 13) - 1


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")


def align_up(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment``."""
    _check_alignment(alignment)
    return (value + alignment - 1) & ~(alignment - 1)


def align_down(value: int, alignment: int) -> int:
    """Round ``value`` down to a multiple of ``alignment``."""
    _check_alignment(alignment)
    return value & ~(alignment - 1)


def make_result(module: int, description: int) -> int:
    """Pack a module number and a description into a result value."""
    return (module & _MODULE_MASK) | ((description & _DESCRIPTION_MASK) << _MODULE_BITS)


class ResultCode(IntEnum):
    """Results reported by the hooking runtime."""

    SUCCESS = make_result(0, SUCCESS_VALUE)
    HOOK_FAILED = make_result(EXL_MODULE, 1)
    HOOK_TRAMPOLINE_ALLOC_FAIL = make_result(EXL_MODULE, 2)
    HOOK_FIXING_TOO_MANY_INSTRUCTIONS = make_result(EXL_MODULE, 3)
    FAILED_TO_FIND_TARGET = make_result(EXL_MODULE, 4)
    TOO_MANY_STATIC_MODULES = make_result(EXL_MODULE, 5)

    @property
    def module(self) -> int:
        return self.value & _MODULE_MASK

    @property
    def description(self) -> int:
        return (self.value >> _MODULE_BITS) & _DESCRIPTION_MASK

    @property
    def is_success(self) -> bool:
        return self.value == SUCCESS_VALUE