# mallow

A small library for runtime patching work, with no dependencies outside the
standard library:

- **AArch64 instruction encoders**: build 32-bit instruction words for
  add/subtract and compare immediates, wide moves, ADR/ADRP, NOP, branches,
  ORR/MOV with registers and loads/stores, from typed register operands.
- **Delegates**: bound-method, plain-function and lambda delegates, plus
  `AnyDelegate`, which holds a copy of any of them and falls back to a dummy
  that does nothing when empty.
- **Configuration**: a JSON document on disk (`//` and `/* */` comments
  allowed) with an alternative emulator path, a built-in default document and
  a settings object filled from it.
- **Logging**: a chain of log sinks (debug stream, TCP connection, file) with
  printf-style formatting and hex dumps of buffers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Encoding instructions

Registers come from `mallow.registers`: `w(n)` and `x(n)` for `n` in 0..30,
plus `LR`, `SP`, `NONE32` and `NONE64` (index 31, the zero register in
operand positions).

```python
from mallow.registers import x
from mallow.data_processing import AddImmediate, Adrp
from mallow.branches import BranchRegister, Ret, Nop

AddImmediate(x(0), x(1), 12).value        # 0x91003020
Adrp(x(2), 0x6969000).value               # 0xB0034B42
BranchRegister(x(2)).value                # 0xD61F0040
Ret().value                               # 0xD65F03C0
Nop().to_bytes()                          # b"\x1f\x20\x03\xd5"
```

The encoders are spread over these modules:

- `mallow.data_processing`: `AddImmediate`, `AddsImmediate`, `SubImmediate`,
  `SubsImmediate`, `CmnImmediate`, `CmpImmediate`, `Movz`, `Movn`, `Movk`,
  `Adr`, `Adrp`, and the field layout `LogicalImmediate`. An add/subtract
  immediate that is a non-zero multiple of 0x1000 is encoded shifted
  (`AddSubtractImmediate.calc_sh`, `calc_imm`).
- `mallow.branches`: `Nop`, `Branch`, `BranchLink` (byte offsets),
  `BranchRegister`, `Ret` (the link register by default).
- `mallow.logical`: `OrrShiftedRegister` (with a `ShiftType` and amount) and
  `MovRegister`.
- `mallow.literal`: `LdrLiteral` (byte offset, negative values allowed).
- `mallow.load_store`: `LdrRegisterOffset`, `StrRegisterOffset` (with an
  `ExtendType` and shift amount), `LdurUnscaledImmediate`,
  `SturUnscaledImmediate` (signed 9-bit byte offset),
  `LdrRegisterImmediate`, `StrRegisterImmediate` (unsigned 12-bit offset).

Every encoder is an `mallow.instruction.Instruction`: `.value` is the word,
`int()` gives the same, `to_bytes()` gives it little-endian, and single bit
fields are read and written with `get` and `set` using `Field` objects.
Values too wide for a field are truncated.

`mallow.results` has `align_up`, `align_down` (power-of-two alignments only,
`ValueError` otherwise), `make_result` and the `ResultCode` enum.

## Delegates

```python
from mallow.delegates import AnyDelegate, Delegate, make_lambda_delegate

handler = AnyDelegate()
bool(handler)          # False: an empty delegate; calling it returns None
handler.assign(make_lambda_delegate(lambda a, b: a + b))
handler(2, 3)          # 5

class Counter:
    def __init__(self):
        self.total = 0
    def add(self, n):
        self.total += n
        return self.total

bound = Delegate(Counter(), Counter.add)
bound(4)               # 4
```

`Delegate` and `FunctionDelegate` return their `default` while unbound;
`AnyDelegate(default=...)` does the same while empty.

## Configuration

```python
from mallow.config import ConfigError, ConfigStore, ModOptions

store = ConfigStore("mallow.json", settings=ModOptions())
try:
    store.load(True)
except ConfigError:
    store.use_default()
    store.save()
store.read_to_struct()
store.settings.logger_port   # 3080 unless the document says otherwise
```

`load` creates an empty file when none exists and raises `ConfigError` when
the file cannot be read or parsed; after one failure it returns `False`
without trying again unless `retry` is true. `save` writes the document as
indented JSON. With `emulator_marker` set, the store treats the marker path
not being a regular file as running on an emulator and then uses `emu_path`.

`ConfigBase` reads `logger.enable`, `logger.reconnect`, `logger.ip` and
`logger.port`; `ModOptions` adds `myModOption`. Missing or mistyped values
get their defaults.

## Logging

```python
from mallow import logger
from mallow.sinks import FileSink

logger.add_log_sink(FileSink("mallow.log"))
logger.log_line("loaded %d entries", 3)
logger.log_buffer_hex(b"\x00\x01\x02")     # "00 01 02"
```

`FileSink` replaces any file already at its path. `DebugPrintSink` writes to
a given stream or to standard error. `NetworkSink` sends to a TCP server;
while disconnected it sends nothing, and with `try_reconnect` it tries again
at most once every four seconds.

`mallow.bootstrap.initialize(store)` loads the configuration (falling back to
the default and writing it out), fills the settings and attaches the file,
network and debug sinks the settings ask for; `setup_logging` does only the
last step.

## What it does not do

The package only produces instruction words and bytes; it does not write
them into a running process, install hooks or handle processor exceptions.
It has no command-line program.