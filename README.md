# madnes

Building blocks for a Nintendo Entertainment System emulator, written in plain
Python with no dependencies outside the standard library.

It provides:

- **Cartridges** (`madnes.cartridge`): reading and validating iNES ROM images.
  This covers the 16-byte header, the optional 512-byte trainer, PRG-ROM and
  CHR-ROM. It also gives a readable summary of the header: sizes, mapper,
  submapper, mirroring, battery, trainer, alternative nametables and console
  type.
- **Instruction formatting** (`madnes.utils`): rendering a decoded 6502
  `Instruction` in assembly syntax for every addressing mode, and
  `concatenate_bytes` for joining a high and a low byte into a 16-bit word.
- **Logging** (`madnes.logger`): timestamped log lines for emulator components
  and per-instruction CPU trace lines.
- **Core types** (`madnes.types`):
  - `Processor`, the register file, which starts with PC `$0600`, SP `$FF` and P `$30`.
  - `Instruction`, a decoded instruction.
  - `AddrMode`, the 6502 addressing modes.
  - `PPU`, the picture-unit state.
  - `MEMORY_SPACE`, the 64 KiB address-space size.

## Loading a ROM

```python
from madnes.cartridge import CartridgeError, load_rom, print_cart_metadata

try:
    cart = load_rom("game.nes")
except CartridgeError as err:
    print(f"could not load ROM: {err} (code {err.code})")
else:
    print_cart_metadata(cart)
    print(cart.mapper(), cart.mirroring(), cart.console_type())
```

`load_rom` raises `CartridgeError` in these cases:

- the file cannot be opened;
- the magic number is not `NES\x1A`;
- a header byte is missing;
- the five reserved header bytes are not all zero;
- the trainer, PRG-ROM or CHR-ROM data is shorter than the header announces.

The error's `code` attribute tells which step failed.

`parse_rom` does the same work on bytes that are already in memory.
`format_cart_metadata` returns the summary as a string instead of printing it.

## Formatting instructions and logging

```python
from datetime import datetime

from madnes.logger import format_instr_log, print_log
from madnes.types import AddrMode, Instruction, Processor
from madnes.utils import concatenate_bytes, format_instruction

instr = Instruction(opcode=0xAD, addr_mode=AddrMode.ABS, name="LDA", addr=0x1020, length=3, cycles=4)
format_instruction(instr)          # "LDA $1020"
concatenate_bytes(0x12, 0x34)      # 0x1234

print_log("CART", "Loading ROM...", "INFO")
format_instr_log(instr, Processor(), datetime.now())
# "<ctime> DEBUG [CPU]: $0600: LDA $1020"
```

For relative branches, `format_instruction` writes a negative offset as a 32-bit
two's-complement hex value. The trace line from `format_instr_log` writes it as
a single unsigned byte.

## What the package does not do

The package holds no CPU core. It does not decode opcodes from memory into
`Instruction` values, and it does not execute instructions. It has no memory
map, no PPU rendering and no command-line program. It cannot run or
disassemble a program or a ROM by itself. It supplies the types, cartridge
handling, formatting and logging that such a front end would build on.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e .[test]
pytest
```