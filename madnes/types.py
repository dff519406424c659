"""Core data types shared across the emulator: CPU state, decoded instructions, PPU state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

# Size of the emulated CPU address space (64 KiB).
MEMORY_SPACE = 0x10000


class AddrMode(IntEnum):
    """All addressing modes of the 6502 instruction set."""

    IMPL = 0
    ACCUM = auto()
    IMM = auto()
    ZP = auto()
    ZPX = auto()
    ZPY = auto()
    REL = auto()
    ABS = auto()
    ABSX = auto()
    ABSY = auto()
    IND = auto()
    INDX = auto()
    INDY = auto()


@dataclass
class Processor:
    """Register file of a 6502 processor.

    ``p`` holds the status flags laid out as NV1BDIZC.
    """

    pc: int = 0x0600
    s: int = 0xFF
    p: int = 0x30
    a: int = 0x00
    x: int = 0x00
    y: int = 0x00
    halted: bool = False


@dataclass
class Instruction:
    """A decoded instruction together with its operand and timing metadata."""

    opcode: int
    addr_mode: AddrMode
    name: str
    imm: int = 0
    addr: int = 0
    offset: int = 0
    length: int = 1
    cycles: int = 2


@dataclass
class PPU:
    """State of the picture processing unit."""

    # CPU-visible registers
    ctrl: int = 0
    mask: int = 0
    status: int = 0

    # Object attribute memory: 64 sprites, 4 bytes each
    oam: bytearray = field(default_factory=lambda: bytearray(256))
    oam_addr: int = 0

    data_buffer: int = 0

    # Internal memory
    vram: bytearray = field(default_factory=lambda: bytearray(2048))
    palette: bytearray = field(default_factory=lambda: bytearray(32))

    # VRAM addressing
    v: int = 0
    t: int = 0
    x: int = 0
    w: bool = False

    # Timing
    scanline: int = 0
    cycle: int = 0

    # NMI
    nmi_occurred: bool = False
    nmi_output: bool = False