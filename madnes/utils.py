"""Instruction formatting and small byte helpers."""

from __future__ import annotations

from .types import AddrMode, Instruction

_FORMATS: dict[AddrMode, str] = {
    AddrMode.IMPL: "{name}",
    AddrMode.ACCUM: "{name} A",
    AddrMode.IMM: "{name} #${imm:02x}",
    AddrMode.ZP: "{name} ${addr:02x}",
    AddrMode.ZPX: "{name} ${addr:02x},X",
    AddrMode.ZPY: "{name} ${addr:02x},Y",
    AddrMode.REL: "{name} *+{offset:02x}",
    AddrMode.ABS: "{name} ${addr:04x}",
    AddrMode.ABSX: "{name} ${addr:04x},X",
    AddrMode.ABSY: "{name} ${addr:04x},Y",
    AddrMode.IND: "{name} (${addr:04x})",
    AddrMode.INDX: "{name} (${addr:02x},X)",
    AddrMode.INDY: "{name} (${addr:02x}),Y",
}


def format_instruction(instr: Instruction) -> str:
    """Return the instruction as it would be written in 6502 assembly.

    A negative relative offset is shown as a 32-bit two's complement value.
    """
    template = _FORMATS[AddrMode(instr.addr_mode)]
    return template.format(
        name=instr.name,
        imm=instr.imm & 0xFF,
        addr=instr.addr & 0xFFFF,
        offset=instr.offset & 0xFFFFFFFF,
    )


def print_instruction(instr: Instruction) -> None:
    """Print the instruction in 6502 assembly syntax."""
    print(format_instruction(instr))


def concatenate_bytes(ms_byte: int, ls_byte: int) -> int:
    """Join a most significant and a least significant byte into a 16-bit word."""
    return ((ms_byte << 8) | ls_byte) & 0xFFFF