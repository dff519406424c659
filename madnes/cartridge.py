"""iNES cartridge images: parsing, validation and metadata display."""

from __future__ import annotations

import io
from dataclasses import dataclass
from os import PathLike

MAGIC = b"NES\x1a"
PRG_ROM_UNIT = 16 * 1024
CHR_ROM_UNIT = 8 * 1024
TRAINER_SIZE = 512

_CONSOLE_TYPES = (
    "NES/Famicom",
    "Nintendo Vs. System",
    "Nintendo Playchoice 10",
    "Extended",
)

# Single-byte header fields in file order, with the label and code used on failure.
_HEADER_FIELDS = (
    ("prg_rom_size", "PRG-ROM size", -3),
    ("chr_rom_size", "CHR-ROM size", -4),
    ("flags6", "Flags 6", -5),
    ("flags7", "Flags 7", -6),
    ("flags8", "Flags 8", -7),
    ("flags9", "Flags 9", -8),
    ("flags10", "Flags 10", -8),
)


class CartridgeError(Exception):
    """Raised when a ROM image cannot be opened or fails validation.

    ``code`` identifies the step that failed.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class Cartridge:
    """Header fields and data sections of an iNES ROM image."""

    prg_rom_size: int = 0  # 16 KB units
    chr_rom_size: int = 0  # 8 KB units
    flags6: int = 0
    flags7: int = 0
    flags8: int = 0
    flags9: int = 0
    flags10: int = 0
    magic_num: bytes = MAGIC
    reserved: bytes = bytes(5)
    trainer: bytes | None = None
    prg_rom: bytes = b""
    chr_rom: bytes = b""

    def mapper(self) -> int:
        """Mapper number assembled from flags 6, 7 and 8."""
        return (
            ((self.flags8 & 0x0F) << 8)
            | ((self.flags7 & 0xF0) << 4)
            | (self.flags6 & 0xF0)
        )

    def submapper(self) -> int:
        """Submapper bits taken from flags 8."""
        return self.flags8 & 0xF0

    def console_type(self) -> str:
        """Name of the console type selected by flags 7."""
        return _CONSOLE_TYPES[self.flags7 & 0x03]

    def mirroring(self) -> str:
        """Nametable mirroring arrangement."""
        return "Vertical" if self.flags6 & 0x01 else "Horizontal"


def _take(reader: io.BytesIO, size: int, message: str, code: int) -> bytes:
    chunk = reader.read(size)
    if len(chunk) != size:
        raise CartridgeError(message, code)
    return chunk


def parse_rom(data: bytes) -> Cartridge:
    """Parse and validate the bytes of an iNES ROM image."""
    reader = io.BytesIO(data)

    magic = reader.read(4)
    if magic != MAGIC:
        raise CartridgeError("Failed to validate magic number", -2)

    header: dict[str, int] = {}
    for name, label, code in _HEADER_FIELDS:
        header[name] = _take(reader, 1, f"Failed to properly read {label}", code)[0]

    reserved = reader.read(5)
    if len(reserved) != 5 or any(reserved):
        raise CartridgeError("Failed to properly read reserved bits", -9)

    trainer = None
    if header["flags6"] & 0x04:
        trainer = _take(reader, TRAINER_SIZE, "Failed to properly read trainer", -10)

    prg_rom = _take(
        reader,
        header["prg_rom_size"] * PRG_ROM_UNIT,
        "Failed to properly read PRG-ROM",
        -11,
    )
    chr_rom = _take(
        reader,
        header["chr_rom_size"] * CHR_ROM_UNIT,
        "Failed to properly read CHR-ROM",
        -12,
    )

    return Cartridge(
        magic_num=magic,
        reserved=reserved,
        trainer=trainer,
        prg_rom=prg_rom,
        chr_rom=chr_rom,
        **header,
    )


def load_rom(rom_path: str | PathLike[str]) -> Cartridge:
    """Read and parse the ROM image stored at ``rom_path``."""
    try:
        with open(rom_path, "rb") as rom_file:
            data = rom_file.read()
    except OSError as exc:
        raise CartridgeError("Failed to open rom file", -1) from exc
    return parse_rom(data)


def format_cart_metadata(cart: Cartridge) -> str:
    """Render the cartridge metadata as a text block."""
    lines = [
        "--------------- ROM Data ---------------",
        f"       PRG-ROM Size: {cart.prg_rom_size * 16} KB",
        f"       CHR-ROM Size: {cart.chr_rom_size * 8} KB",
        f"             Mapper: {cart.mapper()}",
        f"          Submapper: {cart.submapper()}",
        f"          Mirroring: {cart.mirroring()}",
        f"            Battery: {'Present' if cart.flags6 & 0x02 else 'Not Present'}",
        f"            Trainer: {'Present' if cart.trainer is not None else 'Not Present'}",
        f"     Alt Nametables: {'Yes' if cart.flags6 & 0x08 else 'No'}",
        f"       Console Type: {cart.console_type()}",
        "----------------------------------------",
    ]
    return "\n".join(lines)


def print_cart_metadata(cart: Cartridge) -> None:
    """Print the cartridge metadata block."""
    print(format_cart_metadata(cart))