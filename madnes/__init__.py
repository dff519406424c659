"""NES emulator building blocks: cartridges, core types, instruction formatting and logging."""

__version__ = "0.1.0"

__all__ = ["cartridge", "logger", "types", "utils"]