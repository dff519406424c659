"""Console log messages for emulator components and executed instructions."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from .types import Instruction, Processor
from .utils import format_instruction


def format_log(component: str, msg: str, level: str, now: datetime) -> str:
    """Build a log line stamped with the given time."""
    return f"{now.ctime()} {level} [{component}]: {msg}"


def print_log(component: str, msg: str, level: str) -> None:
    """Print a log line stamped with the current time."""
    print(format_log(component, msg, level, datetime.now()))


def format_instr_log(instr: Instruction, processor: Processor, now: datetime) -> str:
    """Build a debug line describing an executed instruction at the current PC."""
    # Relative offsets are shown as a single unsigned byte here.
    shown = replace(instr, offset=instr.offset & 0xFF)
    return f"{now.ctime()} DEBUG [CPU]: ${processor.pc:04x}: {format_instruction(shown)}"


def print_instr_log(instr: Instruction, processor: Processor) -> None:
    """Print a debug line describing an executed instruction."""
    print(format_instr_log(instr, processor, datetime.now()))