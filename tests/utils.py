"""Shared helpers for the test-suite."""

from __future__ import annotations

import struct
from typing import Optional, Sequence

from script_scaffold.cli.console import ScriptConsole
from script_scaffold.core.process import CommandRunner


class RecordingRunner(CommandRunner):
    """Command runner that records invocations instead of spawning processes."""

    def __init__(self, listing: Optional[str] = None, status: int = 0):
        self.calls: list[tuple[str, list[str]]] = []
        self.listing = listing
        self.status = status

    def execute(self, program: str, arguments: Sequence[str]) -> int:
        self.calls.append((program, list(arguments)))
        return self.status

    def capture(self, program: str, arguments: Sequence[str]) -> Optional[str]:
        self.calls.append((program, list(arguments)))
        return self.listing


def console_output(console: ScriptConsole) -> str:
    return console.console.file.getvalue()


def build_pe_image(managed: bool = True, with_assembly_row: bool = True) -> bytes:
    """Build the smallest PE32 image the assembly probe accepts.

    Layout (file offset == RVA - 0x1E00):
    - 0x000 DOS header, e_lfanew = 0x80
    - 0x080 PE signature, COFF header, 224-byte optional header
    - 0x178 one section header (.text, RVA 0x2000, raw 0x200)
    - 0x200 CLI header
    - 0x248 metadata root with a single ``#~`` stream
    """
    image = bytearray(0x400)
    image[0:2] = b"MZ"
    struct.pack_into("<I", image, 0x3C, 0x80)
    image[0x80:0x84] = b"PE\x00\x00"
    # COFF: machine, sections, timestamp, symtab, symbols, optional size, characteristics
    struct.pack_into("<HHIIIHH", image, 0x84, 0x14C, 1, 0, 0, 0, 0xE0, 0x2102)
    optional = 0x98
    struct.pack_into("<H", image, optional, 0x10B)
    struct.pack_into("<I", image, optional + 92, 16)
    if managed:
        struct.pack_into("<II", image, optional + 96 + 14 * 8, 0x2000, 72)

    section = optional + 0xE0
    image[section : section + 8] = b".text\x00\x00\x00"
    struct.pack_into("<IIII", image, section + 8, 0x200, 0x2000, 0x200, 0x200)

    # CLI header: cb, runtime version, metadata directory
    struct.pack_into("<IHHII", image, 0x200, 72, 2, 5, 0x2048, 0x100)

    metadata = 0x248
    version = b"v4.0.30319\x00\x00"
    struct.pack_into("<IHHII", image, metadata, 0x424A5342, 1, 1, 0, len(version))
    image[metadata + 16 : metadata + 16 + len(version)] = version
    cursor = metadata + 16 + len(version)
    struct.pack_into("<HH", image, cursor, 0, 1)
    stream_header = cursor + 4
    tables_offset = (stream_header + 12) - metadata
    struct.pack_into("<II", image, stream_header, tables_offset, 0x40)
    image[stream_header + 8 : stream_header + 12] = b"#~\x00\x00"

    tables = metadata + tables_offset
    valid = 1 | ((1 << 0x20) if with_assembly_row else 0)
    struct.pack_into("<IBBBBQQ", image, tables, 0, 2, 0, 0, 1, valid, 0)
    struct.pack_into("<I", image, tables + 24, 1)
    if with_assembly_row:
        struct.pack_into("<I", image, tables + 28, 1)
    return bytes(image)
