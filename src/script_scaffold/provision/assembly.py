"""Recognize managed .NET assemblies on disk.

A file counts as an assembly when its identity can be read: it must be a PE
image carrying a CLI header, and its metadata tables must contain an Assembly
row. Native DLLs and bare netmodules fail the check.
"""

from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_PE_SIGNATURE = b"PE\x00\x00"
_METADATA_SIGNATURE = 0x424A5342  # "BSJB"
_PE32_MAGIC = 0x10B
_PE32_PLUS_MAGIC = 0x20B
_CLI_HEADER_DIRECTORY = 14
_ASSEMBLY_TABLE = 0x20


class _Image:
    def __init__(self, data: bytes):
        self.data = data
        self.sections: list[tuple[int, int, int, int]] = []

    def u16(self, offset: int) -> int:
        return struct.unpack_from("<H", self.data, offset)[0]

    def u32(self, offset: int) -> int:
        return struct.unpack_from("<I", self.data, offset)[0]

    def u64(self, offset: int) -> int:
        return struct.unpack_from("<Q", self.data, offset)[0]

    def rva_to_offset(self, rva: int) -> Optional[int]:
        for virtual_address, virtual_size, raw_size, raw_pointer in self.sections:
            if virtual_address <= rva < virtual_address + max(virtual_size, raw_size):
                return rva - virtual_address + raw_pointer
        return None


def _cli_header_rva(image: _Image) -> Optional[int]:
    if image.data[:2] != b"MZ":
        return None
    pe_offset = image.u32(0x3C)
    if image.data[pe_offset : pe_offset + 4] != _PE_SIGNATURE:
        return None

    coff = pe_offset + 4
    section_count = image.u16(coff + 2)
    optional_size = image.u16(coff + 16)
    optional = coff + 20

    magic = image.u16(optional)
    if magic == _PE32_MAGIC:
        directory_count = image.u32(optional + 92)
        directories = optional + 96
    elif magic == _PE32_PLUS_MAGIC:
        directory_count = image.u32(optional + 108)
        directories = optional + 112
    else:
        return None
    if directory_count <= _CLI_HEADER_DIRECTORY:
        return None

    section_table = optional + optional_size
    for index in range(section_count):
        entry = section_table + index * 40
        image.sections.append(
            (image.u32(entry + 12), image.u32(entry + 8), image.u32(entry + 16), image.u32(entry + 20))
        )

    rva = image.u32(directories + _CLI_HEADER_DIRECTORY * 8)
    return rva or None


def _has_assembly_row(image: _Image, metadata: int) -> bool:
    if image.u32(metadata) != _METADATA_SIGNATURE:
        return False
    version_length = image.u32(metadata + 12)
    cursor = metadata + 16 + version_length
    stream_count = image.u16(cursor + 2)
    cursor += 4

    for _ in range(stream_count):
        stream_offset = image.u32(cursor)
        name_start = cursor + 8
        name_end = image.data.index(b"\x00", name_start)
        name = image.data[name_start:name_end]
        cursor = name_start + ((name_end - name_start) // 4 + 1) * 4
        if name not in (b"#~", b"#-"):
            continue

        tables = metadata + stream_offset
        valid = image.u64(tables + 8)
        if not valid & (1 << _ASSEMBLY_TABLE):
            return False
        row_index = bin(valid & ((1 << _ASSEMBLY_TABLE) - 1)).count("1")
        return image.u32(tables + 24 + row_index * 4) > 0
    return False


def is_assembly(path: Path) -> bool:
    """Return True when ``path`` is a loadable managed assembly."""
    try:
        image = _Image(Path(path).read_bytes())
        cli_rva = _cli_header_rva(image)
        if cli_rva is None:
            return False
        cli_offset = image.rva_to_offset(cli_rva)
        if cli_offset is None:
            return False
        metadata = image.rva_to_offset(image.u32(cli_offset + 8))
        if metadata is None:
            return False
        return _has_assembly_row(image, metadata)
    except (OSError, ValueError, struct.error) as exc:
        logger.debug("Not an assembly: %s (%s)", path, exc)
        return False
