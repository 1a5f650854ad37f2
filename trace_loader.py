"""
Trace ingestion.

A trace is a text file with one reference per line:

    <hex-address> <R|W>

Each address is mapped to its page number and rendered as a fixed-width
lowercase hex identifier. Bad lines and missing files never abort loading;
they are reported on stderr and the stream simply comes out shorter.
"""

import sys
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from config import PAGE_SIZE, PAGE_ID_WIDTH


class AccessKind(Enum):
    READ = 'R'
    WRITE = 'W'

    @classmethod
    def from_token(cls, token):
        # Only an exact 'W' is a write, anything else reads
        return cls.WRITE if token[:1] == 'W' else cls.READ


class Reference(NamedTuple):
    page: str
    kind: AccessKind

    @property
    def is_write(self) -> bool:
        return self.kind is AccessKind.WRITE

    def __str__(self):
        return f"{self.page} {self.kind.value}"


def address_to_page(address, page_size=PAGE_SIZE) -> str:
    """Map a hex address string (or int) to its page identifier."""
    if isinstance(address, str):
        address = int(address, 16)
    if address < 0:
        raise ValueError(f"negative address {address:#x}")
    return f"{address // page_size:0{PAGE_ID_WIDTH}x}"


def parse_line(line: str, page_size=PAGE_SIZE) -> Optional[Reference]:
    """
    Parse one trace line into a Reference.

    Returns None for blank lines. Raises ValueError when the line does not
    have exactly two tokens or the address is not hexadecimal.
    """
    parts = line.strip().split()
    if not parts:
        return None
    if len(parts) != 2:
        raise ValueError(f"expected 2 fields, got {len(parts)}")

    address, kind = parts
    return Reference(address_to_page(address, page_size), AccessKind.from_token(kind))


def load_trace(path, page_size=PAGE_SIZE) -> Tuple[Reference, ...]:
    references = []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line_num, line in enumerate(f, start=1):
                try:
                    ref = parse_line(line, page_size)
                except ValueError as e:
                    print(f"Invalid line {line_num} ({e}): {line.strip()}", file=sys.stderr)
                    continue
                if ref is not None:
                    references.append(ref)
    except FileNotFoundError:
        print(f"File not found: {path}", file=sys.stderr)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading file {path}: {e}", file=sys.stderr)

    return tuple(references)
