"""Computer owner records and their fixed-size binary form."""

from __future__ import annotations

import re
import struct
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO, TextIO

SURNAME_SIZE = 40
_RECORD = struct.Struct(f"<{SURNAME_SIZE}s10I")
RECORD_SIZE = _RECORD.size
_UINT_MAX = 2**32 - 1
_NUMBER = re.compile(r"\s*(\d+)")


class CpuType(IntEnum):
    INTEL = 0
    AMD = 1
    ARM = 2
    ELBRUS = 3


class VideoCardType(IntEnum):
    EMBEDDED = 0
    EXTERNAL = 1
    VIDEO_BUS = 2


class DiskType(IntEnum):
    SAS = 0
    SATA = 1


class OperatingSystem(IntEnum):
    LINUX = 0
    MAC_OS = 1
    WINDOWS_7 = 2
    WINDOWS_8 = 3
    WINDOWS_10 = 4
    WINDOWS_11 = 5


@dataclass
class Person:
    """One owner and the configuration of their computer; sizes are in Gb."""

    surname: str
    cpu_count: int
    cpu_type: CpuType
    memory_size: int
    video_card_type: VideoCardType
    video_memory_size: int
    disk_type: DiskType
    disk_count: int
    disk_size: int
    external_devices_count: int
    operating_system: OperatingSystem

    def __post_init__(self) -> None:
        self.cpu_type = CpuType(self.cpu_type)
        self.video_card_type = VideoCardType(self.video_card_type)
        self.disk_type = DiskType(self.disk_type)
        self.operating_system = OperatingSystem(self.operating_system)

    def _numbers(self) -> tuple[int, ...]:
        return (
            self.cpu_count,
            int(self.cpu_type),
            self.memory_size,
            int(self.video_card_type),
            self.video_memory_size,
            int(self.disk_type),
            self.disk_count,
            self.disk_size,
            self.external_devices_count,
            int(self.operating_system),
        )

    def pack(self) -> bytes:
        """Return the record as a fixed-size block of bytes."""
        name = self.surname.encode("utf-8")
        if not name or len(name) >= SURNAME_SIZE or b"\x00" in name:
            raise ValueError(f"surname must take 1 to {SURNAME_SIZE - 1} bytes")
        numbers = self._numbers()
        if any(not 0 <= n <= _UINT_MAX for n in numbers):
            raise ValueError("numeric fields must fit an unsigned 32-bit integer")
        return _RECORD.pack(name, *numbers)

    @classmethod
    def unpack(cls, data: bytes) -> Person:
        """Build a record from a block written by pack()."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record takes exactly {RECORD_SIZE} bytes")
        raw_name, *numbers = _RECORD.unpack(data)
        surname = raw_name.split(b"\x00", 1)[0].decode("utf-8", errors="replace")
        return cls(surname, *numbers)


def parse_line(line: str) -> Person:
    """Parse "surname;n1;...;n10", the ten numbers being unsigned integers."""
    fields = line.lstrip().rstrip().split(";")
    if len(fields) != 11:
        raise ValueError("a record holds a surname and ten numbers")
    surname, *raw_numbers = fields
    if not surname:
        raise ValueError("the surname is empty")
    numbers = []
    for raw in raw_numbers:
        match = _NUMBER.fullmatch(raw)
        if match is None:
            raise ValueError(f"not an unsigned number: {raw!r}")
        numbers.append(int(match.group(1)))
    return Person(surname, *numbers)


def read_records(stream: Iterable[str]) -> Iterator[Person]:
    """Yield records from text lines, stopping at the first malformed one."""
    for line in stream:
        if not line.strip():
            continue
        try:
            yield parse_line(line)
        except ValueError:
            return


def iter_binary(stream: BinaryIO) -> Iterator[Person]:
    """Yield records from a binary stream; a trailing partial block is ignored."""
    while len(block := stream.read(RECORD_SIZE)) == RECORD_SIZE:
        yield Person.unpack(block)


def dump(source: TextIO, target: BinaryIO) -> int:
    """Convert text records into binary ones; return how many were written."""
    count = 0
    for person in read_records(source):
        target.write(person.pack())
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Convert the text base named first into the binary file named second."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Неверный ввод.")
        return 1
    try:
        source = open(args[0], encoding="utf-8")
    except OSError as exc:
        print(f"Не удается открыть файл1: {exc.strerror}", file=sys.stderr)
        return 2
    with source:
        try:
            target = open(args[1], "wb")
        except OSError as exc:
            print(f"Не удается открыть файл: {exc.strerror}", file=sys.stderr)
            return 2
        with target:
            try:
                dump(source, target)
            except ValueError as exc:
                print(f"Неверная запись: {exc}", file=sys.stderr)
                return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())