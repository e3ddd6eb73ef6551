"""Tables of computer owners read from the binary record file."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from kpworks.person import (
    CpuType,
    DiskType,
    OperatingSystem,
    Person,
    VideoCardType,
    iter_binary,
)

_WIDTHS = (39, 11, 11, 12, 13, 13, 13, 12, 12, 13, 11)
_TITLES = (
    "Фамилия",
    "Кол-во ядер",
    " Тип проц  ",
    " Размер ОЗУ ",
    "Тип вид.карты",
    " Видеопамять ",
    "   Тип ПЗУ   ",
    " Кол-во ПЗУ ",
    " Размер ПЗУ ",
    "Кол-во периф.",
    "    ОС     ",
)

HEADER = "|" + "|".join(t.ljust(w) for t, w in zip(_TITLES, _WIDTHS)) + "|"
DELIM = "|" + "|".join("-" * w for w in _WIDTHS) + "|"
USAGE = (
    "main <filename> -f - печать таблицы\n"
    "main <filename> -p - вычисление функции по заданию."
)

CPU_LABELS = {
    CpuType.INTEL: "  INTEL    ",
    CpuType.AMD: "  AMD      ",
    CpuType.ARM: "  ARM      ",
    CpuType.ELBRUS: "  ELBRUS   ",
}
VIDEO_LABELS = {
    VideoCardType.EMBEDDED: "   EMBEDDED  ",
    VideoCardType.EXTERNAL: "   EXTERNAL  ",
    VideoCardType.VIDEO_BUS: "   VIDEO_BUS ",
}
DISK_LABELS = {
    DiskType.SAS: "     SAS     ",
    DiskType.SATA: "     SATA    ",
}
OS_LABELS = {
    OperatingSystem.LINUX: " LINUX     ",
    OperatingSystem.MAC_OS: " MAC_OS    ",
    OperatingSystem.WINDOWS_7: " WINDOWS_7 ",
    OperatingSystem.WINDOWS_8: " WINDOWS_8 ",
    OperatingSystem.WINDOWS_10: " WINDOWS_10",
    OperatingSystem.WINDOWS_11: " WINDOWS_11",
}

_WINDOWS = frozenset(
    {
        OperatingSystem.WINDOWS_7,
        OperatingSystem.WINDOWS_8,
        OperatingSystem.WINDOWS_10,
        OperatingSystem.WINDOWS_11,
    }
)


def format_person(person: Person) -> str:
    """Lay one record out as a table row, without the line break."""
    cells = (
        f"{person.surname:<39}",
        f"{person.cpu_count:<11}",
        CPU_LABELS[person.cpu_type],
        f"{person.memory_size:<10}Gb",
        VIDEO_LABELS[person.video_card_type],
        f"{person.video_memory_size:<11}Gb",
        DISK_LABELS[person.disk_type],
        f"{person.disk_count:<12}",
        f"{person.disk_size:<10}Gb",
        f"{person.external_devices_count:<13}",
        OS_LABELS[person.operating_system],
    )
    return "|" + "|".join(cells) + "|"


def format_table(persons: Iterable[Person]) -> str:
    """Lay records out under the header, framed by delimiter lines."""
    lines = [HEADER, DELIM, *(format_person(p) for p in persons), DELIM]
    return "\n".join(lines) + "\n"


def select_for_task(persons: Iterable[Person]) -> list[Person]:
    """Keep owners of Intel machines running any Windows version."""
    return [
        p for p in persons
        if p.cpu_type is CpuType.INTEL and p.operating_system in _WINDOWS
    ]


def _parse_args(args: Sequence[str]) -> tuple[str | None, str | None]:
    mode: str | None = None
    filename: str | None = None
    undetermined = False
    for arg in args:
        if arg in ("-f", "-p"):
            if mode is None and not undetermined:
                mode = arg
            else:
                undetermined = True
        elif filename is None and mode is None and not undetermined:
            filename = arg
        else:
            undetermined = True
    if undetermined:
        return None, None
    return filename, mode


def main(argv: Sequence[str] | None = None) -> int:
    """Print all records (-f) or the selected ones (-p) from a binary file."""
    args = sys.argv[1:] if argv is None else list(argv)
    filename, mode = _parse_args(args)
    if filename is None or mode is None:
        print(USAGE)
        return 0
    try:
        with open(filename, "rb") as stream:
            persons = list(iter_binary(stream))
    except (OSError, ValueError):
        print("Ошибка ввода.")
        return 0
    if mode == "-p":
        persons = select_for_task(persons)
    sys.stdout.write(format_table(persons))
    return 0


if __name__ == "__main__":
    sys.exit(main())