import pytest

from kpworks.person import CpuType, DiskType, OperatingSystem, Person, VideoCardType
from kpworks.person_table import (
    DELIM,
    HEADER,
    USAGE,
    format_person,
    format_table,
    main,
    select_for_task,
)


def make(surname, cpu=CpuType.INTEL, os=OperatingSystem.WINDOWS_10):
    return Person(
        surname=surname,
        cpu_count=4,
        cpu_type=cpu,
        memory_size=16,
        video_card_type=VideoCardType.EMBEDDED,
        video_memory_size=2,
        disk_type=DiskType.SATA,
        disk_count=1,
        disk_size=512,
        external_devices_count=3,
        operating_system=os,
    )


PEOPLE = [
    make("Ivanov"),
    make("Petrov", cpu=CpuType.AMD),
    make("Sidorov", os=OperatingSystem.LINUX),
    make("Smirnov", os=OperatingSystem.WINDOWS_7),
    make("Orlov", os=OperatingSystem.MAC_OS),
]


def test_header_and_delimiter_align():
    assert len(HEADER) == len(DELIM)
    assert [len(c) for c in HEADER.split("|")] == [len(c) for c in DELIM.split("|")]


def test_row_aligns_with_header():
    row = format_person(make("Петров"))
    assert [len(c) for c in row.split("|")] == [len(c) for c in DELIM.split("|")]


def test_format_table_frame():
    lines = format_table(PEOPLE[:2]).splitlines()
    assert lines[0] == HEADER
    assert lines[1] == DELIM
    assert lines[-1] == DELIM
    assert len(lines) == 5


def test_select_for_task():
    chosen = select_for_task(PEOPLE)
    assert [p.surname for p in chosen] == ["Ivanov", "Smirnov"]


@pytest.fixture
def binary_file(tmp_path):
    path = tmp_path / "people.bin"
    path.write_bytes(b"".join(p.pack() for p in PEOPLE))
    return path


def test_main_prints_all(binary_file, capsys):
    assert main([str(binary_file), "-f"]) == 0
    out = capsys.readouterr().out
    assert out == format_table(PEOPLE)


def test_main_prints_selection(binary_file, capsys):
    assert main([str(binary_file), "-p"]) == 0
    out = capsys.readouterr().out
    assert out == format_table(select_for_task(PEOPLE))


@pytest.mark.parametrize(
    "args", [[], ["-f"], ["file.bin"], ["-f", "file.bin"], ["file.bin", "-f", "-p"]]
)
def test_main_usage(args, capsys):
    assert main(args) == 0
    assert USAGE in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.bin"), "-f"]) == 0
    assert "Ошибка ввода." in capsys.readouterr().out