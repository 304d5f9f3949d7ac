# tests/loader/test_rom_loader.py
"""
retro_chip8.loader.loaderモジュールの単体テスト。
フラットバイナリのロードと16進ダンプを検証します。
"""
import pytest

from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.core.errors import RomLoadError
from retro_chip8.loader.loader import BinaryRomLoader, hexdump
from retro_chip8.arch.chip8.constants import MAX_PROGRAM_SIZE

# @intent:test_suite プログラムイメージのロード機能の検証。

class TestBinaryRomLoader:
    @pytest.fixture
    def setup_loader(self, tmp_path):
        _, bus = SystemBuilder().build_system(MachineConfig())
        return BinaryRomLoader(), bus, tmp_path

    def test_load_at_program_start(self, setup_loader):
        loader, bus, tmp_path = setup_loader
        rom = tmp_path / "clear.ch8"
        rom.write_bytes(bytes([0x00, 0xE0, 0x12, 0x00]))

        assert loader.load_binary(str(rom), bus) == 4
        assert [bus.peek(0x200 + k) for k in range(4)] == [0x00, 0xE0, 0x12, 0x00]
        assert bus.peek(0x204) == 0x00
        assert bus.get_and_clear_activity_log() == []

    def test_empty_file_loads_nothing(self, setup_loader):
        loader, bus, tmp_path = setup_loader
        rom = tmp_path / "empty.ch8"
        rom.write_bytes(b"")
        assert loader.load_binary(str(rom), bus) == 0

    def test_maximum_size_fits(self, setup_loader):
        loader, bus, tmp_path = setup_loader
        rom = tmp_path / "max.ch8"
        rom.write_bytes(bytes([0xAB]) * MAX_PROGRAM_SIZE)
        assert loader.load_binary(str(rom), bus) == MAX_PROGRAM_SIZE
        assert bus.peek(0x200 + MAX_PROGRAM_SIZE - 1) == 0xAB

    # @intent:test_case_oversize 最大サイズを超えるイメージは拒否され、メモリは変更されないことを検証します。
    def test_oversize_is_rejected(self, setup_loader):
        loader, bus, tmp_path = setup_loader
        rom = tmp_path / "big.ch8"
        rom.write_bytes(bytes([0xAB]) * (MAX_PROGRAM_SIZE + 1))
        with pytest.raises(RomLoadError, match="maximum"):
            loader.load_binary(str(rom), bus)
        assert bus.peek(0x200) == 0x00

    def test_missing_file(self, setup_loader):
        loader, bus, tmp_path = setup_loader
        with pytest.raises(RomLoadError, match="Cannot read program"):
            loader.load_binary(str(tmp_path / "missing.ch8"), bus)


class TestHexdump:
    def test_hexdump_rows(self):
        _, bus = SystemBuilder().build_system(MachineConfig())
        for k in range(18):
            bus.load(0x200 + k, k)
        lines = hexdump(bus, 0x200, 18)
        assert lines[0] == "200: 00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f"
        assert lines[1] == "210: 10 11"

    def test_hexdump_stops_at_end_of_memory(self):
        _, bus = SystemBuilder().build_system(MachineConfig())
        lines = hexdump(bus, 0xFF8, 64)
        assert lines == ["FF8: 00 00 00 00 00 00 00 00"]
