# tests/transport/test_bus.py
"""
retro_chip8.transport.busモジュールの単体テスト。
"""
import pytest
from retro_chip8.transport.bus import Bus, RAM, ROM, BusAccess, BusAccessType

# @intent:test_suite 共通バスとデバイスの基本的な機能とエラーハンドリングを検証します。

class TestRAM:
    """
    RAMデバイスの単体テスト。
    """
    def test_ram_init_valid_size(self):
        ram = RAM(16)
        assert ram.get_size() == 16
        assert all(ram.read(i) == 0 for i in range(16))

    # @intent:test_case_init 無効なサイズでRAMを初期化するとValueErrorが発生することを検証します。
    def test_ram_init_invalid_size(self):
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(0)
        with pytest.raises(ValueError, match="RAM size must be a positive integer."):
            RAM(1.5)

    def test_ram_read_write_out_of_bounds(self):
        ram = RAM(4)
        with pytest.raises(IndexError, match="Address 4 out of bounds for RAM of size 4."):
            ram.read(4)
        with pytest.raises(IndexError, match="Address -1 out of bounds for RAM of size 4."):
            ram.write(-1, 0x00)

    def test_ram_write_invalid_data(self):
        ram = RAM(1)
        with pytest.raises(ValueError, match="Data 256 is not an 8-bit value."):
            ram.write(0, 0x100)


class TestROM:
    # @intent:test_case_rom 実行時の書き込みは無視され、load_dataでのみ内容が変わることを検証します。
    def test_rom_ignores_write_but_accepts_load(self):
        rom = ROM(4)
        rom.write(0, 0xAA)
        assert rom.read(0) == 0x00
        rom.load_data(0, 0xAA)
        assert rom.read(0) == 0xAA

    def test_rom_write_out_of_bounds(self):
        rom = ROM(4)
        with pytest.raises(IndexError):
            rom.write(4, 0x00)


class TestBus:
    """
    Busの単体テスト。フォントROM + RAM の4KB構成で検証します。
    """
    @pytest.fixture
    def bus(self):
        bus = Bus()
        bus.register_device(0x000, 0x04F, ROM(0x50))
        bus.register_device(0x050, 0xFFF, RAM(0xFB0))
        return bus

    def test_bus_register_and_access_device(self, bus):
        bus.write(0x200, 0xAA)
        assert bus.read(0x200) == 0xAA
        assert bus.get_address_limit() == 0xFFF

    def test_bus_write_to_rom_region_is_ignored(self, bus):
        bus.load(0x000, 0xF0)
        bus.write(0x000, 0x12)
        assert bus.read(0x000) == 0xF0

    # @intent:test_case_unmapped 4KBを超えるアドレスへのアクセスはIndexErrorになることを検証します。
    def test_bus_access_unmapped_address(self, bus):
        with pytest.raises(IndexError, match="Address 0x1000 not mapped to any device."):
            bus.read(0x1000)
        with pytest.raises(IndexError, match="Address 0x1000 not mapped to any device."):
            bus.write(0x1000, 0xCC)

    def test_bus_register_invalid_address_range(self):
        bus = Bus()
        with pytest.raises(ValueError, match="Invalid address range"):
            bus.register_device(0x0010, 0x000F, RAM(16))
        with pytest.raises(ValueError, match="Invalid address range"):
            bus.register_device(-1, 0x000F, RAM(16))

    def test_bus_register_size_mismatch(self):
        bus = Bus()
        with pytest.raises(ValueError, match=r"Registered ROM device size \(10 bytes\)"):
            bus.register_device(0x0000, 0x000F, ROM(10))

    def test_bus_register_invalid_device_type(self):
        bus = Bus()
        class MyClass: pass
        with pytest.raises(TypeError, match="Device must be an instance of a class derived from Device."):
            bus.register_device(0x0000, 0x000F, MyClass())

    def test_empty_bus_address_limit(self):
        assert Bus().get_address_limit() == -1

    # @intent:test_case_log read/write は記録され、peek/load は記録されないことを検証します。
    def test_activity_log(self, bus):
        bus.load(0x300, 0x11)
        assert bus.peek(0x300) == 0x11
        assert bus.get_and_clear_activity_log() == []

        bus.write(0x300, 0x22)
        bus.read(0x300)
        log = bus.get_and_clear_activity_log()
        assert log == [
            BusAccess(address=0x300, data=0x22, access_type=BusAccessType.WRITE),
            BusAccess(address=0x300, data=0x22, access_type=BusAccessType.READ),
        ]
        assert bus.get_and_clear_activity_log() == []
