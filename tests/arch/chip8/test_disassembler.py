# tests/arch/chip8/test_disassembler.py
"""
retro_chip8.arch.chip8.disassemblerモジュールの単体テスト。
"""
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.arch.chip8.disassembler import disassemble


def test_disassemble_program():
    cpu, bus = SystemBuilder().build_system(MachineConfig())
    for offset, b in enumerate([0x00, 0xE0, 0xA2, 0x2A, 0xD0, 0x15, 0x12, 0x00]):
        bus.load(0x200 + offset, b)
    bus.get_and_clear_activity_log()

    result = disassemble(bus, 0x200, 8)
    assert result == [
        (0x200, "00E0", "CLS"),
        (0x202, "A22A", "LD I, 0x22A"),
        (0x204, "D015", "DRW V0, V1, 5"),
        (0x206, "1200", "JP 0x200"),
    ]
    # 逆アセンブルはバスアクセスログを残さない
    assert bus.get_and_clear_activity_log() == []
    assert cpu.disassemble(0x200, 2) == result[:1]


def test_disassemble_stops_at_end_of_memory():
    _, bus = SystemBuilder().build_system(MachineConfig())
    result = disassemble(bus, 0xFFC, 16)
    assert [addr for addr, _, _ in result] == [0xFFC, 0xFFE]
