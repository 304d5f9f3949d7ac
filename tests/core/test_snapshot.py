# tests/core/test_snapshot.py
"""
retro_chip8.core.snapshotモジュールの単体テスト。
"""
import pytest
from retro_chip8.core.state import CpuState
from retro_chip8.core.snapshot import Operation, Metadata, Snapshot
from retro_chip8.transport.bus import BusAccess, BusAccessType

# @intent:test_suite 命令実行結果を記録する不変データ構造の検証。

class TestOperation:
    def test_operation_defaults(self):
        op = Operation(opcode_hex="00E0", mnemonic="CLS")
        assert op.operands == []
        assert op.length == 2
        assert op.cycle_count == 1

    def test_operation_immutability(self):
        op = Operation(opcode_hex="6A2A", mnemonic="LD", operands=["VA", "#0x2A"])
        with pytest.raises(AttributeError):
            op.mnemonic = "ADD"


class TestSnapshot:
    def test_snapshot_init(self):
        state = CpuState(pc=0x202)
        op = Operation(opcode_hex="1200", mnemonic="JP", operands=["0x200"])
        access = BusAccess(address=0x200, data=0x12, access_type=BusAccessType.READ)
        snapshot = Snapshot(state=state, operation=op,
                            metadata=Metadata(cycle_count=1, symbol_info="JP 0x200"),
                            bus_activity=[access], pc=0x200)
        assert snapshot.state.pc == 0x202
        assert snapshot.pc == 0x200
        assert snapshot.bus_activity == [access]
        assert snapshot.metadata.symbol_info == "JP 0x200"

    def test_snapshot_immutability(self):
        snapshot = Snapshot(state=CpuState(), operation=Operation("00E0", "CLS"),
                            metadata=Metadata(cycle_count=0))
        with pytest.raises(AttributeError):
            snapshot.pc = 0x300
