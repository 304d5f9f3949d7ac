# src/retro_chip8/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.quirks import Chip8Quirks, DEFAULT_QUIRKS
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Op, Chip8Operation, make_operation
from .maps import PRIMARY_MAP, SECONDARY_MAP, EXECUTE_MAP

# @intent:responsibility 16ビットの命令ワードを命令タグに分類します（副作用なし）。
def classify_opcode(word: int) -> Chip8Op:
    """
    上位ニブルで一次分類し、0x0/0x8/0xE/0xF は下位ビットで二次分類します。
    命令ワードが拒否されることはなく、認識できないものは UNKNOWN (0NNN は SYS) になります。
    """
    primary = (word >> 12) & 0xF
    kind = PRIMARY_MAP.get(primary)
    if kind is not None:
        return kind
    mask, table, fallback = SECONDARY_MAP[primary]
    return table.get(word & mask, fallback)

# @intent:responsibility CHIP-8の命令ワードをデコードします。
def decode_opcode(word: int) -> Chip8Operation:
    word &= 0xFFFF
    return make_operation(word, classify_opcode(word))

# @intent:responsibility デコードされたCHIP-8命令を実行します。
def execute_instruction(operation: Chip8Operation, state: Chip8CpuState, bus: Bus,
                        quirks: Chip8Quirks = DEFAULT_QUIRKS) -> None:
    """
    デコードされたCHIP-8命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP[operation.kind]
    executor(state, bus, operation, quirks)
