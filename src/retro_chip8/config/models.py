from dataclasses import dataclass, field
from typing import Dict, List

from retro_chip8.arch.chip8.constants import FONT_START, FONT_END, MEMORY_SIZE
from retro_chip8.arch.chip8.quirks import Chip8Quirks
from retro_chip8.core.engine import DEFAULT_CYCLES_PER_FRAME, DEFAULT_FRAME_RATE_HZ

@dataclass
class MemoryRegion:
    start: int
    end: int
    type: str  # "RAM", "ROM"
    label: str = ""

# フォントテーブルはROMとして配置し、プログラムからの書き込みを無効にする
DEFAULT_MEMORY_MAP = [
    MemoryRegion(FONT_START, FONT_END, "ROM", "Font"),
    MemoryRegion(FONT_END + 1, MEMORY_SIZE - 1, "RAM", "Interpreter / Program"),
]

# 16進キーパッド (1 2 3 C / 4 5 6 D / 7 8 9 E / A 0 B F) をキーボード左側の4x4に割り当てる
# 矢印キーは 4/1/6/9 (左/上/右/下)
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
    "Left": 0x4, "Up": 0x1, "Right": 0x6, "Down": 0x9,
}

@dataclass
class DisplayConfig:
    scale: int = 10
    foreground: str = "#FFFFFF"
    background: str = "#404040"

@dataclass
class MachineConfig:
    cycles_per_frame: int = DEFAULT_CYCLES_PER_FRAME
    frame_rate_hz: int = DEFAULT_FRAME_RATE_HZ
    quirks: Chip8Quirks = field(default_factory=Chip8Quirks)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
    memory_map: List[MemoryRegion] = field(default_factory=lambda: list(DEFAULT_MEMORY_MAP))
