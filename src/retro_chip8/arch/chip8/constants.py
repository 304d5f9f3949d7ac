# src/retro_chip8/arch/chip8/constants.py
"""
CHIP-8のメモリマップ、画面サイズ、フォントテーブルの定数定義。
"""

MEMORY_SIZE = 0x1000          # 4KB
ADDRESS_MASK = 0xFFF
PROGRAM_START = 0x200
# ロード可能なプログラムの最大サイズ
MAX_PROGRAM_SIZE = 0xFFF - PROGRAM_START

STACK_SIZE = 16
REGISTER_COUNT = 16
KEY_COUNT = 16

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

INSTRUCTION_LENGTH = 2

FONT_START = 0x000
FONT_GLYPH_SIZE = 5
# @intent:constant 0-Fの16文字 x 5バイトの組み込みフォント。アドレス0x000から配置されます。
FONT_DATA = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])
FONT_END = FONT_START + len(FONT_DATA) - 1  # 0x04F
