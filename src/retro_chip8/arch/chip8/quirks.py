# src/retro_chip8/arch/chip8/quirks.py
"""
ROM互換性に関わる命令セマンティクスの切り替え設定。
"""
from dataclasses import dataclass

# @intent:responsibility 実装系ごとに挙動が分かれる命令の選択肢を保持します。
@dataclass(frozen=True)
class Chip8Quirks:
    """
    shift_uses_vy:
        False の場合、8XY6/8XYE は Vx のみをシフトします（既定の互換挙動）。
        True の場合、Vy をシフト元として結果を Vx に格納します。
    load_store_increments_index:
        True の場合、FX55/FX65 の実行後に I += x + 1 とします（既定）。
    """
    shift_uses_vy: bool = False
    load_store_increments_index: bool = True


DEFAULT_QUIRKS = Chip8Quirks()
