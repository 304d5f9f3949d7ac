# retro_chip8/loader/loader.py
"""
プログラムローダーモジュール。

ヘッダなしのフラットバイナリを 0x200 からそのまま配置します。
命令の妥当性はロード時には検証しません。
"""
import logging
from typing import List

from retro_chip8.core.errors import RomLoadError
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.constants import PROGRAM_START, MAX_PROGRAM_SIZE

logger = logging.getLogger(__name__)


class BinaryRomLoader:
    """
    フラットバイナリ形式のプログラムを解析し、データをバスにロードするローダー。
    """
    # @intent:responsibility ファイル全体を読み込み、サイズを検証してから 0x200 以降へ書き込みます。
    # @intent:post-condition 失敗時はRomLoadErrorを送出し、メモリは一切変更されません。
    def load_binary(self, file_path: str, bus: Bus, start_address: int = PROGRAM_START) -> int:
        try:
            with open(file_path, 'rb') as f:
                image = f.read()
        except OSError as e:
            raise RomLoadError(f"Cannot read program '{file_path}': {e}") from e

        if len(image) > MAX_PROGRAM_SIZE:
            raise RomLoadError(
                f"Program '{file_path}' is {len(image)} bytes; the maximum is {MAX_PROGRAM_SIZE} bytes"
            )

        for offset, byte_data in enumerate(image):
            bus.load(start_address + offset, byte_data)

        logger.info("Loaded %d bytes from %s at %#05x", len(image), file_path, start_address)
        return len(image)

# @intent:responsibility メモリ領域を16進ダンプ形式の文字列リストに変換します（ログ記録なし）。
def hexdump(bus: Bus, start: int = PROGRAM_START, length: int = 256, width: int = 16) -> List[str]:
    lines = []
    end = min(start + length, bus.get_address_limit() + 1)
    for row_start in range(start, end, width):
        row = [bus.peek(addr) for addr in range(row_start, min(row_start + width, end))]
        lines.append(f"{row_start:03X}: " + " ".join(f"{b:02x}" for b in row))
    return lines
