# retro_chip8/core/errors.py
"""
エミュレータ全体で共通の例外定義。

ロード時のエラーは呼び出し元へ伝播し、実行中のフォールトはエンジン内で捕捉されて
HALTED 状態への遷移に変換されます。
"""


class MachineFault(Exception):
    """実行中に検出された致命的なフォールトの基底クラス。"""

    def __init__(self, message: str, pc: int = 0):
        super().__init__(message)
        self.pc = pc


# @intent:responsibility アドレス空間（0x000-0xFFF）外へのメモリアクセスを表します。
class AddressFault(MachineFault):
    pass


# @intent:responsibility スタックのオーバーフロー（16段を超えるCALL）およびアンダーフロー（空でのRET）を表します。
class StackFault(MachineFault):
    pass


# @intent:responsibility プログラムイメージのロード失敗（ファイル不在、読み込み不可、サイズ超過）を表します。
class RomLoadError(Exception):
    pass
