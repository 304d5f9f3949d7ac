"""
共通の型定義を提供するモジュール。
コア、アダプタ、UIの複数レイヤーで使用される型を定義します。
"""
from enum import Enum
from typing import Dict, NamedTuple, Optional

# @intent:data_structure レジスタ名と値をマッピングする辞書の型エイリアス。診断ログで使用されます。
RegisterMap = Dict[str, int]

# @intent:data_structure 入力アダプタから届くイベントの種類。QUITはキー入力とは別系統の終了シグナルです。
class InputEventType(Enum):
    KEY_DOWN = "KEY_DOWN"
    KEY_UP = "KEY_UP"
    QUIT = "QUIT"

# @intent:data_structure 単一の入力イベント。symbolは0x0-0xFのキー番号（QUITではNone）。
class InputEvent(NamedTuple):
    event_type: InputEventType
    symbol: Optional[int] = None

    @classmethod
    def key_down(cls, symbol: int) -> "InputEvent":
        return cls(InputEventType.KEY_DOWN, symbol)

    @classmethod
    def key_up(cls, symbol: int) -> "InputEvent":
        return cls(InputEventType.KEY_UP, symbol)

    @classmethod
    def quit(cls) -> "InputEvent":
        return cls(InputEventType.QUIT)
