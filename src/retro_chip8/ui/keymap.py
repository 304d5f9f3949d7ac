"""
キーボードとCHIP-8キーパッドの対応付け。

設定ファイルのキー名 ("1", "Q", "Left" など) を Qt のキーコードへ変換します。
"""
from typing import Dict

from PySide6.QtCore import Qt

# @intent:responsibility キー名 → シンボル の辞書を Qtキーコード → シンボル の辞書に変換します。
# @intent:pre-condition キー名は Qt.Key の "Key_" 以降の名前である必要があります（大文字小文字は区別しません）。
def resolve_keymap(named_keymap: Dict[str, int]) -> Dict[int, int]:
    resolved: Dict[int, int] = {}
    lookup = {name[len("Key_"):].lower(): name for name in dir(Qt.Key) if name.startswith("Key_")}
    for key_name, symbol in named_keymap.items():
        attr = lookup.get(str(key_name).lower())
        if attr is None:
            raise ValueError(f"Unknown key name '{key_name}' in keymap")
        resolved[int(getattr(Qt.Key, attr))] = symbol
    return resolved
