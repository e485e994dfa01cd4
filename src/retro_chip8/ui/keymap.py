"""
ホストのキー入力を CHIP-8 キーパッドへ対応付けるモジュール。
"""
from typing import Dict

from PySide6.QtCore import Qt

# @intent:responsibility キー名の対応表（例: "Q" → 0x4）を Qt のキーコード → CHIP-8 キーの表へ変換します。
# @intent:pre-condition キー名は Qt.Key の "Key_" 以降の名前（"1", "Q", "Space" など）である必要があります。
def build_key_table(keymap: Dict[str, int]) -> Dict[int, int]:
    table: Dict[int, int] = {}
    for name, chip_key in keymap.items():
        qt_key = getattr(Qt.Key, f"Key_{name}", None)
        if qt_key is None:
            raise ValueError(f"Unknown host key name: {name!r}")
        table[qt_key.value] = chip_key
    return table
