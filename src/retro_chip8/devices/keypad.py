"""
16キーの16進キーパッド。

入力側（UI）が step() の前に書き込み、CPU は EX9E/EXA1/FX0A で読み出します。
"""
from typing import List, Optional

from retro_chip8.common.constants import KEY_COUNT

# @intent:responsibility 16個のキー押下状態のスナップショットを保持します。
class Keypad:
    def __init__(self):
        self._keys: List[bool] = [False] * KEY_COUNT

    def _check_key(self, key: int) -> None:
        if not 0 <= key < KEY_COUNT:
            raise ValueError(f"Key {key} is not a CHIP-8 key (0x0-0xF).")

    def set_key(self, key: int, pressed: bool) -> None:
        self._check_key(key)
        self._keys[key] = pressed

    def press(self, key: int) -> None:
        self.set_key(key, True)

    def release(self, key: int) -> None:
        self.set_key(key, False)

    def release_all(self) -> None:
        self._keys = [False] * KEY_COUNT

    # @intent:pre-condition key は VX の値であり、0x0F を超える場合は押されていないものとして扱う。
    def is_pressed(self, key: int) -> bool:
        if not 0 <= key < KEY_COUNT:
            return False
        return self._keys[key]

    # @intent:responsibility 押されているキーのうち最小の番号を返します。無ければ None。
    def first_pressed(self) -> Optional[int]:
        for key, pressed in enumerate(self._keys):
            if pressed:
                return key
        return None
