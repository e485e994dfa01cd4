"""
64x32 のモノクロフレームバッファ。

CLS と DRW 命令のみが変更し、表示側は1フレームごとに読み出します。
"""
from typing import List

from retro_chip8.common.constants import SCREEN_HEIGHT, SCREEN_WIDTH

# @intent:responsibility 行優先のブール値ピクセル配列を保持します。
class Framebuffer:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self._pixels: List[bool] = [False] * (width * height)

    def clear(self) -> None:
        self._pixels = [False] * (self.width * self.height)

    def get_pixel(self, x: int, y: int) -> bool:
        return self._pixels[y * self.width + x]

    # @intent:responsibility 座標を画面サイズでラップし、ピクセルを反転します。
    # @intent:return 点灯していたピクセルが消灯した場合（衝突）True。
    def xor_pixel(self, x: int, y: int) -> bool:
        index = (y % self.height) * self.width + (x % self.width)
        was_set = self._pixels[index]
        self._pixels[index] = not was_set
        return was_set

    def rows(self) -> List[List[bool]]:
        return [self._pixels[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def is_blank(self) -> bool:
        return not any(self._pixels)

    # 点灯ピクセル数（テストと表示の最適化用）
    def lit_count(self) -> int:
        return sum(self._pixels)
