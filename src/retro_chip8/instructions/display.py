"""
画面命令（CLS, DRW）の実装。
"""
import logging

from retro_chip8.core.snapshot import Operation
from retro_chip8.core.state import Chip8State
from .base import Hardware

logger = logging.getLogger(__name__)

SPRITE_WIDTH = 8

# --- CLS (00E0) ---
def execute_cls(state: Chip8State, hw: Hardware, op: Operation) -> None:
    hw.framebuffer.clear()
    logger.debug("Screen cleared.")

# --- DRW Vx, Vy, nibble (DXYN) ---
# @intent:responsibility I から N 行のスプライトを (VX, VY) に XOR 描画します。
# @intent:post-condition 点灯→消灯に変化したピクセルが1つでもあれば VF=1、なければ VF=0。
# @intent:post-condition スプライトがメモリ外にかかる場合、VF も画面も変更せずに MemoryAccessError。
def execute_drw(state: Chip8State, hw: Hardware, op: Operation) -> None:
    origin_x, origin_y = state.v[op.x], state.v[op.y]
    sprite_rows = [hw.memory.read_byte(state.i + row) for row in range(op.n)]
    state.vf = 0
    collision = False
    for row, sprite in enumerate(sprite_rows):
        for col in range(SPRITE_WIDTH):
            if sprite & (0x80 >> col):
                # 画面端で両軸ともラップする
                if hw.framebuffer.xor_pixel(origin_x + col, origin_y + row):
                    collision = True
    if collision:
        state.vf = 1
