"""
ロード/ストア命令（レジスタ、アドレスレジスタ、タイマー、メモリ転送）の実装。
"""
import logging

from retro_chip8.common.constants import FONT_ADDRESS, GLYPH_SIZE, INSTRUCTION_LENGTH
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.state import Chip8State
from .base import Hardware

logger = logging.getLogger(__name__)

# --- LD Vx, byte (6XNN) ---
def execute_ld_vx_nn(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = op.nn

# --- LD I, addr (ANNN) ---
def execute_ld_i(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.i = op.nnn

# --- LD Vx, DT (FX07) ---
def execute_ld_vx_dt(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = state.delay_timer

# --- LD Vx, K (FX0A) ---
# @intent:responsibility キー入力待ち。押下中のキーが無ければPCを巻き戻し、次の step() で同じ命令を再実行する。
# @intent:rationale エンジン内部でブロックせず、呼び出し側のループがキーパッドを更新できるようにする。
def execute_ld_vx_k(state: Chip8State, hw: Hardware, op: Operation) -> None:
    key = hw.keypad.first_pressed()
    if key is None:
        state.pc = (state.pc - INSTRUCTION_LENGTH) & 0xFFFF
        return
    state.v[op.x] = key

# --- LD DT, Vx (FX15) ---
def execute_ld_dt_vx(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.delay_timer = state.v[op.x]
    if state.delay_timer:
        logger.debug("Delay timer started with %d.", state.delay_timer)

# --- LD ST, Vx (FX18) ---
def execute_ld_st_vx(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.sound_timer = state.v[op.x]
    if state.sound_timer:
        logger.debug("Sound timer started with %d.", state.sound_timer)

# --- ADD I, Vx (FX1E) ---
# @intent:responsibility I に VX を加算します。フラグは変更せず、16bitでラップする。
def execute_add_i_vx(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF

# --- LD F, Vx (FX29) ---
def execute_ld_f_vx(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.i = FONT_ADDRESS + state.v[op.x] * GLYPH_SIZE

# --- LD B, Vx (FX33) ---
# @intent:responsibility VX を10進の百/十/一の位に分解して I, I+1, I+2 へ格納します。
def execute_ld_b_vx(state: Chip8State, hw: Hardware, op: Operation) -> None:
    value = state.v[op.x]
    hw.memory.check_range(state.i, 3)
    hw.memory.write_byte(state.i, value // 100)
    hw.memory.write_byte(state.i + 1, (value % 100) // 10)
    hw.memory.write_byte(state.i + 2, value % 10)

# --- LD [I], Vx (FX55) ---
# @intent:responsibility V0..VX を I 以降へ書き込み、I を X+1 進めます。
def execute_ld_mem_vx(state: Chip8State, hw: Hardware, op: Operation) -> None:
    hw.memory.check_range(state.i, op.x + 1)
    for offset in range(op.x + 1):
        hw.memory.write_byte(state.i + offset, state.v[offset])
    state.i = (state.i + op.x + 1) & 0xFFFF

# --- LD Vx, [I] (FX65) ---
def execute_ld_vx_mem(state: Chip8State, hw: Hardware, op: Operation) -> None:
    hw.memory.check_range(state.i, op.x + 1)
    for offset in range(op.x + 1):
        state.v[offset] = hw.memory.read_byte(state.i + offset)
    state.i = (state.i + op.x + 1) & 0xFFFF
