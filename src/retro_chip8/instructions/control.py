"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。

step() は実行前に PC を +2 済みです。スキップ命令はさらに +2 します。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.state import Chip8State
from .base import Hardware, pop_return_address, push_return_address, skip_next

# --- HALT (0000) ---
# @intent:responsibility プログラム終端の番兵。状態は変更せず、step() が HALT を報告する。
def execute_halt(state: Chip8State, hw: Hardware, op: Operation) -> None:
    pass

# --- RET (00EE) ---
def execute_ret(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.pc = pop_return_address(state)

# --- JP addr (1NNN) ---
def execute_jp(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.pc = op.nnn

# --- CALL addr (2NNN) ---
# @intent:responsibility 戻りアドレス（+2済みのPC）を積んでから NNN へジャンプします。
def execute_call(state: Chip8State, hw: Hardware, op: Operation) -> None:
    push_return_address(state, hw)
    state.pc = op.nnn

# --- SE Vx, byte (3XNN) ---
def execute_se_vx_nn(state: Chip8State, hw: Hardware, op: Operation) -> None:
    if state.v[op.x] == op.nn:
        skip_next(state)

# --- SNE Vx, byte (4XNN) ---
def execute_sne_vx_nn(state: Chip8State, hw: Hardware, op: Operation) -> None:
    if state.v[op.x] != op.nn:
        skip_next(state)

# --- SE Vx, Vy (5XY0) ---
def execute_se_vx_vy(state: Chip8State, hw: Hardware, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)

# --- SNE Vx, Vy (9XY0) ---
def execute_sne_vx_vy(state: Chip8State, hw: Hardware, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)

# --- JP V0, addr (BNNN) ---
# @intent:responsibility NNN + V0 へジャンプします。結果が 0x0FFF を超えた場合は次のフェッチで PcOutOfBounds となる。
def execute_jp_v0(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.pc = (op.nnn + state.v[0]) & 0xFFFF

# --- SKP Vx (EX9E) ---
def execute_skp(state: Chip8State, hw: Hardware, op: Operation) -> None:
    if hw.keypad.is_pressed(state.v[op.x]):
        skip_next(state)

# --- SKNP Vx (EXA1) ---
def execute_sknp(state: Chip8State, hw: Hardware, op: Operation) -> None:
    if not hw.keypad.is_pressed(state.v[op.x]):
        skip_next(state)
