"""
算術論理演算命令の実装。

VF はフラグとしてもデータとしても使われるため、フラグは必ず
演算前のオペランド値から計算し、VX の書き込み後に VF へ書き込みます。
（X が F の場合はフラグが残る）
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.state import Chip8State
from .base import Hardware

# --- ADD Vx, byte (7XNN) ---
# @intent:responsibility 即値を加算します。8XY4 と異なりVFは変更しない。
def execute_add_vx_nn(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- LD Vx, Vy (8XY0) ---
def execute_ld_vx_vy(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- OR Vx, Vy (8XY1) ---
def execute_or(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] | state.v[op.y]

# --- AND Vx, Vy (8XY2) ---
def execute_and(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] & state.v[op.y]

# --- XOR Vx, Vy (8XY3) ---
def execute_xor(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] ^ state.v[op.y]

# --- ADD Vx, Vy (8XY4) ---
# @intent:responsibility 加算結果を VX に格納し、255を超えた場合 VF=1 とします。
def execute_add_vx_vy(state: Chip8State, hw: Hardware, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    res = vx + vy
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# --- SUB Vx, Vy (8XY5) ---
# @intent:responsibility VX - VY。ボローが無い（VX >= VY）場合 VF=1。
def execute_sub(state: Chip8State, hw: Hardware, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    state.v[op.x] = (vx - vy) & 0xFF
    state.vf = 1 if vx >= vy else 0

# --- SHR Vx, Vy (8XY6) ---
# @intent:responsibility VY を1ビット右シフトして VX へ格納し、押し出されたビットを VF へ。
def execute_shr(state: Chip8State, hw: Hardware, op: Operation) -> None:
    vy = state.v[op.y]
    state.v[op.x] = vy >> 1
    state.vf = vy & 0x01

# --- SUBN Vx, Vy (8XY7) ---
# @intent:responsibility VY - VX。ボローが無い（VY >= VX）場合 VF=1。
def execute_subn(state: Chip8State, hw: Hardware, op: Operation) -> None:
    vx, vy = state.v[op.x], state.v[op.y]
    state.v[op.x] = (vy - vx) & 0xFF
    state.vf = 1 if vy >= vx else 0

# --- SHL Vx, Vy (8XYE) ---
def execute_shl(state: Chip8State, hw: Hardware, op: Operation) -> None:
    vy = state.v[op.y]
    state.v[op.x] = (vy << 1) & 0xFF
    state.vf = (vy >> 7) & 0x01

# --- RND Vx, byte (CXNN) ---
def execute_rnd(state: Chip8State, hw: Hardware, op: Operation) -> None:
    state.v[op.x] = hw.rng.randint(0, 0xFF) & op.nn
