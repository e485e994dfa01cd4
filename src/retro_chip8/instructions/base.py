"""
CHIP-8 命令実装用の共通ユーティリティ。
"""
import random
from dataclasses import dataclass

from retro_chip8.common.constants import DEFAULT_STACK_DEPTH, INSTRUCTION_LENGTH
from retro_chip8.common.errors import StackOverflow, StackUnderflow
from retro_chip8.core.state import Chip8State
from retro_chip8.devices.framebuffer import Framebuffer
from retro_chip8.devices.keypad import Keypad
from retro_chip8.transport.memory import ProgramStore

# @intent:responsibility 命令実行時に参照される CPU 外部の資源をまとめます。
@dataclass
class Hardware:
    memory: ProgramStore
    framebuffer: Framebuffer
    keypad: Keypad
    rng: random.Random
    stack_depth: int = DEFAULT_STACK_DEPTH

# @intent:utility_function 次の命令をスキップします（通常の+2に加えてさらに+2）。
def skip_next(state: Chip8State) -> None:
    state.pc = (state.pc + INSTRUCTION_LENGTH) & 0xFFFF

# @intent:utility_function 現在のPCをコールスタックへ積みます。
def push_return_address(state: Chip8State, hw: Hardware) -> None:
    if len(state.stack) >= hw.stack_depth:
        raise StackOverflow(hw.stack_depth)
    state.stack.append(state.pc)

# @intent:utility_function コールスタックから戻りアドレスを取り出します。
def pop_return_address(state: Chip8State) -> int:
    if not state.stack:
        raise StackUnderflow()
    return state.stack.pop()
