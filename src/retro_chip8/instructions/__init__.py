"""
CHIP-8 命令セット実装パッケージ。
"""
from typing import Optional

from retro_chip8.common.errors import InstructionNotDefined
from retro_chip8.common.opcodes import Opcode, format_operands
from retro_chip8.core.snapshot import Operation
from retro_chip8.core.state import Chip8State
from .base import Hardware
from .maps import EXECUTE_MAP, MULTI_GROUP_MAP, SINGLE_GROUP_MAP

# @intent:responsibility 命令語を Opcode へ解決します。該当しない場合は None。
def lookup_opcode(instruction: int) -> Optional[Opcode]:
    group = (instruction >> 12) & 0xF
    opcode = SINGLE_GROUP_MAP.get(group)
    if opcode is not None:
        return opcode
    mask, table = MULTI_GROUP_MAP[group]
    return table.get(instruction & mask)

# @intent:responsibility CHIP-8 の命令語をデコードし、Operationオブジェクトを返します。
# @intent:post-condition 命令表にない組み合わせは InstructionNotDefined（address はPC更新前の値）。
def decode_instruction(instruction: int, address: int) -> Operation:
    """
    16bit命令語をデコードします。
    """
    opcode = lookup_opcode(instruction)
    if opcode is None:
        raise InstructionNotDefined(address, instruction)
    return Operation(instruction, opcode, format_operands(opcode, instruction))

# @intent:responsibility デコードされた命令を実行します。
def execute_instruction(operation: Operation, state: Chip8State, hw: Hardware) -> None:
    """
    デコードされた CHIP-8 命令を実行し、CPUの状態を変更します。
    """
    EXECUTE_MAP[operation.opcode](state, hw, operation)
