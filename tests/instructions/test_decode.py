# tests/instructions/test_decode.py
"""
retro_chip8.instructions のデコード（2段階ディスパッチ）の単体テスト。
"""
import pytest

from retro_chip8.common.errors import InstructionNotDefined
from retro_chip8.common.opcodes import Opcode
from retro_chip8.instructions import decode_instruction, lookup_opcode
from retro_chip8.instructions.maps import EXECUTE_MAP

# @intent:test_suite 命令語から Opcode への解決と、未定義パターンのエラーを検証します。

@pytest.mark.parametrize("instruction, opcode", [
    (0x0000, Opcode.HALT),
    (0x00E0, Opcode.CLS),
    (0x00EE, Opcode.RET),
    (0x1ABC, Opcode.JP),
    (0x2ABC, Opcode.CALL),
    (0x3A12, Opcode.SE_VX_NN),
    (0x4A12, Opcode.SNE_VX_NN),
    (0x5AB0, Opcode.SE_VX_VY),
    (0x6A12, Opcode.LD_VX_NN),
    (0x7A12, Opcode.ADD_VX_NN),
    (0x8AB0, Opcode.LD_VX_VY),
    (0x8AB1, Opcode.OR),
    (0x8AB2, Opcode.AND),
    (0x8AB3, Opcode.XOR),
    (0x8AB4, Opcode.ADD_VX_VY),
    (0x8AB5, Opcode.SUB),
    (0x8AB6, Opcode.SHR),
    (0x8AB7, Opcode.SUBN),
    (0x8ABE, Opcode.SHL),
    (0x9AB0, Opcode.SNE_VX_VY),
    (0xA123, Opcode.LD_I),
    (0xB123, Opcode.JP_V0),
    (0xCA12, Opcode.RND),
    (0xDAB5, Opcode.DRW),
    (0xEA9E, Opcode.SKP),
    (0xEAA1, Opcode.SKNP),
    (0xFA07, Opcode.LD_VX_DT),
    (0xFA0A, Opcode.LD_VX_K),
    (0xFA15, Opcode.LD_DT_VX),
    (0xFA18, Opcode.LD_ST_VX),
    (0xFA1E, Opcode.ADD_I_VX),
    (0xFA29, Opcode.LD_F_VX),
    (0xFA33, Opcode.LD_B_VX),
    (0xFA55, Opcode.LD_MEM_VX),
    (0xFA65, Opcode.LD_VX_MEM),
])
def test_decode_known_instructions(instruction, opcode):
    assert lookup_opcode(instruction) is opcode
    operation = decode_instruction(instruction, 0x200)
    assert operation.opcode is opcode
    assert operation.instruction == instruction


# @intent:test_case_undefined グループ 0/5/8/9/E/F の未定義サブオペコードが黙って無視されないことを検証します。
@pytest.mark.parametrize("instruction", [
    0x0001, 0x00E1, 0x00EF, 0x0123, 0x0FFF,
    0x5AB1, 0x5ABF,
    0x8AB8, 0x8AB9, 0x8ABA, 0x8ABD, 0x8ABF,
    0x9AB1, 0x9ABE,
    0xEA00, 0xEA9F, 0xEAA0, 0xEAFF,
    0xFA00, 0xFA08, 0xFA16, 0xFA30, 0xFA75, 0xFAFF,
])
def test_decode_undefined_instructions(instruction):
    assert lookup_opcode(instruction) is None
    with pytest.raises(InstructionNotDefined) as excinfo:
        decode_instruction(instruction, 0x2F0)
    assert excinfo.value.address == 0x2F0
    assert excinfo.value.instruction == instruction


def test_every_opcode_has_executor():
    assert set(EXECUTE_MAP) == set(Opcode)


def test_operand_fields_and_text():
    operation = decode_instruction(0xD12F, 0x200)
    assert (operation.x, operation.y, operation.n) == (0x1, 0x2, 0xF)
    assert operation.nn == 0x2F
    assert operation.nnn == 0x12F
    assert operation.mnemonic == "DRW"
    assert operation.operands == ["V1", "V2", "#F"]
    assert operation.opcode_hex == "D12F"


def test_operand_text_for_address():
    operation = decode_instruction(0xA2F0, 0x200)
    assert operation.mnemonic == "LD"
    assert operation.operands == ["I", "$2F0"]
