"""
CHIP-8 命令の識別子（Opcode）とニーモニックの定義。

デコーダは命令語をこの列挙型へ変換し、実行テーブルはこの列挙型をキーに引きます。
"""
from enum import Enum
from typing import Dict, List, Tuple

# @intent:responsibility 命令表の各パターンを列挙型として表現します。値は命令語のパターン表記です。
class Opcode(Enum):
    HALT = "0000"
    CLS = "00E0"
    RET = "00EE"
    JP = "1NNN"
    CALL = "2NNN"
    SE_VX_NN = "3XNN"
    SNE_VX_NN = "4XNN"
    SE_VX_VY = "5XY0"
    LD_VX_NN = "6XNN"
    ADD_VX_NN = "7XNN"
    LD_VX_VY = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_VX_VY = "8XY4"
    SUB = "8XY5"
    SHR = "8XY6"
    SUBN = "8XY7"
    SHL = "8XYE"
    SNE_VX_VY = "9XY0"
    LD_I = "ANNN"
    JP_V0 = "BNNN"
    RND = "CXNN"
    DRW = "DXYN"
    SKP = "EX9E"
    SKNP = "EXA1"
    LD_VX_DT = "FX07"
    LD_VX_K = "FX0A"
    LD_DT_VX = "FX15"
    LD_ST_VX = "FX18"
    ADD_I_VX = "FX1E"
    LD_F_VX = "FX29"
    LD_B_VX = "FX33"
    LD_MEM_VX = "FX55"
    LD_VX_MEM = "FX65"

# @intent:map Opcode から (ニーモニック, オペランド書式) へのテーブル。
# 書式中の {x} {y} {n} {nn} {nnn} は命令語から切り出した値で置換される。
OPERATION_FORMATS: Dict[Opcode, Tuple[str, Tuple[str, ...]]] = {
    Opcode.HALT: ("HALT", ()),
    Opcode.CLS: ("CLS", ()),
    Opcode.RET: ("RET", ()),
    Opcode.JP: ("JP", ("${nnn:03X}",)),
    Opcode.CALL: ("CALL", ("${nnn:03X}",)),
    Opcode.SE_VX_NN: ("SE", ("V{x:X}", "#${nn:02X}")),
    Opcode.SNE_VX_NN: ("SNE", ("V{x:X}", "#${nn:02X}")),
    Opcode.SE_VX_VY: ("SE", ("V{x:X}", "V{y:X}")),
    Opcode.LD_VX_NN: ("LD", ("V{x:X}", "#${nn:02X}")),
    Opcode.ADD_VX_NN: ("ADD", ("V{x:X}", "#${nn:02X}")),
    Opcode.LD_VX_VY: ("LD", ("V{x:X}", "V{y:X}")),
    Opcode.OR: ("OR", ("V{x:X}", "V{y:X}")),
    Opcode.AND: ("AND", ("V{x:X}", "V{y:X}")),
    Opcode.XOR: ("XOR", ("V{x:X}", "V{y:X}")),
    Opcode.ADD_VX_VY: ("ADD", ("V{x:X}", "V{y:X}")),
    Opcode.SUB: ("SUB", ("V{x:X}", "V{y:X}")),
    Opcode.SHR: ("SHR", ("V{x:X}", "V{y:X}")),
    Opcode.SUBN: ("SUBN", ("V{x:X}", "V{y:X}")),
    Opcode.SHL: ("SHL", ("V{x:X}", "V{y:X}")),
    Opcode.SNE_VX_VY: ("SNE", ("V{x:X}", "V{y:X}")),
    Opcode.LD_I: ("LD", ("I", "${nnn:03X}")),
    Opcode.JP_V0: ("JP", ("V0", "${nnn:03X}")),
    Opcode.RND: ("RND", ("V{x:X}", "#${nn:02X}")),
    Opcode.DRW: ("DRW", ("V{x:X}", "V{y:X}", "#{n:X}")),
    Opcode.SKP: ("SKP", ("V{x:X}",)),
    Opcode.SKNP: ("SKNP", ("V{x:X}",)),
    Opcode.LD_VX_DT: ("LD", ("V{x:X}", "DT")),
    Opcode.LD_VX_K: ("LD", ("V{x:X}", "K")),
    Opcode.LD_DT_VX: ("LD", ("DT", "V{x:X}")),
    Opcode.LD_ST_VX: ("LD", ("ST", "V{x:X}")),
    Opcode.ADD_I_VX: ("ADD", ("I", "V{x:X}")),
    Opcode.LD_F_VX: ("LD", ("F", "V{x:X}")),
    Opcode.LD_B_VX: ("LD", ("B", "V{x:X}")),
    Opcode.LD_MEM_VX: ("LD", ("[I]", "V{x:X}")),
    Opcode.LD_VX_MEM: ("LD", ("V{x:X}", "[I]")),
}


def mnemonic_of(opcode: Opcode) -> str:
    return OPERATION_FORMATS[opcode][0]


# @intent:utility_function 命令語からオペランドの表示文字列を生成します。
def format_operands(opcode: Opcode, instruction: int) -> List[str]:
    fields = {
        "x": (instruction >> 8) & 0xF,
        "y": (instruction >> 4) & 0xF,
        "n": instruction & 0xF,
        "nn": instruction & 0xFF,
        "nnn": instruction & 0x0FFF,
    }
    return [template.format(**fields) for template in OPERATION_FORMATS[opcode][1]]
