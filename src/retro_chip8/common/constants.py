"""
CHIP-8 のメモリレイアウトと固定データの定義。

いずれも実行中に変更されない定数です。
"""

# @intent:constant アドレス空間とレイアウト。
MEMORY_SIZE = 4096
FONT_ADDRESS = 0x100
PROGRAM_ADDRESS = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_ADDRESS

# @intent:constant レジスタとキーパッド。
REGISTER_COUNT = 16
FLAG_REGISTER = 0xF
KEY_COUNT = 16

# @intent:constant 画面サイズ（ピクセル）。
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

INSTRUCTION_LENGTH = 2
DEFAULT_STACK_DEPTH = 16
TRACE_LENGTH = 14

# 各グリフは5バイト
GLYPH_SIZE = 5

# @intent:constant 16進数字 0-F の標準フォント（80バイト）。
FONT_SET = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
))
