"""
CHIP-8 エンジンの例外階層。

ChipError の派生はいずれも実行にとって致命的であり、エンジン内部で
再試行や命令スキップは行いません。呼び出し元が報告と終了を担当します。
"""


class ChipError(Exception):
    """CPU Engine が送出する致命的エラーの基底クラス。"""


# @intent:responsibility 命令表にないビットパターンをデコードしたことを表します。
class InstructionNotDefined(ChipError):
    def __init__(self, address: int, instruction: int):
        self.address = address
        self.instruction = instruction
        super().__init__(f"Instruction {instruction:#06x} not defined at address {address:#06x}.")


# @intent:responsibility フェッチ時にPCがメモリ外を指していたことを表します。
class PcOutOfBounds(ChipError):
    def __init__(self, pc: int):
        self.pc = pc
        super().__init__(f"PC {pc:#06x} out of memory bounds.")


class StackOverflow(ChipError):
    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"Call stack overflow (depth {depth}).")


class StackUnderflow(ChipError):
    def __init__(self):
        super().__init__("Return with an empty call stack.")


# @intent:responsibility メモリ範囲外へのデータアクセス。既存の IndexError ハンドラでも捕捉できる。
class MemoryAccessError(ChipError, IndexError):
    def __init__(self, address: int, size: int):
        self.address = address
        super().__init__(f"Address {address:#06x} out of bounds for memory of size {size}.")


# @intent:responsibility ROMイメージのロード失敗。CPU実行時のエラーとは区別されます。
class RomLoadError(ValueError):
    pass
