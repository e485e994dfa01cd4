# retro_chip8/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1命令サイクルの実行結果（命令、CPU状態、メモリアクセス）を
記録した不変のデータ構造を定義します。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from retro_chip8.common.types import StepOutcome
from retro_chip8.core.state import Chip8State
from retro_chip8.common.opcodes import Opcode, mnemonic_of
from retro_chip8.transport.memory import MemoryAccess

# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    デコードされた命令（生の命令語、Opcode、表示用オペランド）を記録するデータクラス。
    フィールド x, y, n, nn, nnn は命令語から切り出したオペランドです。
    """
    instruction: int # 生の16bit命令語 例: 0x8124
    opcode: Opcode
    operands: List[str] = field(default_factory=list) # 例: ["V1", "V2"]
    length: int = 2 # 命令のバイト長

    @property
    def opcode_hex(self) -> str:
        return f"{self.instruction:04X}"

    @property
    def mnemonic(self) -> str:
        return mnemonic_of(self.opcode)

    @property
    def x(self) -> int:
        return (self.instruction >> 8) & 0xF

    @property
    def y(self) -> int:
        return (self.instruction >> 4) & 0xF

    @property
    def n(self) -> int:
        return self.instruction & 0xF

    @property
    def nn(self) -> int:
        return self.instruction & 0xFF

    @property
    def nnn(self) -> int:
        return self.instruction & 0x0FFF

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True) # 不変データ構造
class Metadata:
    cycle_count: int # 累計実行命令数
    address: int # 命令のフェッチ元アドレス（PC更新前）
    text: Optional[str] = None # 例: "ADD V1, V2"

# @intent:responsibility ある一時点における CPU の状態と、その直前の命令の結果を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    step() の戻り値。実行後の CPU 状態のコピー、実行した命令、
    その命令が行ったメモリアクセス、および正常終了の種類を保持します。
    """
    state: Chip8State
    operation: Operation
    metadata: Metadata
    outcome: StepOutcome = StepOutcome.CONTINUE
    memory_activity: List[MemoryAccess] = field(default_factory=list)

    @property
    def halted(self) -> bool:
        return self.outcome is StepOutcome.HALT
