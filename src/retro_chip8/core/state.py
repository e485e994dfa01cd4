# retro_chip8/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CHIP-8 CPU のレジスタ群、コールスタック、タイマーを保持するデータ構造を定義します。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.common.constants import FLAG_REGISTER, PROGRAM_ADDRESS, REGISTER_COUNT

# @intent:responsibility CHIP-8 CPU の全てのレジスタ状態を保持します。
@dataclass
class Chip8State:
    """
    CHIP-8 CPU のレジスタ状態を保持するデータクラス。
    V0-VF は8bit、I とPCは16bitとして扱います。
    """
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)  # V0-VF
    i: int = 0x0000  # Address register
    pc: int = PROGRAM_ADDRESS  # Program Counter
    stack: List[int] = field(default_factory=list)  # 保存されたPC
    delay_timer: int = 0
    sound_timer: int = 0

    # @intent:accessor VF（キャリー/ボロー/衝突フラグ）へのアクセサ。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    # UI表示用。スタックの深さをSPとして見せる
    @property
    def sp(self) -> int:
        return len(self.stack)

    # @intent:responsibility リストを含めた独立コピーを返します（Snapshot用）。
    def copy(self) -> "Chip8State":
        return Chip8State(
            v=list(self.v),
            i=self.i,
            pc=self.pc,
            stack=list(self.stack),
            delay_timer=self.delay_timer,
            sound_timer=self.sound_timer,
        )
