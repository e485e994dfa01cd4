"""
共通の型定義を提供するモジュール。
CPU、実行ループ、UIなど複数のレイヤーで共通して使用されます。
"""
from enum import Enum
from typing import List, NamedTuple

# @intent:data_structure 単一のレジスタの表示定義。UIが動的にフィールドを生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)

# @intent:data_structure レジスタグループの表示定義。関連するレジスタ（例: "General", "Timers"）をまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]

# @intent:responsibility 1回の step() の正常終了の種類を表します。
class StepOutcome(Enum):
    CONTINUE = "CONTINUE"
    HALT = "HALT"  # 0x0000 命令（プログラム終端の番兵）
