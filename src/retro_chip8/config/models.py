from dataclasses import dataclass, field
from typing import Dict, Optional

from retro_chip8.common.constants import DEFAULT_STACK_DEPTH

# @intent:constant ホストのキー名 → CHIP-8 キー。QWERTY 左上 4x4 をキーパッド配置に対応させる。
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}

@dataclass
class CpuConfig:
    clock_hz: int = 500  # 1秒あたりの命令数
    timer_hz: int = 60
    stack_depth: int = DEFAULT_STACK_DEPTH
    seed: Optional[int] = None  # CXNN 用乱数のシード

@dataclass
class DisplayConfig:
    scale: int = 10
    foreground: str = "#E0E0E0"
    background: str = "#101010"

@dataclass
class SoundConfig:
    enabled: bool = True
    frequency: int = 440
    volume: float = 0.25

@dataclass
class EmulatorConfig:
    cpu: CpuConfig = field(default_factory=CpuConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    sound: SoundConfig = field(default_factory=SoundConfig)
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
