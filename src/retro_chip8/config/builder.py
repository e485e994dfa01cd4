import random
from typing import Tuple

from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.core.runner import Runner
from retro_chip8.devices.framebuffer import Framebuffer
from retro_chip8.devices.keypad import Keypad
from retro_chip8.transport.memory import ProgramStore
from .models import EmulatorConfig

# @intent:responsibility 設定（Config）に基づいて、メモリ、周辺機器、CPU、実行ループを生成・接続します。
class SystemBuilder:
    def build_system(self, config: EmulatorConfig) -> Tuple[Chip8Cpu, Runner]:
        cpu = Chip8Cpu(
            memory=ProgramStore(),
            framebuffer=Framebuffer(),
            keypad=Keypad(),
            rng=random.Random(config.cpu.seed),
            stack_depth=config.cpu.stack_depth,
        )
        runner = Runner(cpu, clock_hz=config.cpu.clock_hz, timer_hz=config.cpu.timer_hz)
        return cpu, runner
