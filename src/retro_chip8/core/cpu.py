# retro_chip8/core/cpu.py
"""
Core Layer (CPU Engine)

このモジュールは、CHIP-8 CPU の状態管理と命令サイクル（フェッチ→デコード→実行）を提供します。
具体的な命令の振る舞いは instructions パッケージに移譲されます。
"""
import logging
import random
from collections import deque
from typing import Deque, Dict, List, Optional

from retro_chip8.common.constants import DEFAULT_STACK_DEPTH, PROGRAM_ADDRESS, REGISTER_COUNT, TRACE_LENGTH
from retro_chip8.common.errors import PcOutOfBounds
from retro_chip8.common.opcodes import Opcode
from retro_chip8.common.types import RegisterInfo, RegisterLayoutInfo, StepOutcome
from retro_chip8.core.snapshot import Metadata, Operation, Snapshot
from retro_chip8.core.state import Chip8State
from retro_chip8.devices.framebuffer import Framebuffer
from retro_chip8.devices.keypad import Keypad
from retro_chip8.instructions import Hardware, decode_instruction, execute_instruction
from retro_chip8.transport.memory import ProgramStore

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8 CPU のエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Chip8Cpu:
    """
    CHIP-8 CPU をエミュレートするクラス。
    レジスタ、PC、コールスタック、タイマー、フレームバッファ、キーパッドを保持し、
    step() 1回につき正確に1命令を実行します。
    """
    # @intent:responsibility CPUの状態と外部資源への参照を初期化します。
    def __init__(
        self,
        memory: Optional[ProgramStore] = None,
        framebuffer: Optional[Framebuffer] = None,
        keypad: Optional[Keypad] = None,
        rng: Optional[random.Random] = None,
        stack_depth: int = DEFAULT_STACK_DEPTH,
    ):
        if stack_depth <= 0:
            raise ValueError("Stack depth must be a positive integer.")
        self._hw = Hardware(
            memory=memory if memory is not None else ProgramStore(),
            framebuffer=framebuffer if framebuffer is not None else Framebuffer(),
            keypad=keypad if keypad is not None else Keypad(),
            rng=rng if rng is not None else random.Random(),
            stack_depth=stack_depth,
        )
        self._state: Chip8State = self._create_initial_state()
        self._cycle_count: int = 0
        self._trace: Deque[int] = deque(maxlen=TRACE_LENGTH)

    @property
    def memory(self) -> ProgramStore:
        return self._hw.memory

    @property
    def framebuffer(self) -> Framebuffer:
        return self._hw.framebuffer

    @property
    def keypad(self) -> Keypad:
        return self._hw.keypad

    def _create_initial_state(self) -> Chip8State:
        return Chip8State(pc=PROGRAM_ADDRESS)

    # @intent:responsibility CPUとメモリを初期状態に戻します。ロード済みのプログラムも消去されます。
    def reset(self) -> None:
        self._hw.memory.initialize()
        self._hw.framebuffer.clear()
        self._hw.keypad.release_all()
        self._state = self._create_initial_state()
        self._cycle_count = 0
        self._trace.clear()

    # @intent:responsibility ROMイメージをプログラム領域へロードし、PCをエントリアドレスへ設定します。
    # @intent:post-condition 失敗時（RomLoadError）はメモリもPCも変更されない。
    def load(self, program: bytes) -> None:
        self._hw.memory.load(program)
        self._state.pc = PROGRAM_ADDRESS

    # @intent:responsibility 現在のCPUの状態を返します。
    def get_state(self) -> Chip8State:
        return self._state

    # @intent:responsibility 直近にフェッチした命令語（古い順）を返します。デバッグ用。
    def get_trace(self) -> List[int]:
        return list(self._trace)

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility 2バイトの命令語をフェッチし、トレースに記録します。
    def _fetch(self) -> int:
        instruction = self._hw.memory.read_word(self._state.pc)
        self._trace.append(instruction)
        return instruction

    def _decode(self, instruction: int, address: int) -> Operation:
        return decode_instruction(instruction, address)

    # @intent:responsibility 命令実行前にPCを命令長分進めます。スキップ命令はさらに+2する。
    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._hw)

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:flow PC範囲チェック -> フェッチ -> デコード -> PC更新 -> 実行 -> スナップショット生成
    def step(self) -> Snapshot:
        """
        1命令を実行します。
        PCがメモリ外なら PcOutOfBounds、未定義命令なら InstructionNotDefined を送出します。
        いずれも致命的で、回復は呼び出し元の責務です。
        """
        self._hw.memory.get_and_clear_activity_log()
        initial_pc = self._state.pc

        # 命令語の2バイト目までメモリ内にあること
        if not (self._hw.memory.contains(initial_pc) and self._hw.memory.contains(initial_pc + 1)):
            raise PcOutOfBounds(initial_pc)

        instruction = self._fetch()
        operation = self._decode(instruction, initial_pc)
        self._update_pc(operation)
        self._execute(operation)

        return self._create_snapshot(initial_pc, operation)

    # @intent:responsibility スナップショットを生成します。
    def _create_snapshot(self, initial_pc: int, operation: Operation) -> Snapshot:
        activity = self._hw.memory.get_and_clear_activity_log()
        self._cycle_count += 1

        text = operation.mnemonic
        if operation.operands:
            text += " " + ", ".join(operation.operands)

        outcome = StepOutcome.HALT if operation.opcode is Opcode.HALT else StepOutcome.CONTINUE
        return Snapshot(
            state=self._state.copy(),
            operation=operation,
            metadata=Metadata(cycle_count=self._cycle_count, address=initial_pc, text=text),
            outcome=outcome,
            memory_activity=activity,
        )

    # @intent:responsibility 遅延タイマーとサウンドタイマーを0に向けて1つ減らします。
    # @intent:rationale 命令実行とは独立に、実行ループが 60Hz で呼び出す。
    def tick_timers(self) -> None:
        if self._state.delay_timer > 0:
            self._state.delay_timer -= 1
        if self._state.sound_timer > 0:
            self._state.sound_timer -= 1

    def is_sound_active(self) -> bool:
        return self._state.sound_timer > 0

    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        UIがCPUの内部構造を知らなくても値を表示できるようにするために使用される。
        """
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({"I": s.i, "PC": s.pc, "SP": s.sp, "DT": s.delay_timer, "ST": s.sound_timer})
        return registers

    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        """
        レジスタをUI上でどのように配置・グループ化すべきかの定義を返す。
        """
        return [
            RegisterLayoutInfo("General", [RegisterInfo(f"V{index:X}", 8) for index in range(REGISTER_COUNT)]),
            RegisterLayoutInfo("Pointers", [
                RegisterInfo("I", 16), RegisterInfo("PC", 16), RegisterInfo("SP", 8)
            ]),
            RegisterLayoutInfo("Timers", [
                RegisterInfo("DT", 8), RegisterInfo("ST", 8)
            ]),
        ]
