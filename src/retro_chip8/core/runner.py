# retro_chip8/core/runner.py
"""
実行ループモジュール。

CPU を一定のペースで駆動し、フレームごとにタイマーを減算し、
停止条件（HALT 命令、または致命的エラー）を検出する責務を負います。
"""
import logging
from enum import Enum
from typing import Optional

from retro_chip8.common.errors import ChipError
from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.core.snapshot import Snapshot

logger = logging.getLogger(__name__)

# @intent:responsibility 実行ループの状態を定義します。
class RunState(Enum):
    RUNNING = "RUNNING"
    HALTED = "HALTED"   # HALT 命令による正常終了
    FAULTED = "FAULTED" # ChipError による異常終了

# @intent:responsibility CPU の実行制御（命令実行とタイマー減算のペース配分）を行います。
class Runner:
    """
    1フレームあたり cycles_per_frame 命令を実行し、その後タイマーを1回減算します。
    UI は timer_hz の周期で run_frame() を呼び出します。
    """
    def __init__(self, cpu: Chip8Cpu, clock_hz: int = 500, timer_hz: int = 60):
        if clock_hz <= 0 or timer_hz <= 0:
            raise ValueError("clock_hz and timer_hz must be positive.")
        self._cpu = cpu
        self.cycles_per_frame = max(1, clock_hz // timer_hz)
        self._run_state = RunState.RUNNING
        self._last_error: Optional[ChipError] = None
        self._last_snapshot: Optional[Snapshot] = None
        self._frame_count = 0

    @property
    def cpu(self) -> Chip8Cpu:
        return self._cpu

    @property
    def run_state(self) -> RunState:
        return self._run_state

    @property
    def last_error(self) -> Optional[ChipError]:
        return self._last_error

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def get_last_snapshot(self) -> Optional[Snapshot]:
        return self._last_snapshot

    # @intent:responsibility 1命令を実行し、停止条件を反映します。
    def step(self) -> RunState:
        if self._run_state is not RunState.RUNNING:
            return self._run_state
        try:
            snapshot = self._cpu.step()
        except ChipError as e:
            self._fault(e)
            return self._run_state
        self._last_snapshot = snapshot
        if snapshot.halted:
            self._run_state = RunState.HALTED
            logger.info(
                "Program halted at %#06x after %d instructions.", snapshot.metadata.address, self._cpu.cycle_count
            )
        return self._run_state

    # @intent:responsibility 1フレーム分の命令を実行し、タイマーを1回減算します。
    def run_frame(self) -> RunState:
        for _ in range(self.cycles_per_frame):
            if self.step() is not RunState.RUNNING:
                break
        if self._run_state is RunState.RUNNING:
            self._cpu.tick_timers()
        self._frame_count += 1
        return self._run_state

    # @intent:responsibility 停止するか max_frames に達するまでフレームを同期的に実行します（ヘッドレス実行用）。
    def run(self, max_frames: Optional[int] = None) -> RunState:
        frames = 0
        while self._run_state is RunState.RUNNING:
            if max_frames is not None and frames >= max_frames:
                break
            self.run_frame()
            frames += 1
        return self._run_state

    # @intent:responsibility CPUをリセットし、実行状態を RUNNING に戻します。プログラムの再ロードは呼び出し元が行う。
    def reset(self) -> None:
        self._cpu.reset()
        self._run_state = RunState.RUNNING
        self._last_error = None
        self._last_snapshot = None
        self._frame_count = 0

    def stop(self) -> None:
        if self._run_state is RunState.RUNNING:
            self._run_state = RunState.HALTED

    # @intent:responsibility 致命的エラーを記録し、直近の命令トレースと共にログ出力します。
    def _fault(self, error: ChipError) -> None:
        self._run_state = RunState.FAULTED
        self._last_error = error
        trace = " ".join(f"{word:04X}" for word in self._cpu.get_trace())
        logger.error("%s Last instructions: %s", error, trace or "(none)")
