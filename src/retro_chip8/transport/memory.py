# retro_chip8/transport/memory.py
"""
Transport Layer (Program Store)

このモジュールは、CHIP-8 の 4096 バイトのアドレス空間を保持し、
境界チェック付きの読み書きと、アクセスの記録を行う責務を負います。
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from retro_chip8.common.constants import FONT_ADDRESS, FONT_SET, MEMORY_SIZE, PROGRAM_ADDRESS
from retro_chip8.common.errors import MemoryAccessError, RomLoadError

# @intent:responsibility メモリアクセスを記録するためのタイプを定義します。
class AccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"

# @intent:responsibility 個々のメモリアクセス操作を記録します。
@dataclass(frozen=True) # 不変データ構造
class MemoryAccess:
    """
    メモリ上で行われた単一のアクセス（読み込みまたは書き込み）を記録するデータクラス。
    """
    address: int
    data: int # 8bit value
    access_type: AccessType
    previous_data: Optional[int] = None # WRITEの場合のみ、書き込み前の値

# @intent:responsibility エミュレートされたアドレス空間を保持し、公開します。
class ProgramStore:
    """
    フォント領域(0x100)とプログラム領域(0x200)を持つ 4096 バイトのメモリ。
    全ての読み書きは境界チェックされ、範囲外はラップせずに失敗します。
    """
    # @intent:responsibility メモリ領域を確保し、フォントをコピーします。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= PROGRAM_ADDRESS:
            raise ValueError(f"Memory size must be an integer larger than {PROGRAM_ADDRESS:#x}.")
        self._size = size
        self._memory = bytearray(size)
        self._access_log: List[MemoryAccess] = []
        self.initialize()

    # @intent:responsibility メモリをゼロクリアし、固定フォントテーブルをフォント領域へコピーします。
    def initialize(self) -> None:
        self._memory = bytearray(self._size)
        self._memory[FONT_ADDRESS:FONT_ADDRESS + len(FONT_SET)] = FONT_SET
        self._access_log = []

    # @intent:responsibility プログラムをプログラム領域(0x200)へコピーします。
    # @intent:pre-condition PROGRAM_ADDRESS + len(program) <= size。違反時は何も書き込まずに RomLoadError。
    def load(self, program: bytes) -> None:
        """
        ROMイメージをそのまま 0x200 以降へコピーします。
        切り詰めやオーバーフローはせず、収まらない場合は明示的に失敗します。
        """
        capacity = self._size - PROGRAM_ADDRESS
        if len(program) > capacity:
            raise RomLoadError(
                f"Program of {len(program)} bytes does not fit in {capacity} bytes of program space."
            )
        self._memory[PROGRAM_ADDRESS:PROGRAM_ADDRESS + len(program)] = program

    def _check_address(self, address: int) -> None:
        if not 0 <= address < self._size:
            raise MemoryAccessError(address, self._size)

    # @intent:responsibility address から size バイトが全てメモリ内にあることを確認します。
    # @intent:rationale 複数バイトを扱う命令が、途中まで書き込んでから失敗しないようにする。
    def check_range(self, address: int, size: int) -> None:
        self._check_address(address)
        if size > 0:
            self._check_address(address + size - 1)

    # @intent:responsibility アクセスをログに記録します。
    def _log_access(self, address: int, data: int, access_type: AccessType, previous: Optional[int] = None) -> None:
        self._access_log.append(MemoryAccess(address, data, access_type, previous))

    # @intent:responsibility 記録されたアクセスログを取得し、クリアします。
    def get_and_clear_activity_log(self) -> List[MemoryAccess]:
        log = self._access_log
        self._access_log = []
        return log

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出します。
    def read_byte(self, address: int) -> int:
        self._check_address(address)
        data = self._memory[address]
        self._log_access(address, data, AccessType.READ)
        return data

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    def write_byte(self, address: int, data: int) -> None:
        self._check_address(address)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        previous = self._memory[address]
        self._memory[address] = data
        self._log_access(address, data, AccessType.WRITE, previous)

    # @intent:utility_function ビッグエンディアンの16bitワードを読み込みます。
    def read_word(self, address: int) -> int:
        return (self.read_byte(address) << 8) | self.read_byte(address + 1)

    # @intent:responsibility ログを記録せずに読み出します（UIなどのインスペクタ用）。
    def peek(self, address: int) -> int:
        self._check_address(address)
        return self._memory[address]

    def get_size(self) -> int:
        return self._size

    # @intent:responsibility アドレスが有効範囲内かを判定します。
    def contains(self, address: int) -> bool:
        return 0 <= address < self._size
