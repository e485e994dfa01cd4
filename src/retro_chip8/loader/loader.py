# retro_chip8/loader/loader.py
"""
ROMローダーモジュール。
ヘッダやメタデータを持たない生のバイナリ（ROMイメージ）を読み込みます。
"""
import logging

from retro_chip8.common.constants import MAX_PROGRAM_SIZE
from retro_chip8.common.errors import RomLoadError
from retro_chip8.core.cpu import Chip8Cpu

logger = logging.getLogger(__name__)

class RomLoader:
    """
    ROMファイルを読み込み、CPU のプログラム領域へロードするローダー。
    """
    # @intent:responsibility ファイル全体をバイト列として読み込みます。
    # @intent:post-condition 読み込めない、または大きすぎる場合は RomLoadError。
    def read_file(self, file_path: str) -> bytes:
        try:
            with open(file_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise RomLoadError(f"Could not read ROM file '{file_path}': {e.strerror or e}") from e

        if len(data) > MAX_PROGRAM_SIZE:
            raise RomLoadError(
                f"ROM file '{file_path}' is {len(data)} bytes; at most {MAX_PROGRAM_SIZE} bytes fit in program space."
            )
        return data

    # @intent:responsibility ROMファイルを読み込み、CPUへロードします。
    def load_file(self, file_path: str, cpu: Chip8Cpu) -> int:
        """
        ROMをロードし、ロードしたバイト数を返します。
        """
        data = self.read_file(file_path)
        cpu.load(data)
        logger.info("Loaded ROM '%s' with size: %d bytes.", file_path, len(data))
        return len(data)
