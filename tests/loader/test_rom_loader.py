# tests/loader/test_rom_loader.py
"""
retro_chip8.loader.loader モジュールの単体テスト。
"""
import pytest

from retro_chip8.common.errors import RomLoadError
from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.loader.loader import RomLoader


def test_load_file(tmp_path):
    rom = tmp_path / "test.ch8"
    rom.write_bytes(bytes([0x60, 0x05, 0x70, 0x03]))
    cpu = Chip8Cpu()

    size = RomLoader().load_file(str(rom), cpu)

    assert size == 4
    assert cpu.memory.peek(0x200) == 0x60
    assert cpu.memory.peek(0x203) == 0x03
    assert cpu.get_state().pc == 0x200


def test_empty_file(tmp_path):
    rom = tmp_path / "empty.ch8"
    rom.write_bytes(b"")
    assert RomLoader().load_file(str(rom), Chip8Cpu()) == 0


def test_missing_file(tmp_path):
    with pytest.raises(RomLoadError, match="Could not read ROM file"):
        RomLoader().read_file(str(tmp_path / "missing.ch8"))


# @intent:test_case_oversized プログラム領域に収まらないROMはメモリに触れずに失敗することを検証します。
def test_oversized_file(tmp_path):
    rom = tmp_path / "big.ch8"
    rom.write_bytes(b"\xAA" * 3585)
    cpu = Chip8Cpu()
    with pytest.raises(RomLoadError):
        RomLoader().load_file(str(rom), cpu)
    assert cpu.memory.peek(0x200) == 0x00


def test_rom_load_error_is_value_error(tmp_path):
    with pytest.raises(ValueError):
        RomLoader().read_file(str(tmp_path))
