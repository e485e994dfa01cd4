# tests/instructions/test_instructions_display.py
"""
画面命令（00E0, DXYN）の単体テスト。
"""
import pytest

from retro_chip8.common.errors import MemoryAccessError
from retro_chip8.core.cpu import Chip8Cpu


def program(*words):
    return b"".join(word.to_bytes(2, "big") for word in words)


@pytest.fixture
def cpu():
    return Chip8Cpu()


# @intent:test_case_glyph 文字 0 のグリフ描画が 14 ピクセルを点灯させることを検証します。
def test_draw_font_glyph(cpu):
    # LD V0,#00 ; LD F,V0 ; DRW V0,V0,5
    cpu.load(program(0x6000, 0xF029, 0xD005))
    for _ in range(3):
        cpu.step()
    assert cpu.framebuffer.lit_count() == 14
    assert cpu.get_state().vf == 0
    # 0xF0 の最上段
    assert [cpu.framebuffer.get_pixel(x, 0) for x in range(8)] == [True] * 4 + [False] * 4


# @intent:test_case_collision 同じスプライトを2回描くと画面が消え、VF=1 になることを検証します。
def test_draw_twice_erases_and_sets_flag(cpu):
    cpu.load(program(0x6000, 0xF029, 0xD005, 0xD005))
    for _ in range(4):
        cpu.step()
    assert cpu.framebuffer.is_blank()
    assert cpu.get_state().vf == 1


def test_flag_resets_without_collision(cpu):
    cpu.get_state().vf = 1
    cpu.load(program(0x6000, 0xF029, 0xD005))
    for _ in range(3):
        cpu.step()
    assert cpu.get_state().vf == 0


# @intent:test_case_wrap 画面端をはみ出したスプライトが反対側に回り込むことを検証します。
def test_draw_wraps_both_axes(cpu):
    cpu.memory.write_byte(0x300, 0xFF)
    cpu.memory.write_byte(0x301, 0xFF)
    # LD V0,#3C(60) ; LD V1,#1F(31) ; LD I,#300 ; DRW V0,V1,2
    cpu.load(program(0x603C, 0x611F, 0xA300, 0xD012))
    for _ in range(4):
        cpu.step()
    fb = cpu.framebuffer
    assert fb.lit_count() == 16
    for x in (60, 61, 62, 63, 0, 1, 2, 3):
        assert fb.get_pixel(x, 31)
        assert fb.get_pixel(x, 0)


def test_draw_zero_rows(cpu):
    cpu.load(program(0xD000))
    cpu.step()
    assert cpu.framebuffer.is_blank()
    assert cpu.get_state().vf == 0


def test_clear_screen(cpu):
    cpu.load(program(0x6000, 0xF029, 0xD005, 0x00E0))
    for _ in range(4):
        cpu.step()
    assert cpu.framebuffer.is_blank()


# @intent:test_case_partial_sprite メモリ末尾をはみ出すスプライトは何も描かず、VF も変更しないことを検証します。
def test_draw_past_memory_leaves_screen_untouched(cpu):
    cpu.memory.write_byte(0xFFF, 0xFF)
    cpu.get_state().vf = 1
    # LD I,#FFF ; DRW V0,V0,2
    cpu.load(program(0xAFFF, 0xD002))
    cpu.step()
    with pytest.raises(MemoryAccessError):
        cpu.step()
    assert cpu.framebuffer.is_blank()
    assert cpu.get_state().vf == 1


def test_draw_last_byte_of_memory(cpu):
    cpu.memory.write_byte(0xFFF, 0xFF)
    cpu.load(program(0xAFFF, 0xD001))
    cpu.step()
    cpu.step()
    assert cpu.framebuffer.lit_count() == 8


# @intent:test_case_vf_operand 座標に VF を使った場合、VF のリセット前の値で描画されることを検証します。
@pytest.mark.parametrize("draw, x, y", [
    (0xDF05, 5, 0),  # X = F
    (0xD0F5, 0, 5),  # Y = F
])
def test_draw_with_vf_coordinate(cpu, draw, x, y):
    # LD VF,#05 ; LD V0,#00 ; LD F,V0 ; DRW
    cpu.load(program(0x6F05, 0x6000, 0xF029, draw))
    for _ in range(4):
        cpu.step()
    assert cpu.framebuffer.lit_count() == 14
    # グリフ 0 の最上段 (0xF0)
    assert [cpu.framebuffer.get_pixel(x + col, y) for col in range(5)] == [True] * 4 + [False]
    assert cpu.get_state().vf == 0
