# tests/devices/test_devices.py
"""
retro_chip8.devices（フレームバッファ、キーパッド）の単体テスト。
"""
import pytest

from retro_chip8.devices.framebuffer import Framebuffer
from retro_chip8.devices.keypad import Keypad


class TestFramebuffer:
    def test_initially_blank(self):
        fb = Framebuffer()
        assert fb.width == 64
        assert fb.height == 32
        assert fb.is_blank()
        assert len(fb.rows()) == 32
        assert all(len(row) == 64 for row in fb.rows())

    # @intent:test_case_xor 反転と衝突（点灯→消灯）の報告を検証します。
    def test_xor_pixel_reports_collision(self):
        fb = Framebuffer()
        assert fb.xor_pixel(3, 4) is False
        assert fb.get_pixel(3, 4) is True
        assert fb.xor_pixel(3, 4) is True
        assert fb.get_pixel(3, 4) is False

    # @intent:test_case_wrap 座標が両軸でラップすることを検証します。
    def test_xor_pixel_wraps(self):
        fb = Framebuffer()
        fb.xor_pixel(64 + 1, 32 + 2)
        assert fb.get_pixel(1, 2) is True
        assert fb.lit_count() == 1

    def test_clear(self):
        fb = Framebuffer()
        fb.xor_pixel(0, 0)
        fb.xor_pixel(63, 31)
        fb.clear()
        assert fb.is_blank()


class TestKeypad:
    def test_press_release(self):
        keypad = Keypad()
        keypad.press(0xA)
        assert keypad.is_pressed(0xA)
        keypad.release(0xA)
        assert not keypad.is_pressed(0xA)

    def test_first_pressed_returns_lowest_key(self):
        keypad = Keypad()
        assert keypad.first_pressed() is None
        keypad.press(0xC)
        keypad.press(0x3)
        assert keypad.first_pressed() == 0x3

    def test_invalid_key(self):
        keypad = Keypad()
        with pytest.raises(ValueError):
            keypad.press(0x10)

    # レジスタ値が0x0Fを超える場合は押されていない扱い
    def test_is_pressed_out_of_range(self):
        keypad = Keypad()
        assert keypad.is_pressed(0x42) is False

    def test_release_all(self):
        keypad = Keypad()
        for key in range(16):
            keypad.press(key)
        keypad.release_all()
        assert keypad.first_pressed() is None
