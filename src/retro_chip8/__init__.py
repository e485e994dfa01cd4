"""
retro_chip8 パッケージ。

CHIP-8 仮想マシンのインタプリタ（Program Store と CPU Engine）と、
それを駆動する実行ループおよび PySide6 フロントエンドを提供します。
"""
__version__ = "0.1.0"
