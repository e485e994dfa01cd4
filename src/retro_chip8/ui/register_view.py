# src/retro_chip8/ui/register_view.py
"""
CPUのレジスタとタイマーを表示するウィジェット。
Chip8Cpu のレイアウト情報を利用して動的にUIを構築します。
"""
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QFormLayout, QGridLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from retro_chip8.core.cpu import Chip8Cpu

# 汎用レジスタは4列のグリッドで並べる
GRID_COLUMNS = 4

# @intent:responsibility CPUのレジスタ値を表示するUIウィジェットを提供します。
class RegisterView(QWidget):
    """
    CPUのレジスタ状態を表示するウィジェット。
    Chip8Cpu から取得したレイアウト情報に基づいてフィールドを生成します。
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: #121212; color: #BBBBBB;")

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(5, 5, 5, 5)

        self._font_family = QFontDatabase.systemFont(QFontDatabase.FixedFont).family()
        self._register_labels: Dict[str, QLabel] = {}
        self._register_widths: Dict[str, int] = {}
        self._cpu: Optional[Chip8Cpu] = None

    # @intent:responsibility 表示対象のCPUを設定し、UIレイアウトを構築します。
    def set_cpu(self, cpu: Chip8Cpu) -> None:
        self._cpu = cpu
        self._setup_ui()
        self.update_registers()

    def _make_value_label(self, name: str, width: int) -> QLabel:
        hex_width = (width + 3) // 4 # 16bit -> 4chars, 8bit -> 2chars
        self._register_widths[name] = hex_width
        label = QLabel(f"0x{'0' * hex_width}")
        label.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: #FFD700;")
        label.setAlignment(Qt.AlignRight)
        self._register_labels[name] = label
        return label

    # @intent:responsibility CPUから取得したレイアウト情報に基づいてUIを構築します。
    def _setup_ui(self):
        while self.layout.count():
            item = self.layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._register_labels.clear()
        self._register_widths.clear()

        for group in self._cpu.get_register_layout():
            group_box = QGroupBox(group.group_name)
            group_box.setStyleSheet("""
                QGroupBox {
                    font-weight: bold;
                    border: 1px solid #222;
                    border-radius: 4px;
                    margin-top: 20px;
                    color: #EEE;
                }
                QGroupBox::title {
                    subcontrol-origin: margin;
                    subcontrol-position: top left;
                    padding: 0 5px;
                    left: 10px;
                    color: #00AAAA;
                }
            """)

            if len(group.registers) > GRID_COLUMNS:
                grid = QGridLayout(group_box)
                grid.setContentsMargins(10, 15, 10, 10)
                for index, reg in enumerate(group.registers):
                    row, col = divmod(index, GRID_COLUMNS)
                    grid.addWidget(QLabel(f"{reg.name}:"), row, col * 2)
                    grid.addWidget(self._make_value_label(reg.name, reg.width), row, col * 2 + 1)
            else:
                form = QFormLayout(group_box)
                form.setLabelAlignment(Qt.AlignLeft)
                form.setContentsMargins(10, 15, 10, 10)
                for reg in group.registers:
                    form.addRow(QLabel(f"{reg.name}:"), self._make_value_label(reg.name, reg.width))

            self.layout.addWidget(group_box)

        self.layout.addStretch()

    # @intent:responsibility 現在のCPU状態を取得し、レジスタの表示値を更新します。
    def update_registers(self):
        if not self._cpu:
            return

        for name, value in self._cpu.get_register_map().items():
            if name in self._register_labels:
                width = self._register_widths[name]
                self._register_labels[name].setText(f"0x{value:0{width}X}")
