# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
表示、レジスタインスペクタ、ステータスバーを保持し、
QTimer で実行ループ（Runner）を駆動します。
"""
import logging
import os
from typing import Dict, Optional

from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QAction, QCloseEvent, QColor, QKeyEvent, QPalette
from PySide6.QtWidgets import QApplication, QDockWidget, QFileDialog, QMainWindow, QMessageBox

from retro_chip8.common.errors import RomLoadError
from retro_chip8.config.models import EmulatorConfig
from retro_chip8.core.runner import Runner, RunState
from retro_chip8.loader.loader import RomLoader
from .beeper import Beeper
from .display_view import DisplayView
from .register_view import RegisterView

logger = logging.getLogger(__name__)

# @intent:responsibility アプリケーションのメインウィンドウを定義し、実行ループと入出力を結び付けます。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    """
    def __init__(
        self, config: EmulatorConfig, runner: Runner, key_table: Dict[int, int],
        rom_path: Optional[str] = None, parent=None,
    ):
        super(MainWindow, self).__init__(parent)
        self._config = config
        self._runner = runner
        self._cpu = runner.cpu
        self._rom_path = rom_path
        self._key_table = key_table

        self._update_title()
        self._set_dark_theme()

        self.display_view = DisplayView(self._cpu.framebuffer, config.display)
        self.setCentralWidget(self.display_view)
        self._create_status_inspector()
        self._create_menus()

        self._beeper: Optional[Beeper] = None
        if config.sound.enabled:
            self._beeper = Beeper(config.sound.frequency, config.sound.volume, self)

        # @intent:rationale タイマー減算と同じ周期でフレームを実行し、表示もこの周期で更新する。
        self._timer = QTimer(self)
        self._timer.setInterval(max(1, round(1000 / config.cpu.timer_hz)))
        self._timer.timeout.connect(self._run_frame)

        self.statusBar().showMessage("Ready")

    def _update_title(self):
        name = os.path.basename(self._rom_path) if self._rom_path else "no ROM"
        self.setWindowTitle(f"Retro CHIP-8 - {name}")

    # @intent:responsibility メニューバーを作成し、ROMのロードと実行制御のアクションを追加します。
    def _create_menus(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")

        self.open_action = QAction("Open ROM...", self)
        self.open_action.setShortcut("Ctrl+O")
        self.open_action.triggered.connect(self._open_rom)
        file_menu.addAction(self.open_action)

        quit_action = QAction("Quit", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        emulation_menu = menu_bar.addMenu("Emulation")

        self.pause_action = QAction("Pause", self)
        self.pause_action.setShortcut("P")
        self.pause_action.setCheckable(True)
        self.pause_action.toggled.connect(self._toggle_pause)
        emulation_menu.addAction(self.pause_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self._reset)
        emulation_menu.addAction(self.reset_action)

    # @intent:responsibility 右側のレジスタインスペクタを作成します。
    def _create_status_inspector(self):
        status_dock = QDockWidget("Registers", self)
        status_dock.setAllowedAreas(Qt.RightDockWidgetArea | Qt.LeftDockWidgetArea)
        self.register_view = RegisterView()
        self.register_view.set_cpu(self._cpu)
        status_dock.setWidget(self.register_view)
        self.addDockWidget(Qt.RightDockWidgetArea, status_dock)

    def start(self) -> None:
        self._timer.start()
        self.statusBar().showMessage("Running")

    # @intent:responsibility 1フレームを実行し、画面・レジスタ・サウンドを更新します。停止時はタイマーを止める。
    @Slot()
    def _run_frame(self):
        state = self._runner.run_frame()
        self.display_view.update()
        self.register_view.update_registers()
        if self._beeper:
            self._beeper.set_active(self._cpu.is_sound_active())

        if state is not RunState.RUNNING:
            self._timer.stop()
            if self._beeper:
                self._beeper.stop()
            self._report_stop(state)

    def _report_stop(self, state: RunState):
        if state is RunState.FAULTED:
            message = str(self._runner.last_error)
            self.statusBar().showMessage(f"Stopped: {message}")
            QMessageBox.critical(self, "CHIP-8 Error", message)
        else:
            self.statusBar().showMessage(f"Halted after {self._cpu.cycle_count} instructions")

    @Slot(bool)
    def _toggle_pause(self, paused: bool):
        if paused:
            self._timer.stop()
            if self._beeper:
                self._beeper.stop()
            self.statusBar().showMessage("Paused")
        elif self._runner.run_state is RunState.RUNNING:
            self.start()

    # @intent:responsibility CPUをリセットし、現在のROMを再ロードして実行を再開します。
    @Slot()
    def _reset(self):
        if self._rom_path:
            self._load_rom(self._rom_path)

    @Slot()
    def _open_rom(self):
        file_name, _ = QFileDialog.getOpenFileName(self, "Open ROM", "", "CHIP-8 ROMs (*.ch8 *.c8);;All Files (*)")
        if file_name:
            self._load_rom(file_name)

    def _load_rom(self, path: str):
        self._timer.stop()
        loader = RomLoader()
        try:
            data = loader.read_file(path)
        except RomLoadError as e:
            QMessageBox.critical(self, "Error", f"Failed to load ROM: {e}")
            return
        self._runner.reset()
        self._cpu.load(data)
        self._rom_path = path
        self._update_title()
        self.display_view.update()
        self.register_view.update_registers()
        logger.info("Loaded ROM '%s' with size: %d bytes.", path, len(data))
        if not self.pause_action.isChecked():
            self.start()

    # @intent:responsibility キー押下をキーパッドに反映します。Esc でウィンドウを閉じる。
    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key.Key_Escape.value:
            self.close()
            return
        chip_key = self._key_table.get(event.key())
        if chip_key is None:
            super().keyPressEvent(event)
            return
        if not event.isAutoRepeat():
            self._cpu.keypad.press(chip_key)

    def keyReleaseEvent(self, event: QKeyEvent):
        chip_key = self._key_table.get(event.key())
        if chip_key is None:
            super().keyReleaseEvent(event)
            return
        if not event.isAutoRepeat():
            self._cpu.keypad.release(chip_key)

    # @intent:responsibility アプリケーションにダークテーマを適用します。
    def _set_dark_theme(self):
        dark_palette = QPalette()
        dark_palette.setColor(QPalette.Window, QColor(29, 29, 29))
        dark_palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Base, QColor(30, 30, 30))
        dark_palette.setColor(QPalette.Text, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        dark_palette.setColor(QPalette.HighlightedText, QColor(0, 0, 0))
        QApplication.setPalette(dark_palette)

        self.setStyleSheet("""
            QMainWindow, QStatusBar { background-color: #1D1D1D; border: none; }
            QDockWidget::title { text-align: left; background: #101010; padding: 4px; font-weight: bold; }
        """)

    # @intent:responsibility 終了時に実行ループとサウンドを停止します。
    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        if self._beeper:
            self._beeper.stop()
        event.accept()
