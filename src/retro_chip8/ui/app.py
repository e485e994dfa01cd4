# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
コマンドライン引数を解釈し、ROMをロードしてメインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

import yaml
from PySide6.QtWidgets import QApplication

from retro_chip8.common.errors import RomLoadError
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import EmulatorConfig
from retro_chip8.loader.loader import RomLoader
from .keymap import build_key_table
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="CHIP-8 interpreter")
    parser.add_argument("rom", help="path to a raw CHIP-8 ROM image")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser.parse_args(argv)

# @intent:responsibility 設定とROMを読み込み、アプリケーションを起動します。
# @intent:post-condition 起動前のエラー（設定・キーマップ・ROM）は標準エラーに報告し、終了コード1を返す。
def main(argv: Optional[List[str]] = None) -> int:
    """
    アプリケーションのメイン関数。
    """
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(name)s: %(message)s")

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else EmulatorConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        return 1

    try:
        key_table = build_key_table(config.keymap)
    except ValueError as e:
        print(f"Invalid keymap: {e}", file=sys.stderr)
        return 1

    cpu, runner = SystemBuilder().build_system(config)
    try:
        RomLoader().load_file(args.rom, cpu)
    except RomLoadError as e:
        print(e, file=sys.stderr)
        return 1

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(config, runner, key_table, rom_path=args.rom)
    main_win.show()
    main_win.start()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
