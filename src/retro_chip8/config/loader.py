import logging
from typing import Any, Dict, Optional

import yaml

from retro_chip8.common.constants import KEY_COUNT
from .models import CpuConfig, DisplayConfig, EmulatorConfig, SoundConfig

logger = logging.getLogger(__name__)

class ConfigLoader:
    def load_from_file(self, path: str) -> EmulatorConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        config = self.parse(data or {})
        logger.info("Loaded configuration from %s.", path)
        return config

    def parse(self, data: Dict[str, Any]) -> EmulatorConfig:
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping.")

        # Parse CPU
        cpu_data = data.get("cpu") or {}
        cpu = CpuConfig(
            clock_hz=self._parse_positive(cpu_data.get("clock_hz", 500), "cpu.clock_hz"),
            timer_hz=self._parse_positive(cpu_data.get("timer_hz", 60), "cpu.timer_hz"),
            stack_depth=self._parse_positive(cpu_data.get("stack_depth", 16), "cpu.stack_depth"),
            seed=self._parse_optional_int(cpu_data.get("seed")),
        )

        # Parse Display
        display_data = data.get("display") or {}
        display = DisplayConfig(
            scale=self._parse_positive(display_data.get("scale", 10), "display.scale"),
            foreground=str(display_data.get("foreground", "#E0E0E0")),
            background=str(display_data.get("background", "#101010")),
        )

        # Parse Sound
        sound_data = data.get("sound") or {}
        volume = float(sound_data.get("volume", 0.25))
        if not 0.0 <= volume <= 1.0:
            raise ValueError(f"sound.volume must be between 0.0 and 1.0: {volume}")
        sound = SoundConfig(
            enabled=bool(sound_data.get("enabled", True)),
            frequency=self._parse_positive(sound_data.get("frequency", 440), "sound.frequency"),
            volume=volume,
        )

        config = EmulatorConfig(cpu=cpu, display=display, sound=sound)

        # Parse Keymap (指定された場合はデフォルトを置き換える)
        keymap_data = data.get("keymap")
        if keymap_data is not None:
            config.keymap = self._parse_keymap(keymap_data)

        return config

    def _parse_keymap(self, data: Any) -> Dict[str, int]:
        if not isinstance(data, dict):
            raise ValueError("keymap must be a mapping of host key name to CHIP-8 key.")
        keymap = {}
        for name, value in data.items():
            key = self._parse_int(value)
            if not 0 <= key < KEY_COUNT:
                raise ValueError(f"Invalid CHIP-8 key {value!r} for host key {name!r}.")
            name = str(name)
            # 1文字のキー名のみ大文字化する（"Space" などは Qt の名前のまま）
            keymap[name.upper() if len(name) == 1 else name] = key
        return keymap

    def _parse_positive(self, value: Any, name: str) -> int:
        result = self._parse_int(value)
        if result <= 0:
            raise ValueError(f"{name} must be positive: {value}")
        return result

    def _parse_optional_int(self, value: Any) -> Optional[int]:
        if value is None:
            return None
        return self._parse_int(value)

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
