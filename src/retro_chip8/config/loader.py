import yaml
from typing import Dict, Any, List
from .models import MachineConfig, DisplayConfig, MemoryRegion
from retro_chip8.arch.chip8.quirks import Chip8Quirks

class ConfigLoader:
    # @intent:post-condition YAMLの構文エラーや不正な値はすべてValueErrorとして報告します。
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping.")
        defaults = MachineConfig()

        cycles = self._parse_int(data.get("cycles_per_frame", defaults.cycles_per_frame))
        rate = self._parse_int(data.get("frame_rate_hz", defaults.frame_rate_hz))
        if cycles <= 0 or rate <= 0:
            raise ValueError("cycles_per_frame and frame_rate_hz must be positive.")

        # Parse Quirks
        quirks_data = self._section(data, "quirks")
        quirks = Chip8Quirks(
            shift_uses_vy=bool(quirks_data.get("shift_uses_vy", False)),
            load_store_increments_index=bool(quirks_data.get("load_store_increments_index", True)),
        )

        # Parse Display
        display_data = self._section(data, "display")
        display = DisplayConfig(
            scale=self._parse_int(display_data.get("scale", defaults.display.scale)),
            foreground=str(display_data.get("foreground", defaults.display.foreground)),
            background=str(display_data.get("background", defaults.display.background)),
        )
        if display.scale <= 0:
            raise ValueError("display.scale must be positive.")

        # Parse Keymap (指定された場合は既定の割り当てを置き換える)
        keymap = defaults.keymap
        if "keymap" in data:
            keymap = {}
            for key_name, symbol in self._section(data, "keymap").items():
                value = self._parse_int(symbol)
                if not 0 <= value <= 0xF:
                    raise ValueError(f"Key '{key_name}' maps to {value}, outside 0x0-0xF")
                keymap[str(key_name)] = value

        # Parse Memory Map (指定された場合は既定の配置を置き換える)
        memory_map = defaults.memory_map
        if "memory_map" in data:
            memory_map = self._parse_memory_map(data.get("memory_map"))

        return MachineConfig(
            cycles_per_frame=cycles,
            frame_rate_hz=rate,
            quirks=quirks,
            display=display,
            keymap=keymap,
            memory_map=memory_map,
        )

    def _parse_memory_map(self, regions: Any) -> List[MemoryRegion]:
        if not isinstance(regions, list) or not regions:
            raise ValueError("memory_map must be a non-empty list of regions.")
        memory_map = []
        for region_data in regions:
            if not isinstance(region_data, dict):
                raise ValueError(f"Memory region must be a mapping: {region_data}")
            if "start" not in region_data or "end" not in region_data:
                raise ValueError(f"Memory region needs 'start' and 'end': {region_data}")
            memory_map.append(MemoryRegion(
                start=self._parse_int(region_data.get("start")),
                end=self._parse_int(region_data.get("end")),
                type=str(region_data.get("type", "RAM")),
                label=str(region_data.get("label", "")),
            ))
        return memory_map

    # @intent:responsibility 省略可能なセクションを取り出します。マッピング以外はValueErrorとします。
    def _section(self, data: Dict[str, Any], name: str) -> Dict[Any, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"'{name}' must be a mapping.")
        return section

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
