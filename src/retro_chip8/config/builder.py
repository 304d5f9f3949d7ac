import logging
from typing import List, Tuple
from retro_chip8.transport.bus import Bus, RAM, ROM
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.constants import MEMORY_SIZE
from .models import MachineConfig, MemoryRegion

logger = logging.getLogger(__name__)

# @intent:responsibility システム構成（Config）に基づいて、Bus、Device、CPUを生成・接続し、初期状態を適用します。
class SystemBuilder:
    def build_system(self, config: MachineConfig) -> Tuple[Chip8Cpu, Bus]:
        self._check_coverage(config.memory_map)
        bus = Bus()

        for region in config.memory_map:
            size = region.end - region.start + 1

            if region.type == "RAM":
                device = RAM(size)
            elif region.type == "ROM":
                device = ROM(size)
            else:
                logger.warning("Unknown device type '%s' for range %03X-%03X, defaulting to RAM",
                               region.type, region.start, region.end)
                device = RAM(size)

            bus.register_device(region.start, region.end, device)

        cpu = Chip8Cpu(bus, quirks=config.quirks)
        # リセットでメモリ消去とフォント配置を行う
        cpu.reset()

        return cpu, bus

    # @intent:pre-condition 領域は重複なく 0x000-0xFFF をすき間なく覆う必要があります。
    def _check_coverage(self, memory_map: List[MemoryRegion]) -> None:
        expected = 0
        for region in sorted(memory_map, key=lambda r: r.start):
            if region.start != expected or region.end < region.start:
                raise ValueError(
                    f"Memory map must cover 0x000-0x{MEMORY_SIZE - 1:03X} without gaps or overlaps "
                    f"(region {region.start:#05x}-{region.end:#05x})"
                )
            expected = region.end + 1
        if expected != MEMORY_SIZE:
            raise ValueError(f"Memory map must end at 0x{MEMORY_SIZE - 1:03X}")
