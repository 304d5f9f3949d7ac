# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
コマンドライン引数を解釈し、マシンを構築してメインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.core.errors import RomLoadError
from retro_chip8.loader.loader import BinaryRomLoader, hexdump
from retro_chip8.arch.chip8.constants import PROGRAM_START

logger = logging.getLogger(__name__)

BANNER = "Retro CHIP-8 interpreter"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-chip8", description=BANNER)
    parser.add_argument("rom", nargs="?", help="CHIP-8 program image (flat binary loaded at 0x200)")
    parser.add_argument("-c", "--config", help="YAML machine configuration")
    parser.add_argument("--trace", action="store_true", help="log every executed instruction (DEBUG)")
    parser.add_argument("--dump", action="store_true", help="print a hex dump of the loaded program")
    parser.add_argument("--disassemble", action="store_true",
                        help="print a disassembly of the loaded program and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    return parser


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# @intent:responsibility 設定の読み込み、マシン構築、プログラムのロードまでを行います。
# @intent:post-condition ロードに失敗した場合は空のメモリのままマシンを返し、ロードしたバイト数は0になります。
def prepare_machine(rom: Optional[str], config_path: Optional[str] = None):
    config = ConfigLoader().load_from_file(config_path) if config_path else MachineConfig()
    cpu, bus = SystemBuilder().build_system(config)
    loaded = 0
    if rom:
        try:
            loaded = BinaryRomLoader().load_binary(rom, bus)
        except RomLoadError as e:
            logger.warning("%s; continuing with empty memory", e)
    return config, cpu, bus, loaded


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose or args.trace, args.quiet)

    if not args.rom:
        print(BANNER)
        parser.print_usage()

    try:
        config, cpu, bus, loaded = prepare_machine(args.rom, args.config)
    except (OSError, ValueError, TypeError) as e:
        logger.error("Cannot load configuration: %s", e)
        return 1

    if args.dump:
        for line in hexdump(bus, PROGRAM_START, max(loaded, 2)):
            print(line)
    if args.disassemble:
        for addr, word, text in cpu.disassemble(PROGRAM_START, max(loaded, 2)):
            print(f"{addr:03X}: {word}  {text}")
        return 0

    # Qt関連はGUI起動時にのみ読み込む
    from PySide6.QtWidgets import QApplication
    from retro_chip8.core.engine import ExecutionEngine
    from .display_view import DisplayView, QtFrameSink, QtToneSink
    from .input_source import QtInputSource
    from .keymap import resolve_keymap
    from .main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv[:1])
    view = DisplayView(config.display)
    input_source = QtInputSource(resolve_keymap(config.keymap))
    engine = ExecutionEngine(
        cpu,
        frame_sink=QtFrameSink(view),
        input_source=input_source,
        tone_sink=QtToneSink(),
        cycles_per_frame=config.cycles_per_frame,
        frame_rate_hz=config.frame_rate_hz,
        trace=args.trace,
    )
    window = MainWindow(engine, view, input_source,
                        title=f"Retro CHIP-8 - {args.rom}" if args.rom else "Retro CHIP-8")
    window.show()
    window.start()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
