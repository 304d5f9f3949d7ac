# src/retro_chip8/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通定義。

命令の種別タグ (Chip8Op)、オペランドを展開済みの Operation、ニーモニック表、
およびアドレスフォールトへ変換するメモリアクセスヘルパーを提供します。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from retro_chip8.core.errors import AddressFault
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.constants import ADDRESS_MASK

# @intent:responsibility 命令ワードの分類結果。1命令につき1つのタグを割り当てます。
class Chip8Op(Enum):
    CLS = "CLS"               # 00E0
    RET = "RET"               # 00EE
    SYS = "SYS"               # 0NNN (機械語ルーチン呼び出し。何もしない)
    JP = "JP"                 # 1NNN
    CALL = "CALL"             # 2NNN
    SE_VX_NN = "SE_VX_NN"     # 3XNN
    SNE_VX_NN = "SNE_VX_NN"   # 4XNN
    SE_VX_VY = "SE_VX_VY"     # 5XY0
    LD_VX_NN = "LD_VX_NN"     # 6XNN
    ADD_VX_NN = "ADD_VX_NN"   # 7XNN
    LD_VX_VY = "LD_VX_VY"     # 8XY0
    OR = "OR"                 # 8XY1
    AND = "AND"               # 8XY2
    XOR = "XOR"               # 8XY3
    ADD_VX_VY = "ADD_VX_VY"   # 8XY4
    SUB = "SUB"               # 8XY5
    SHR = "SHR"               # 8XY6
    SUBN = "SUBN"             # 8XY7
    SHL = "SHL"               # 8XYE
    SNE_VX_VY = "SNE_VX_VY"   # 9XY0
    LD_I = "LD_I"             # ANNN
    JP_V0 = "JP_V0"           # BNNN
    RND = "RND"               # CXNN
    DRW = "DRW"               # DXYN
    SKP = "SKP"               # EX9E
    SKNP = "SKNP"             # EXA1
    LD_VX_DT = "LD_VX_DT"     # FX07
    LD_VX_K = "LD_VX_K"       # FX0A
    LD_DT_VX = "LD_DT_VX"     # FX15
    LD_ST_VX = "LD_ST_VX"     # FX18
    ADD_I_VX = "ADD_I_VX"     # FX1E
    LD_F_VX = "LD_F_VX"       # FX29
    LD_B_VX = "LD_B_VX"       # FX33
    LD_I_VX = "LD_I_VX"       # FX55
    LD_VX_I = "LD_VX_I"       # FX65
    UNKNOWN = "UNKNOWN"

# @intent:responsibility デコード済みのCHIP-8命令。ビットフィールドは展開済みで保持します。
@dataclass(frozen=True)
class Chip8Operation(Operation):
    kind: Chip8Op = Chip8Op.UNKNOWN
    word: int = 0x0000
    x: int = 0    # bits 8-11
    y: int = 0    # bits 4-7
    n: int = 0    # bits 0-3
    nn: int = 0   # bits 0-7
    nnn: int = 0  # bits 0-11

# @intent:map 命令タグからニーモニックとオペランド書式へのマッピング。
_X = "V{x:X}"
_Y = "V{y:X}"
_NN = "#0x{nn:02X}"
_NNN = "0x{nnn:03X}"

MNEMONICS: Dict[Chip8Op, Tuple[str, Tuple[str, ...]]] = {
    Chip8Op.CLS: ("CLS", ()),
    Chip8Op.RET: ("RET", ()),
    Chip8Op.SYS: ("SYS", (_NNN,)),
    Chip8Op.JP: ("JP", (_NNN,)),
    Chip8Op.CALL: ("CALL", (_NNN,)),
    Chip8Op.SE_VX_NN: ("SE", (_X, _NN)),
    Chip8Op.SNE_VX_NN: ("SNE", (_X, _NN)),
    Chip8Op.SE_VX_VY: ("SE", (_X, _Y)),
    Chip8Op.LD_VX_NN: ("LD", (_X, _NN)),
    Chip8Op.ADD_VX_NN: ("ADD", (_X, _NN)),
    Chip8Op.LD_VX_VY: ("LD", (_X, _Y)),
    Chip8Op.OR: ("OR", (_X, _Y)),
    Chip8Op.AND: ("AND", (_X, _Y)),
    Chip8Op.XOR: ("XOR", (_X, _Y)),
    Chip8Op.ADD_VX_VY: ("ADD", (_X, _Y)),
    Chip8Op.SUB: ("SUB", (_X, _Y)),
    Chip8Op.SHR: ("SHR", (_X, _Y)),
    Chip8Op.SUBN: ("SUBN", (_X, _Y)),
    Chip8Op.SHL: ("SHL", (_X, _Y)),
    Chip8Op.SNE_VX_VY: ("SNE", (_X, _Y)),
    Chip8Op.LD_I: ("LD", ("I", _NNN)),
    Chip8Op.JP_V0: ("JP", ("V0", _NNN)),
    Chip8Op.RND: ("RND", (_X, _NN)),
    Chip8Op.DRW: ("DRW", (_X, _Y, "{n}")),
    Chip8Op.SKP: ("SKP", (_X,)),
    Chip8Op.SKNP: ("SKNP", (_X,)),
    Chip8Op.LD_VX_DT: ("LD", (_X, "DT")),
    Chip8Op.LD_VX_K: ("LD", (_X, "K")),
    Chip8Op.LD_DT_VX: ("LD", ("DT", _X)),
    Chip8Op.LD_ST_VX: ("LD", ("ST", _X)),
    Chip8Op.ADD_I_VX: ("ADD", ("I", _X)),
    Chip8Op.LD_F_VX: ("LD", ("F", _X)),
    Chip8Op.LD_B_VX: ("LD", ("B", _X)),
    Chip8Op.LD_I_VX: ("LD", ("[I]", _X)),
    Chip8Op.LD_VX_I: ("LD", (_X, "[I]")),
    Chip8Op.UNKNOWN: ("UNKNOWN", ("0x{word:04X}",)),
}

# @intent:utility_function 命令ワードとタグからOperationを組み立てます。
def make_operation(word: int, kind: Chip8Op) -> Chip8Operation:
    fields = dict(
        x=(word & 0x0F00) >> 8,
        y=(word & 0x00F0) >> 4,
        n=word & 0x000F,
        nn=word & 0x00FF,
        nnn=word & 0x0FFF,
    )
    mnemonic, templates = MNEMONICS[kind]
    operands = [t.format(word=word, **fields) for t in templates]
    return Chip8Operation(
        opcode_hex=f"{word:04X}",
        mnemonic=mnemonic,
        operands=operands,
        kind=kind,
        word=word,
        **fields,
    )

# @intent:utility_function アドレス空間外のアクセスをAddressFaultに変換してメモリを読み出します。
def read_byte(bus: Bus, address: int) -> int:
    try:
        return bus.read(address)
    except IndexError as exc:
        raise AddressFault(f"Read from {address:#06x} is outside the address space") from exc

# @intent:utility_function アドレス空間外のアクセスをAddressFaultに変換してメモリへ書き込みます。
def write_byte(bus: Bus, address: int, data: int) -> None:
    try:
        bus.write(address, data & 0xFF)
    except IndexError as exc:
        raise AddressFault(f"Write to {address:#06x} is outside the address space") from exc

# @intent:utility_function 連続したメモリ領域がアドレス空間に収まることを事前に検証します。
# @intent:rationale 複数バイトを扱う命令が途中まで書き込んだ状態で停止しないようにします。
def check_span(address: int, count: int) -> None:
    if count > 0 and (address < 0 or address + count - 1 > ADDRESS_MASK):
        raise AddressFault(
            f"Access of {count} byte(s) at {address:#06x} crosses the end of the address space"
        )
