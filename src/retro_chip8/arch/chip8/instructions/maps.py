# src/retro_chip8/arch/chip8/instructions/maps.py
"""
命令ワードの分類表と、命令タグから実行関数へのマッピング定義。
"""
from typing import Callable, Dict, Tuple

from .base import Chip8Op
from . import alu
from . import control
from . import display
from . import keys
from . import load

# @intent:map 上位ニブルだけで命令が確定するグループ。
PRIMARY_MAP: Dict[int, Chip8Op] = {
    0x1: Chip8Op.JP,
    0x2: Chip8Op.CALL,
    0x3: Chip8Op.SE_VX_NN,
    0x4: Chip8Op.SNE_VX_NN,
    0x5: Chip8Op.SE_VX_VY,
    0x6: Chip8Op.LD_VX_NN,
    0x7: Chip8Op.ADD_VX_NN,
    0x9: Chip8Op.SNE_VX_VY,
    0xA: Chip8Op.LD_I,
    0xB: Chip8Op.JP_V0,
    0xC: Chip8Op.RND,
    0xD: Chip8Op.DRW,
}

# @intent:map 0NNN グループ (下位12ビットで選択)。
SYSTEM_MAP: Dict[int, Chip8Op] = {
    0x0E0: Chip8Op.CLS,
    0x0EE: Chip8Op.RET,
}

# @intent:map 8XYN グループ (下位ニブルで選択)。
ALU_MAP: Dict[int, Chip8Op] = {
    0x0: Chip8Op.LD_VX_VY,
    0x1: Chip8Op.OR,
    0x2: Chip8Op.AND,
    0x3: Chip8Op.XOR,
    0x4: Chip8Op.ADD_VX_VY,
    0x5: Chip8Op.SUB,
    0x6: Chip8Op.SHR,
    0x7: Chip8Op.SUBN,
    0xE: Chip8Op.SHL,
}

# @intent:map EXNN グループ (下位バイトで選択)。
KEY_MAP: Dict[int, Chip8Op] = {
    0x9E: Chip8Op.SKP,
    0xA1: Chip8Op.SKNP,
}

# @intent:map FXNN グループ (下位バイトで選択)。
MISC_MAP: Dict[int, Chip8Op] = {
    0x07: Chip8Op.LD_VX_DT,
    0x0A: Chip8Op.LD_VX_K,
    0x15: Chip8Op.LD_DT_VX,
    0x18: Chip8Op.LD_ST_VX,
    0x1E: Chip8Op.ADD_I_VX,
    0x29: Chip8Op.LD_F_VX,
    0x33: Chip8Op.LD_B_VX,
    0x55: Chip8Op.LD_I_VX,
    0x65: Chip8Op.LD_VX_I,
}

# @intent:map 上位ニブルが曖昧なグループの二次選択: (セレクタ抽出マスク, 分類表, 該当なし時のタグ)。
SECONDARY_MAP: Dict[int, Tuple[int, Dict[int, Chip8Op], Chip8Op]] = {
    0x0: (0x0FFF, SYSTEM_MAP, Chip8Op.SYS),
    0x8: (0x000F, ALU_MAP, Chip8Op.UNKNOWN),
    0xE: (0x00FF, KEY_MAP, Chip8Op.UNKNOWN),
    0xF: (0x00FF, MISC_MAP, Chip8Op.UNKNOWN),
}

# @intent:map 命令タグから実行関数へのマッピングテーブル。全てのタグを網羅します。
EXECUTE_MAP: Dict[Chip8Op, Callable] = {
    # Control
    Chip8Op.RET: control.execute_ret,
    Chip8Op.SYS: control.execute_nop,
    Chip8Op.JP: control.execute_jp,
    Chip8Op.CALL: control.execute_call,
    Chip8Op.SE_VX_NN: control.execute_se_vx_nn,
    Chip8Op.SNE_VX_NN: control.execute_sne_vx_nn,
    Chip8Op.SE_VX_VY: control.execute_se_vx_vy,
    Chip8Op.SNE_VX_VY: control.execute_sne_vx_vy,
    Chip8Op.JP_V0: control.execute_jp_v0,
    Chip8Op.UNKNOWN: control.execute_nop,

    # ALU
    Chip8Op.LD_VX_NN: alu.execute_ld_vx_nn,
    Chip8Op.ADD_VX_NN: alu.execute_add_vx_nn,
    Chip8Op.LD_VX_VY: alu.execute_ld_vx_vy,
    Chip8Op.OR: alu.execute_or,
    Chip8Op.AND: alu.execute_and,
    Chip8Op.XOR: alu.execute_xor,
    Chip8Op.ADD_VX_VY: alu.execute_add_vx_vy,
    Chip8Op.SUB: alu.execute_sub,
    Chip8Op.SHR: alu.execute_shr,
    Chip8Op.SUBN: alu.execute_subn,
    Chip8Op.SHL: alu.execute_shl,
    Chip8Op.RND: alu.execute_rnd,

    # Display
    Chip8Op.CLS: display.execute_cls,
    Chip8Op.DRW: display.execute_drw,

    # Keys
    Chip8Op.SKP: keys.execute_skp,
    Chip8Op.SKNP: keys.execute_sknp,
    Chip8Op.LD_VX_K: keys.execute_ld_vx_k,

    # Index / Timers / Memory
    Chip8Op.LD_I: load.execute_ld_i,
    Chip8Op.LD_VX_DT: load.execute_ld_vx_dt,
    Chip8Op.LD_DT_VX: load.execute_ld_dt_vx,
    Chip8Op.LD_ST_VX: load.execute_ld_st_vx,
    Chip8Op.ADD_I_VX: load.execute_add_i_vx,
    Chip8Op.LD_F_VX: load.execute_ld_f_vx,
    Chip8Op.LD_B_VX: load.execute_ld_b_vx,
    Chip8Op.LD_I_VX: load.execute_ld_i_vx,
    Chip8Op.LD_VX_I: load.execute_ld_vx_i,
}
