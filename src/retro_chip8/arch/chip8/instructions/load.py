# src/retro_chip8/arch/chip8/instructions/load.py
"""
インデックスレジスタ、タイマー、メモリ転送命令 (ANNN, FXNN) の実装。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.constants import FONT_START, FONT_GLYPH_SIZE, ADDRESS_MASK
from retro_chip8.arch.chip8.quirks import Chip8Quirks
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation, read_byte, write_byte, check_span

# --- ANNN ---
def execute_ld_i(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.i = op.nnn

# --- FX07 / FX15 / FX18 ---
def execute_ld_vx_dt(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] = state.delay_timer

def execute_ld_dt_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.delay_timer = state.v[op.x]

def execute_ld_st_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.sound_timer = state.v[op.x]

# --- FX1E ---
# @intent:responsibility I += Vx。結果が0xFFFを超えた場合にVF=1とします（非公式だが一部ROMが依存する挙動）。
def execute_add_i_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    res = state.i + state.v[op.x]
    state.i = res & 0xFFFF
    state.vf = 1 if res > ADDRESS_MASK else 0

# --- FX29 ---
# @intent:responsibility Vxの文字に対応するフォントグリフのアドレスをIに設定します。
def execute_ld_f_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.i = FONT_START + state.v[op.x] * FONT_GLYPH_SIZE

# --- FX33 ---
# @intent:responsibility Vxの10進表現（百、十、一の位）を I, I+1, I+2 に格納します。
def execute_ld_b_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    value = state.v[op.x]
    check_span(state.i, 3)
    write_byte(bus, state.i, value // 100)
    write_byte(bus, state.i + 1, (value // 10) % 10)
    write_byte(bus, state.i + 2, value % 10)

# --- FX55 ---
# @intent:responsibility V0..Vx を I から始まるメモリへ格納します。既定では実行後に I += x + 1 となります。
def execute_ld_i_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    check_span(state.i, op.x + 1)
    for r in range(op.x + 1):
        write_byte(bus, state.i + r, state.v[r])
    if quirks.load_store_increments_index:
        state.i = (state.i + op.x + 1) & 0xFFFF

# --- FX65 ---
# @intent:responsibility I から始まるメモリを V0..Vx に読み込みます。既定では実行後に I += x + 1 となります。
def execute_ld_vx_i(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    check_span(state.i, op.x + 1)
    for r in range(op.x + 1):
        state.v[r] = read_byte(bus, state.i + r)
    if quirks.load_store_increments_index:
        state.i = (state.i + op.x + 1) & 0xFFFF
