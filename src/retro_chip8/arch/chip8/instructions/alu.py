# src/retro_chip8/arch/chip8/instructions/alu.py
"""
算術論理演算命令 (6XNN, 7XNN, 8XYN, CXNN) の実装。

VFを設定する命令は、結果をVxへ書き込んだ後でVFを書き込みます。
これにより x == 0xF の場合でもフラグ値が残ります。
"""
import random

from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.quirks import Chip8Quirks
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation

# --- 6XNN ---
def execute_ld_vx_nn(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] = op.nn

# --- 7XNN ---
# @intent:responsibility 即値を加算します。8ビットで循環し、VFは変化しません。
def execute_add_vx_nn(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- 8XY0-8XY3 ---
def execute_ld_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] = state.v[op.y]

def execute_or(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] |= state.v[op.y]

def execute_and(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] &= state.v[op.y]

def execute_xor(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] ^= state.v[op.y]

# --- 8XY4 ---
# @intent:responsibility Vx += Vy。符号なしの和が255を超えた場合にVF=1とします。
def execute_add_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# --- 8XY5 ---
# @intent:responsibility Vx -= Vy。ボローが発生しない（Vx >= Vy）場合にVF=1とします。
def execute_sub(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    v1, v2 = state.v[op.x], state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 >= v2 else 0

# --- 8XY7 ---
# @intent:responsibility Vx = Vy - Vx。ボローが発生しない（Vy >= Vx）場合にVF=1とします。
def execute_subn(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    v1, v2 = state.v[op.x], state.v[op.y]
    state.v[op.x] = (v2 - v1) & 0xFF
    state.vf = 1 if v2 >= v1 else 0

# --- 8XY6 ---
# @intent:responsibility 右シフト。VFにはシフト前の最下位ビットが入ります。
# @intent:rationale 既定ではVxのみをシフトする互換挙動。quirks.shift_uses_vyでVyをシフト元にできます。
def execute_shr(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    src = state.v[op.y] if quirks.shift_uses_vy else state.v[op.x]
    state.v[op.x] = src >> 1
    state.vf = src & 0x01

# --- 8XYE ---
# @intent:responsibility 左シフト。VFにはシフト前の最上位ビットが入ります。
def execute_shl(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    src = state.v[op.y] if quirks.shift_uses_vy else state.v[op.x]
    state.v[op.x] = (src << 1) & 0xFF
    state.vf = (src >> 7) & 0x01

# --- CXNN ---
# @intent:responsibility 乱数バイトとNNの論理積をVxに格納します。乱数源はプロセス全体の random モジュールです。
def execute_rnd(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.v[op.x] = random.randint(0, 0xFF) & op.nn
