# src/retro_chip8/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。

実行時点でPCは既に次の命令を指しています（AbstractCpu.step で更新済み）。
"""
from retro_chip8.core.errors import StackFault
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.constants import STACK_SIZE, INSTRUCTION_LENGTH
from retro_chip8.arch.chip8.quirks import Chip8Quirks
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation


def _skip(state: Chip8CpuState) -> None:
    state.pc = (state.pc + INSTRUCTION_LENGTH) & 0xFFFF

# --- 00EE ---
# @intent:responsibility RET命令を実行し、スタックから戻りアドレスを取り出します。
# @intent:pre-condition スタックが空の場合はStackFaultとなります。
def execute_ret(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.sp == 0:
        raise StackFault("RET with an empty stack")
    state.sp -= 1
    state.pc = state.stack[state.sp]

# --- 1NNN ---
def execute_jp(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.pc = op.nnn

# --- 2NNN ---
# @intent:responsibility CALL命令を実行し、次の命令のアドレスをスタックに積んでからジャンプします。
# @intent:pre-condition 16段すべてが使用中の場合はStackFaultとなります。
def execute_call(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.sp >= STACK_SIZE:
        raise StackFault(f"CALL {op.nnn:#05x} with a full stack ({STACK_SIZE} frames)")
    state.stack[state.sp] = state.pc
    state.sp += 1
    state.pc = op.nnn

# --- 3XNN / 4XNN ---
def execute_se_vx_nn(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.v[op.x] == op.nn:
        _skip(state)

def execute_sne_vx_nn(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.v[op.x] != op.nn:
        _skip(state)

# --- 5XY0 / 9XY0 ---
def execute_se_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.v[op.x] == state.v[op.y]:
        _skip(state)

def execute_sne_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    if state.v[op.x] != state.v[op.y]:
        _skip(state)

# --- BNNN ---
# @intent:responsibility V0 + NNN へジャンプします。0xFFFを超える飛び先は次のフェッチでAddressFaultになります。
def execute_jp_v0(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.pc = (state.v[0] + op.nnn) & 0xFFFF

# --- 0NNN / 未定義 ---
# @intent:responsibility SYSおよび未定義の命令ワードを実行します（何もしません）。
def execute_nop(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    # Intentional: unrecognized encodings are silent no-ops.
    pass
