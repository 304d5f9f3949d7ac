# src/retro_chip8/arch/chip8/instructions/display.py
"""
画面命令 (00E0, DXYN) の実装。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.quirks import Chip8Quirks
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation, read_byte, check_span

# --- 00E0 ---
# @intent:responsibility 全ピクセルを消灯し、再描画を要求します。
def execute_cls(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    state.framebuffer.clear()

# --- DXYN ---
# @intent:responsibility I から始まる N 行のスプライトを (Vx, Vy) にXOR描画します。
# @intent:rationale 画面端を越えたピクセルはクリップせず、横64・縦32で折り返します。
def execute_drw(state: Chip8CpuState, bus: Bus, op: Chip8Operation, quirks: Chip8Quirks) -> None:
    fb = state.framebuffer
    origin_x = state.v[op.x]
    origin_y = state.v[op.y]
    check_span(state.i, op.n)
    rows = [read_byte(bus, state.i + row) for row in range(op.n)]

    state.vf = 0
    collision = False
    changed = False
    for row, data in enumerate(rows):
        py = (origin_y + row) % fb.height
        for col in range(8):
            if data & (0x80 >> col):
                px = (origin_x + col) % fb.width
                if fb.xor_pixel(px, py):
                    collision = True
                changed = True

    if changed:
        fb.dirty = True
    state.vf = 1 if collision else 0
