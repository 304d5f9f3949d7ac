import unittest

from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.core.errors import AddressFault
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction

class TestChip8DisplayInstructions(unittest.TestCase):
    def setUp(self):
        self.cpu, self.bus = SystemBuilder().build_system(MachineConfig())
        self.state = self.cpu.get_state()
        self.fb = self.state.framebuffer

    def _execute(self, word):
        self.state.pc = 0x200
        op = decode_opcode(word)
        self.state.pc += op.length
        execute_instruction(op, self.state, self.bus)

    def _sprite(self, rows, at=0x300):
        for k, row in enumerate(rows):
            self.bus.write(at + k, row)
        self.state.i = at

    def test_cls(self):
        self.fb.xor_pixel(1, 1)
        self._execute(0x00E0)
        self.assertEqual(sum(self.fb.copy_pixels()), 0)
        self.assertTrue(self.fb.dirty)

    def test_draw_font_glyph(self):
        # LD F, V0 (glyph 0) -> DRW V1, V2, 5
        self._execute(0xF029)
        self.state.v[1], self.state.v[2] = 10, 5
        self._execute(0xD125)
        self.assertEqual(self.state.vf, 0)
        self.assertTrue(self.fb.dirty)
        # 0xF0 = ****....
        self.assertEqual([self.fb.get_pixel(10 + c, 5) for c in range(8)],
                         [True, True, True, True, False, False, False, False])
        # 0x90 = *..*....
        self.assertEqual([self.fb.get_pixel(10 + c, 6) for c in range(4)], [True, False, False, True])
        self.assertEqual(sum(self.fb.copy_pixels()), 14)

    # @intent:test_case_idempotence 同じスプライトを2回描くと画面が元に戻り、衝突が報告されることを検証します。
    def test_draw_twice_restores_and_reports_collision(self):
        self._sprite([0xFF, 0x81])
        self._execute(0xD122)
        self.assertEqual(self.state.vf, 0)
        self._execute(0xD122)
        self.assertEqual(self.state.vf, 1)
        self.assertEqual(sum(self.fb.copy_pixels()), 0)

    def test_partial_overlap_collision(self):
        self._sprite([0x80])
        self._execute(0xD121)
        self._sprite([0xC0], at=0x310)
        self._execute(0xD121)
        self.assertEqual(self.state.vf, 1)
        self.assertFalse(self.fb.get_pixel(0, 0))
        self.assertTrue(self.fb.get_pixel(1, 0))

    def test_draw_without_collision_clears_stale_flag(self):
        self.state.vf = 1
        self._sprite([0x80])
        self._execute(0xD121)
        self.assertEqual(self.state.vf, 0)

    # @intent:test_case_wrap 画面端を越えたピクセルが反対側に折り返されることを検証します。
    def test_draw_wraps_around_edges(self):
        self._sprite([0xC0, 0xC0])
        self.state.v[1], self.state.v[2] = 63, 31
        self._execute(0xD122)
        for x, y in [(63, 31), (0, 31), (63, 0), (0, 0)]:
            self.assertTrue(self.fb.get_pixel(x, y), (x, y))
        self.assertEqual(sum(self.fb.copy_pixels()), 4)

    def test_draw_origin_beyond_screen_wraps(self):
        self._sprite([0x80])
        self.state.v[1], self.state.v[2] = 64 + 3, 32 + 2
        self._execute(0xD121)
        self.assertTrue(self.fb.get_pixel(3, 2))

    def test_draw_zero_rows_changes_nothing(self):
        self.fb.dirty = False
        self._execute(0xD120)
        self.assertEqual(self.state.vf, 0)
        self.assertFalse(self.fb.dirty)

    def test_draw_with_vf_as_coordinate(self):
        self._sprite([0x80])
        self.state.v[0xF], self.state.v[1] = 5, 6
        self._execute(0xDF11)
        self.assertTrue(self.fb.get_pixel(5, 6))
        self.assertEqual(self.state.vf, 0)

    def test_draw_sprite_past_end_of_memory_faults(self):
        self.state.i = 0xFFC
        with self.assertRaises(AddressFault):
            self._execute(0xD125)
        self.assertEqual(sum(self.fb.copy_pixels()), 0)

if __name__ == '__main__':
    unittest.main()
