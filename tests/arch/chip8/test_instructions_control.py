import unittest

from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.core.errors import StackFault
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction

class TestChip8ControlInstructions(unittest.TestCase):
    def setUp(self):
        self.cpu, self.bus = SystemBuilder().build_system(MachineConfig())
        self.state = self.cpu.get_state()

    def _execute(self, word, current_pc=0x200):
        self.state.pc = current_pc
        op = decode_opcode(word)
        # 実行時点のPCは次の命令を指している
        self.state.pc = (self.state.pc + op.length) & 0xFFFF
        execute_instruction(op, self.state, self.bus)

    def test_jp(self):
        self._execute(0x1ABC)
        self.assertEqual(self.state.pc, 0xABC)

    def test_jp_v0(self):
        self.state.v[0] = 0x10
        self._execute(0xB300)
        self.assertEqual(self.state.pc, 0x310)

    def test_call_pushes_return_address(self):
        self._execute(0x2400, current_pc=0x300)
        self.assertEqual(self.state.pc, 0x400)
        self.assertEqual(self.state.sp, 1)
        self.assertEqual(self.state.stack[0], 0x302)

    def test_ret_pops_return_address(self):
        self._execute(0x2400, current_pc=0x300)
        self._execute(0x00EE, current_pc=0x400)
        self.assertEqual(self.state.pc, 0x302)
        self.assertEqual(self.state.sp, 0)

    def test_ret_with_empty_stack_faults(self):
        with self.assertRaises(StackFault):
            self._execute(0x00EE)

    def test_call_with_full_stack_faults(self):
        for depth in range(16):
            self._execute(0x2300)
        self.assertEqual(self.state.sp, 16)
        with self.assertRaises(StackFault):
            self._execute(0x2300)
        self.assertEqual(self.state.sp, 16)

    def test_se_sne_vx_nn(self):
        self.state.v[1] = 0x2A
        self._execute(0x312A)
        self.assertEqual(self.state.pc, 0x204)
        self._execute(0x312B)
        self.assertEqual(self.state.pc, 0x202)
        self._execute(0x412B)
        self.assertEqual(self.state.pc, 0x204)
        self._execute(0x412A)
        self.assertEqual(self.state.pc, 0x202)

    def test_se_sne_vx_vy(self):
        self.state.v[1], self.state.v[2] = 0x05, 0x05
        self._execute(0x5120)
        self.assertEqual(self.state.pc, 0x204)
        self._execute(0x9120)
        self.assertEqual(self.state.pc, 0x202)
        self.state.v[2] = 0x06
        self._execute(0x9120)
        self.assertEqual(self.state.pc, 0x204)

    def test_sys_and_unknown_are_no_ops(self):
        self.state.v[1] = 0x11
        self._execute(0x0123)
        self.assertEqual(self.state.pc, 0x202)
        self._execute(0x8128)
        self.assertEqual(self.state.pc, 0x202)
        self.assertEqual(self.state.v[1], 0x11)

if __name__ == '__main__':
    unittest.main()
