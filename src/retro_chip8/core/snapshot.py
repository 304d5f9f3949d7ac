# retro_chip8/core/snapshot.py
"""
実行状態の不変スナップショット

1命令の実行結果（デコードされた命令、累計命令数、バスアクセス）を記録する
不変のデータ構造を定義します。トレース出力とテストでの状態検証に用います。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from retro_chip8.core.state import CpuState
from retro_chip8.transport.bus import BusAccess

# @intent:responsibility 実行された命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    実行された命令の詳細（HEX、ニーモニック、オペランド）を記録するデータクラス。
    """
    opcode_hex: str # 例: "00E0"
    mnemonic: str # 例: "CLS"
    operands: List[str] = field(default_factory=list) # 例: ["V1", "#0x2A"]
    cycle_count: int = 1
    length: int = 2 # 命令のバイト長

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    cycle_count: int
    symbol_info: Optional[str] = None # 例: "LD V1, #0x2A"

# @intent:responsibility ある一時点におけるCPUとバスの状態を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1命令実行後のCPU状態と、その命令で発生したバスアクセスの記録。
    state はコピーではなく、CPUが保持する状態オブジェクトそのものを参照します。
    """
    state: CpuState
    operation: Operation
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)
    pc: int = 0 # 命令をフェッチしたアドレス
