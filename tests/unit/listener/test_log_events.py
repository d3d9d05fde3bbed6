"""Tests for Program data extraction from transaction logs."""

import base64

from vaultwatch.listener import extract_program_data

PROGRAM = "VauLt1111111111111111111111111111111111111"
OTHER = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


def _data(payload: bytes) -> str:
    return "Program data: " + base64.b64encode(payload).decode()


class TestExtractProgramData:
    def test_single_event(self):
        logs = [
            f"Program {PROGRAM} invoke [1]",
            "Program log: Instruction: DepositVault",
            _data(b"event-one"),
            f"Program {PROGRAM} consumed 20000 of 200000 compute units",
            f"Program {PROGRAM} success",
        ]
        assert extract_program_data(logs, PROGRAM) == [b"event-one"]

    def test_ignores_nested_program_data(self):
        logs = [
            f"Program {PROGRAM} invoke [1]",
            f"Program {OTHER} invoke [2]",
            _data(b"from-token-program"),
            f"Program {OTHER} success",
            _data(b"from-vault"),
            f"Program {PROGRAM} success",
        ]
        assert extract_program_data(logs, PROGRAM) == [b"from-vault"]

    def test_ignores_data_when_vault_is_inner_call(self):
        logs = [
            f"Program {OTHER} invoke [1]",
            _data(b"outer"),
            f"Program {PROGRAM} invoke [2]",
            _data(b"inner-vault"),
            f"Program {PROGRAM} success",
            f"Program {OTHER} success",
        ]
        assert extract_program_data(logs, PROGRAM) == [b"inner-vault"]

    def test_failed_invocation_pops_stack(self):
        logs = [
            f"Program {PROGRAM} invoke [1]",
            f"Program {OTHER} invoke [2]",
            f"Program {OTHER} failed: custom program error: 0x1",
            _data(b"after-failure"),
        ]
        assert extract_program_data(logs, PROGRAM) == [b"after-failure"]

    def test_malformed_base64_skipped(self):
        logs = [
            f"Program {PROGRAM} invoke [1]",
            "Program data: !!!not-base64!!!",
            _data(b"ok"),
            f"Program {PROGRAM} success",
        ]
        assert extract_program_data(logs, PROGRAM) == [b"ok"]

    def test_no_logs(self):
        assert extract_program_data([], PROGRAM) == []
