"""Tests for the recursive event normalizer."""

import json
from dataclasses import dataclass, field
from decimal import Decimal
from unittest.mock import MagicMock

import base58
import pytest
from solders.pubkey import Pubkey

from vaultwatch.domain.enums import OverflowPolicy
from vaultwatch.exceptions import SchemaMismatchError
from vaultwatch.normalizer import MAX_SAFE_INTEGER, EventNormalizer, build_vault_field_policy, normalize

USER = Pubkey.from_string("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")


class TestScalars:
    def test_none(self):
        assert normalize(None) is None

    def test_primitives_pass_through(self):
        assert normalize("abc") == "abc"
        assert normalize(True) is True
        assert normalize(False) is False
        assert normalize(1.25) == 1.25

    def test_pubkey_to_base58(self):
        assert normalize(USER) == "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

    def test_raw_32_bytes_to_base58(self):
        assert normalize(bytes(USER)) == str(USER)
        assert normalize(bytes(32)) == base58.b58encode(bytes(32)).decode()

    def test_other_bytes_to_hex(self):
        result = normalize({"memo": b"\xff\x00\x01", "empty": b"", "buf": bytearray(b"\x0a")})

        assert result == {"memo": "0xff0001", "empty": "0x", "buf": "0x0a"}
        assert json.loads(json.dumps(result)) == result

    def test_safe_integer_stays_exact(self):
        assert normalize(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER
        assert normalize(-MAX_SAFE_INTEGER) == -MAX_SAFE_INTEGER
        assert normalize(0) == 0

    def test_unsafe_integer_becomes_exact_string(self):
        big = 2**64 - 1
        assert normalize(big) == "18446744073709551615"
        assert normalize(MAX_SAFE_INTEGER + 1) == str(MAX_SAFE_INTEGER + 1)
        assert normalize(-(2**80)) == str(-(2**80))

    def test_unsafe_integer_reports_diagnostic(self):
        reporter = MagicMock()
        normalize(2**64, reporter=reporter)
        reporter.warning.assert_called_once()

    def test_decimal_literal_always_string(self):
        assert normalize(Decimal(5)) == "5"
        assert normalize(Decimal("123456789012345678901234567890")) == "123456789012345678901234567890"

    def test_unknown_type_passes_through(self):
        marker = object()
        assert normalize(marker) is marker


class TestContainers:
    def test_structural_fidelity(self):
        result = normalize({"a": 5, "padding": 9, "b": {"c": [1, 2, 3]}})
        assert result == {"a": 5, "b": {"c": [1, 2, 3]}}

    def test_empty_sequence_kept(self):
        assert normalize({"items": []}) == {"items": []}

    def test_tuple_becomes_list(self):
        assert normalize((1, USER)) == [1, str(USER)]

    def test_nested_sequences_preserve_order(self):
        assert normalize([[3, 2], [1]]) == [[3, 2], [1]]

    def test_dataclass_struct(self):
        @dataclass
        class Fees:
            manager_fee: int
            padding0: list[int] = field(default_factory=lambda: [0] * 8)

        assert normalize(Fees(manager_fee=2**70)) == {"manager_fee": str(2**70)}


class TestSuppression:
    @pytest.mark.parametrize("name", ["padding1", "_padding", "reserved", "_reserved_x"])
    def test_suppressed_names_absent(self, name):
        result = normalize({name: {"deep": [2**90, USER]}, "kept": 1})
        assert result == {"kept": 1}

    def test_suppressed_subtree_not_visited(self):
        reporter = MagicMock()
        normalize({"reserved0": 2**90}, reporter=reporter)
        reporter.warning.assert_not_called()

    def test_suppression_in_nested_structs(self):
        data = {"vault": {"config": {"maxCap": 10, "reserved": [0] * 64}}}
        assert normalize(data) == {"vault": {"config": {"maxCap": 10}}}


class TestDecimalFields:
    def test_decimal_field_precedence(self):
        result = normalize({"vaultHighestAssetPerLpDecimalBitsBefore": 281474976710656})
        assert result == {"vaultHighestAssetPerLpDecimalBitsBefore": 1}

    def test_decimal_field_nested(self):
        result = normalize({"outer": [{"vaultHighestAssetPerLpDecimalBitsAfter": 3 * 2**47}]})
        assert result == {"outer": [{"vaultHighestAssetPerLpDecimalBitsAfter": 1.5}]}

    def test_same_value_in_ordinary_field_stays_integer(self):
        assert normalize({"amount": 281474976710656}) == {"amount": 281474976710656}

    def test_unrepresentable_decimal_falls_back_to_string(self):
        result = normalize({"amountAssetToWithdrawDecimalBits": 2**100 + 1})
        value = result["amountAssetToWithdrawDecimalBits"]
        assert isinstance(value, str)
        assert Decimal(value) * Decimal(2**48) == Decimal(2**100 + 1)

    def test_sentinel_policy(self):
        result = normalize(
            {"amountAssetToWithdrawDecimalBits": 2**100 + 1},
            overflow_policy=OverflowPolicy.SENTINEL,
        )
        assert result == {"amountAssetToWithdrawDecimalBits": None}

    def test_custom_decimal_field_set(self):
        assert normalize({"price": 2**48}, {"price"}) == {"price": 1.0}

    def test_mismatch_passes_through_with_warning(self):
        reporter = MagicMock()
        result = normalize({"amountAssetToWithdrawDecimalBits": USER}, reporter=reporter)
        assert result == {"amountAssetToWithdrawDecimalBits": str(USER)}
        reporter.warning.assert_called_once()

    def test_mismatch_raises_in_strict_mode(self):
        with pytest.raises(SchemaMismatchError) as exc_info:
            normalize({"amountAssetToWithdrawDecimalBits": [1, 2]}, strict=True)
        assert exc_info.value.field_name == "amountAssetToWithdrawDecimalBits"

    def test_bool_is_not_a_big_integer(self):
        with pytest.raises(SchemaMismatchError):
            normalize({"amountAssetToWithdrawDecimalBits": True}, strict=True)


class TestIdempotence:
    def test_normalizing_output_is_a_no_op(self):
        data = {
            "vault": USER,
            "amount": 2**64,
            "count": 7,
            "vaultHighestAssetPerLpDecimalBitsBefore": 2**48,
            "amountAssetToWithdrawDecimalBits": 2**100 + 1,
            "history": [{"slot": 1, "reserved": 0}],
            "label": None,
        }
        once = normalize(data, strict=True)
        assert normalize(once, strict=True) == once

    def test_output_is_json_serializable(self):
        data = {"user": USER, "amount": 2**64, "items": (Decimal("1.5"), 3)}
        json.dumps(normalize(data))


class TestEventNormalizer:
    def test_normalize_event_uses_schema_fields(self):
        normalizer = EventNormalizer(build_vault_field_policy())
        result = normalizer.normalize_event(
            "depositVaultEvent",
            {"amountAssetToWithdrawDecimalBits": 2**48, "reserved0": 0, "user": USER},
        )
        assert result == {"amountAssetToWithdrawDecimalBits": 1, "user": str(USER)}

    def test_reporter_is_injected(self):
        reporter = MagicMock()
        normalizer = EventNormalizer(reporter=reporter)
        normalizer.normalize_event("anyEvent", {"n": 2**60})
        reporter.warning.assert_called_once()
