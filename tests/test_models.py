"""
Tests for Automatic Savings models

Test strategy:
1. Unit tests for individual components (models, engine, services)
2. Dispatcher tests wired to in-memory collaborators
3. No real ledger in tests
"""

import json

import pytest
from uuid import uuid4

from automatic_savings.models import (
    UINT128_MAX,
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    BalanceResponse,
    Coin,
    ContractVersion,
    ExecuteMsg,
    InstantiateMsg,
    MessageInfo,
    QueryMsg,
    Response,
    State,
    coins,
)


class TestCoinModels:
    """Tests for money models."""

    def test_coin_creation(self):
        """Test Coin model creation."""
        coin = Coin(denom="UST", amount=8500)
        assert coin.denom == "UST"
        assert coin.amount == 8500

    def test_coin_accepts_string_amount(self):
        """Test that Uint128 strings are accepted."""
        coin = Coin.model_validate({"denom": "uatom", "amount": "1000"})
        assert coin.amount == 1000

    def test_coin_serializes_amount_as_string(self):
        """Test JSON encoding of amounts."""
        data = json.loads(Coin(denom="ETH", amount=2000).model_dump_json())
        assert data == {"denom": "ETH", "amount": "2000"}

    def test_coin_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValueError):
            Coin(denom="BTC", amount=-1)

    def test_coin_rejects_amount_above_uint128(self):
        with pytest.raises(ValueError):
            Coin(denom="BTC", amount=UINT128_MAX + 1)

    @pytest.mark.parametrize("amount", ["true", "8500.0", "8.5e3", "null"])
    def test_coin_rejects_non_integer_json_amount(self, amount):
        """JSON booleans and floats are not read as money."""
        with pytest.raises(ValueError, match="integer or a decimal string"):
            Coin.model_validate_json(f'{{"denom": "UST", "amount": {amount}}}')

    @pytest.mark.parametrize("amount", [True, 8500.0])
    def test_coin_rejects_bool_and_float(self, amount):
        with pytest.raises(ValueError):
            Coin(denom="UST", amount=amount)

    @pytest.mark.parametrize("amount", ["8.5", " 12", "-1", "1_000", "", "0x10"])
    def test_coin_rejects_non_decimal_strings(self, amount):
        with pytest.raises(ValueError):
            Coin.model_validate({"denom": "UST", "amount": amount})

    def test_coin_rejects_empty_denom(self):
        with pytest.raises(ValueError):
            Coin(denom="", amount=1)

    def test_coins_helper(self):
        assert coins(2, "BTC") == [Coin(denom="BTC", amount=2)]

    def test_money_set_rejects_duplicate_denoms(self):
        """Test that a money set can't name a denomination twice."""
        with pytest.raises(ValueError, match="Duplicate denomination"):
            MessageInfo(
                sender="anyone",
                funds=[Coin(denom="BTC", amount=1), Coin(denom="BTC", amount=2)],
            )

    def test_money_set_keeps_order(self):
        funds = [Coin(denom="uatom", amount=5), Coin(denom="BTC", amount=1)]
        info = MessageInfo(sender="anyone", funds=funds)
        assert [c.denom for c in info.funds] == ["uatom", "BTC"]


class TestStateModels:
    """Tests for persisted records."""

    def test_state_creation(self):
        state = State(owner="wasm1owner", amount_received=coins(2, "BTC"), savings_rate=15)
        assert state.savings_rate == 15
        assert state.amount_received == coins(2, "BTC")

    def test_state_accepts_out_of_range_rate(self):
        """Rates are not range-checked when stored."""
        state = State(owner="wasm1owner", savings_rate=200)
        assert state.savings_rate == 200

    def test_state_rejects_rate_above_u8(self):
        with pytest.raises(ValueError):
            State(owner="wasm1owner", savings_rate=256)

    def test_state_json_round_trip_is_stable(self):
        state = State(owner="wasm1owner", amount_received=coins(2, "BTC"), savings_rate=15)
        raw = state.model_dump_json()
        assert State.model_validate_json(raw) == state
        assert State.model_validate_json(raw).model_dump_json() == raw

    def test_contract_version_requires_values(self):
        with pytest.raises(ValueError):
            ContractVersion(contract="", version="0.1.0")


class TestMessages:
    """Tests for message decoding."""

    def test_instantiate_msg(self):
        msg = InstantiateMsg.model_validate_json('{"savings_rate": 15}')
        assert msg.savings_rate == 15

    def test_instantiate_msg_rejects_rate_above_u8(self):
        with pytest.raises(ValueError):
            InstantiateMsg(savings_rate=300)

    def test_transfer_msg_decodes(self):
        """Test the externally-tagged transfer layout."""
        msg = ExecuteMsg.model_validate_json(
            '{"transfer": {"received_funds": {"denom": "UST", "amount": "8500"},'
            ' "savings_rate": 15}}'
        )
        assert msg.transfer is not None
        assert msg.flush is None
        assert msg.transfer.received_funds == Coin(denom="UST", amount=8500)
        assert msg.transfer.savings_rate == 15

    def test_flush_msg_decodes(self):
        msg = ExecuteMsg.model_validate_json('{"flush": {}}')
        assert msg.flush is not None
        assert msg.transfer is None

    def test_execute_msg_requires_a_variant(self):
        with pytest.raises(ValueError, match="exactly one"):
            ExecuteMsg.model_validate({})

    def test_execute_msg_rejects_two_variants(self):
        with pytest.raises(ValueError, match="exactly one"):
            ExecuteMsg.model_validate({
                "transfer": {"received_funds": {"denom": "UST", "amount": "1"}, "savings_rate": 15},
                "flush": {},
            })

    def test_transfer_rejects_boolean_amount(self):
        with pytest.raises(ValueError):
            ExecuteMsg.model_validate_json(
                '{"transfer": {"received_funds": {"denom": "UST", "amount": true},'
                ' "savings_rate": 15}}'
            )

    def test_transfer_rejects_unknown_field(self):
        with pytest.raises(ValueError, match="bogus"):
            ExecuteMsg.model_validate({
                "transfer": {
                    "received_funds": {"denom": "UST", "amount": "1"},
                    "savings_rate": 15,
                    "bogus": 1,
                },
            })

    def test_instantiate_msg_rejects_unknown_field(self):
        with pytest.raises(ValueError, match="owner"):
            InstantiateMsg.model_validate_json('{"savings_rate": 15, "owner": "wasm1me"}')

    def test_execute_msg_rejects_unknown_variant(self):
        with pytest.raises(ValueError):
            ExecuteMsg.model_validate({"withdraw": {}})

    def test_query_msg_decodes(self):
        msg = QueryMsg.model_validate_json('{"get_balance": {}}')
        assert msg.get_balance is not None

    def test_balance_response_json(self):
        response = BalanceResponse(balance=coins(2000, "ETH"))
        assert json.loads(response.model_dump_json()) == {
            "balance": [{"denom": "ETH", "amount": "2000"}]
        }


class TestResponse:
    """Tests for the Response builder."""

    def test_response_builder_chains(self):
        response = Response().add_attribute("action", "flush").add_attribute("rate", "15")
        assert [(a.key, a.value) for a in response.attributes] == [
            ("action", "flush"),
            ("rate", "15"),
        ]
        assert response.messages == []

    def test_response_attribute_lookup(self):
        response = Response().add_attribute("action", "transfer")
        assert response.attribute("action") == "transfer"
        assert response.attribute("missing") is None


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.TRANSFER_SPLIT,
            description="Test split",
        )
        assert event.event_type == AuditEventType.TRANSFER_SPLIT
        assert event.severity == AuditSeverity.INFO

    def test_audit_severity_levels(self):
        """Audit events are either routine (info) or diagnostic (debug)."""
        assert [s.value for s in AuditSeverity] == ["debug", "info"]
        with pytest.raises(ValueError):
            AuditEvent(
                event_type=AuditEventType.TRANSFER_SPLIT,
                description="Test split",
                severity="warning",
            )

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEvent(
            event_type=AuditEventType.BALANCE_FLUSHED,
            description="Flushed",
            details={"balance": [{"denom": "ETH", "amount": "2000"}]},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "balance_flushed"
        assert log_dict["details"]["balance"][0]["denom"] == "ETH"

    def test_audit_event_builder_transfer_split(self):
        """Test AuditEventBuilder.transfer_split."""
        correlation_id = uuid4()

        event = AuditEventBuilder.transfer_split(
            sender="wasm1owner",
            received=Coin(denom="UST", amount=8500),
            forwarded=Coin(denom="UST", amount=7225),
            savings_rate=15,
            correlation_id=correlation_id,
        )

        assert event.event_type == AuditEventType.TRANSFER_SPLIT
        assert event.correlation_id == correlation_id
        assert event.details["forwarded"] == "7225"
        assert event.details["denom"] == "UST"

    def test_audit_event_builder_balance_queried_is_debug(self):
        event = AuditEventBuilder.balance_queried(
            contract_address="cosmos2contract",
            balance=[],
        )
        assert event.severity == AuditSeverity.DEBUG
        assert event.details["balance"] == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
