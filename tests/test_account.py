"""Tests for account state lookup."""

from __future__ import annotations

from decimal import Decimal

import httpx
import pytest

from conftest import ADDRESS, RPC_URL, FakeNode
from ocs01.errors import ApiError, DecodeError
from ocs01.pneuma.account import AccountState, get_account_state
from ocs01.pneuma.rpc import RpcClient


def _client_returning(payload) -> RpcClient:
    return RpcClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=payload)))


def test_balance_scaled_from_micro_units(node: FakeNode) -> None:
    state = get_account_state(node.client(), RPC_URL, ADDRESS)
    assert state == AccountState(balance=Decimal("2.5"), nonce=5)
    assert state.balance == 2.5


def test_queries_balance_endpoint_for_address(node: FakeNode) -> None:
    get_account_state(node.client(), RPC_URL, ADDRESS)
    assert node.requests[0].method == "GET"
    assert str(node.requests[0].url) == f"{RPC_URL}/balance/{ADDRESS}"


def test_never_cached() -> None:
    node = FakeNode(nonces=[5, 6, 9])
    client = node.client()
    assert [get_account_state(client, RPC_URL, ADDRESS).nonce for _ in range(3)] == [5, 6, 9]
    assert len(node.requests) == 3


def test_small_balance_keeps_precision() -> None:
    state = get_account_state(_client_returning({"balance_raw": "1", "nonce": 0}), RPC_URL, ADDRESS)
    assert state.balance == Decimal("0.000001")


@pytest.mark.parametrize("raw", ["abc", "", "12x", "NaN"])
def test_non_numeric_balance_raises_decode_error(raw: str) -> None:
    with pytest.raises(DecodeError):
        get_account_state(_client_returning({"balance_raw": raw, "nonce": 1}), RPC_URL, ADDRESS)


@pytest.mark.parametrize(
    "payload",
    [
        {"nonce": 1},
        {"balance_raw": 100, "nonce": 1},
        {"balance_raw": "100"},
        {"balance_raw": "100", "nonce": "1"},
        {"balance_raw": "100", "nonce": -1},
        {"balance_raw": "100", "nonce": True},
        ["not", "an", "object"],
    ],
)
def test_shape_mismatch_raises_decode_error(payload) -> None:
    with pytest.raises(DecodeError):
        get_account_state(_client_returning(payload), RPC_URL, ADDRESS)


def test_rpc_errors_propagate() -> None:
    client = RpcClient(transport=httpx.MockTransport(lambda request: httpx.Response(500, text="down")))
    with pytest.raises(ApiError):
        get_account_state(client, RPC_URL, ADDRESS)
