"""
Account state lookup.

Always hits the node: a stale nonce is the main cause of rejected
transactions, so nothing here is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..errors import DecodeError
from ..utils import from_micro_units
from .rpc import RpcClient, join_url


@dataclass(frozen=True)
class AccountState:
    balance: Decimal
    nonce: int


def get_account_state(client: RpcClient, rpc_url: str, address: str) -> AccountState:
    """
    Fetch the current balance and nonce of an address.

    Args:
        client: Shared RPC client
        rpc_url: Node base URL
        address: Account address

    Returns:
        AccountState with the balance scaled from micro-units

    Raises:
        DecodeError: If the balance or nonce fields are missing or malformed
    """
    data = client.get(join_url(rpc_url, f"balance/{address}"))
    if not isinstance(data, dict):
        raise DecodeError(f"Unexpected balance response: {data!r}")

    raw = data.get("balance_raw")
    nonce = data.get("nonce")
    if not isinstance(raw, str):
        raise DecodeError(f"balance_raw must be a string, got {raw!r}")
    try:
        balance = from_micro_units(raw.strip())
    except InvalidOperation as exc:
        raise DecodeError(f"balance_raw is not numeric: {raw!r}") from exc
    if not balance.is_finite():
        raise DecodeError(f"balance_raw is not numeric: {raw!r}")

    # bool is an int subclass
    if isinstance(nonce, bool) or not isinstance(nonce, int) or nonce < 0:
        raise DecodeError(f"nonce must be a non-negative integer, got {nonce!r}")

    return AccountState(balance=balance, nonce=nonce)
