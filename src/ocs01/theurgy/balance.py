"""
Theurgy Balance - show the wallet's balance and nonce.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..errors import RpcError
from ..pneuma.account import get_account_state
from ..pneuma.rpc import DEFAULT_TIMEOUT, RpcClient
from ..utils import format_amount
from .wallet import DEFAULT_WALLET_PATH, fail, load_wallet


@click.command()
@click.option(
    "--wallet",
    "wallet_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_WALLET_PATH,
    envvar="OCS01_WALLET",
    show_default=True,
    help="Wallet file",
)
@click.option("--address", default=None, help="Address to query (default: wallet address)")
@click.option("--rpc-url", envvar="OCS01_RPC_URL", default=None, help="Override the wallet's RPC URL")
@click.option("--timeout", default=DEFAULT_TIMEOUT, type=float, show_default=True, help="Request timeout in seconds")
def balance(wallet_path: Path, address: Optional[str], rpc_url: Optional[str], timeout: float) -> None:
    """Show balance and nonce for an address."""
    wallet, _ = load_wallet(wallet_path, rpc_url)
    address = address or wallet.addr

    try:
        with RpcClient(timeout=timeout) as client:
            state = get_account_state(client, wallet.rpc, address)
    except RpcError as exc:
        fail(exc)

    click.echo(f"  Address: {address}")
    click.echo(f"  Balance: {format_amount(state.balance)} OCT")
    click.echo(f"  Nonce:   {state.nonce}")
