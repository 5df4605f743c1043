"""
Theurgy Run - exercise every method of a contract interface.

Loads the wallet and interface, prints the wallet balance, then dispatches
each declared method (view or call) in order, writing one report line per
method.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..config.models import ContractInterface
from ..errors import ConfigError, RpcError
from ..pneuma.account import get_account_state
from ..pneuma.rpc import DEFAULT_TIMEOUT, RpcClient
from ..pneuma.tx import MAX_ATTEMPTS, RETRY_DELAY, TransactionSubmitter
from ..utils import format_amount
from .dispatch import METHOD_DELAY, Dispatcher
from .report import DEFAULT_REPORT_PATH, ConsoleReporter, ReportLog
from .wallet import DEFAULT_INTERFACE_PATH, DEFAULT_WALLET_PATH, fail, load_wallet


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
@click.option(
    "--interface",
    "interface_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_INTERFACE_PATH,
    envvar="OCS01_INTERFACE",
    show_default=True,
    help="Contract interface file",
)
@click.option(
    "--report",
    "report_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_REPORT_PATH,
    envvar="OCS01_REPORT",
    show_default=True,
    help="Append-only report file",
)
@click.option("--rpc-url", envvar="OCS01_RPC_URL", default=None, help="Override the wallet's RPC URL")
@click.option("--delay", default=METHOD_DELAY, type=float, show_default=True, help="Pause between methods in seconds")
@click.option("--retry-delay", default=RETRY_DELAY, type=float, show_default=True, help="Pause between attempts in seconds")
@click.option("--timeout", default=DEFAULT_TIMEOUT, type=float, show_default=True, help="Request timeout in seconds")
def run(
    wallet_path: Path,
    interface_path: Path,
    report_path: Path,
    rpc_url: Optional[str],
    delay: float,
    retry_delay: float,
    timeout: float,
) -> None:
    """
    Exercise every method declared in the contract interface.

    View methods are queried without signing. Call methods are signed and
    submitted, retrying up to three times with a fresh nonce.
    """
    wallet, private_key = load_wallet(wallet_path, rpc_url)
    try:
        interface = ContractInterface.from_path(interface_path)
    except ConfigError as exc:
        fail(exc)

    click.secho(f"✅ Wallet loaded: {wallet.addr}", fg="green")

    console = ConsoleReporter()
    with RpcClient(timeout=timeout) as client:
        try:
            state = get_account_state(client, wallet.rpc, wallet.addr)
        except RpcError as exc:
            fail(exc)
        click.echo(f"💰 Balance: {format_amount(state.balance)} OCT")

        submitter = TransactionSubmitter(
            client,
            wallet.rpc,
            private_key,
            wallet.addr,
            max_attempts=MAX_ATTEMPTS,
            retry_delay=retry_delay,
            on_attempt_failed=console.attempt_failed,
        )
        dispatcher = Dispatcher(
            interface,
            client,
            wallet.rpc,
            wallet.addr,
            submitter,
            reporters=[console, ReportLog(report_path)],
            delay=delay,
        )
        outcomes = dispatcher.run()

    succeeded = sum(1 for o in outcomes if o.ok)
    click.echo("")
    click.secho(
        f"🎯 Done! {succeeded}/{len(outcomes)} methods succeeded. Report: {report_path}",
        fg="cyan",
    )
