"""
ocs01 CLI

Command-line interface for exercising a deployed contract's methods.

Commands:
  run      - Query view methods and submit call transactions
  balance  - Show wallet balance and nonce
  whoami   - Show wallet address and public key
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from .sigil.crypto import encode_public_key


# ============ Constants ============

VERSION = "0.1.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo(
        click.style("        O C S 0 1", fg="bright_white", bold=True)
        + click.style(f"        v{VERSION}", dim=True)
    )
    click.secho("     ─── Contract Method Exerciser ───", fg="cyan")
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="ocs01")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """ocs01 — contract method exerciser."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .theurgy.balance import balance
from .theurgy.run import run
from .theurgy.wallet import DEFAULT_WALLET_PATH, load_wallet

cli.add_command(run)
cli.add_command(balance)


# ============ Identity ============


@cli.command()
@click.option(
    "--wallet",
    "wallet_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_WALLET_PATH,
    envvar="OCS01_WALLET",
    show_default=True,
    help="Wallet file",
)
def whoami(wallet_path: Path) -> None:
    """Show wallet address and public key."""
    wallet, private_key = load_wallet(wallet_path)
    click.echo(f"Address:    {wallet.addr}")
    click.echo(f"Public key: {encode_public_key(private_key)}")
    click.echo(f"RPC:        {wallet.rpc}")


# ============ Entry Points ============


def main() -> None:
    """ocs01 CLI entry point."""
    # Ensure UTF-8 output on Windows (for the progress symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: non-tty stream
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
