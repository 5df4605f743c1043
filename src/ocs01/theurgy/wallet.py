"""Shared startup helpers for commands that need the wallet."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..config.models import Wallet
from ..errors import ConfigError, Ocs01Error
from ..sigil.crypto import CryptoError, load_signing_key

DEFAULT_WALLET_PATH = Path("wallet.json")
DEFAULT_INTERFACE_PATH = Path("exec_interface.json")


def fail(exc: Exception, exit_code: Optional[int] = None) -> NoReturn:
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    if exit_code is None:
        exit_code = exc.exit_code if isinstance(exc, Ocs01Error) else 1
    sys.exit(exit_code)


def load_wallet(path: Path, rpc_url: Optional[str] = None) -> tuple[Wallet, ed25519.Ed25519PrivateKey]:
    """Load the wallet and its signing key; any problem here is fatal."""
    try:
        wallet = Wallet.from_path(path).with_rpc(rpc_url)
    except ConfigError as exc:
        fail(exc)
    try:
        private_key = load_signing_key(wallet.priv)
    except CryptoError as exc:
        fail(ConfigError(f"Invalid private key in {path}: {exc}"))
    return wallet, private_key
