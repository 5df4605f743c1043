"""
Transaction Submitter - build, sign, and send contract-call transactions.

Each attempt runs FETCHING -> SIGNING -> SUBMITTING from scratch: the nonce
is refetched, a new timestamp is taken and the transaction is re-signed.
A failed attempt is discarded entirely before the next one starts.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from cryptography.hazmat.primitives.asymmetric import ed25519

from ..errors import MissingTxHashError, RetryExhausted, RpcError
from ..sigil.crypto import encode_public_key, encode_signature, sign
from .account import get_account_state
from .rpc import RpcClient, join_url
from .transaction import Transaction

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
RETRY_DELAY = 2.0


class SubmitState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    SIGNING = "signing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class AttemptFailure:
    attempt: int
    max_attempts: int
    state: SubmitState
    error: RpcError

    def __str__(self) -> str:
        return f"Attempt {self.attempt}/{self.max_attempts} failed: {self.error}"


def build_call_request(
    tx: Transaction,
    method: str,
    params: Sequence[str],
    signature: bytes,
    public_key: str,
) -> dict[str, Any]:
    """Build the ``/call-contract`` request body for a signed transaction."""
    return {
        "contract": tx.to_,
        "method": method,
        "params": list(params),
        "caller": tx.from_,
        "nonce": tx.nonce,
        "timestamp": tx.timestamp,
        "signature": encode_signature(signature),
        "public_key": public_key,
    }


def extract_tx_hash(response: Any) -> str:
    """Return the transaction hash, failing on an absent or empty one."""
    tx_hash = response.get("tx_hash") if isinstance(response, dict) else None
    if not isinstance(tx_hash, str) or not tx_hash:
        raise MissingTxHashError(f"No transaction hash in response: {response!r}")
    return tx_hash


class TransactionSubmitter:
    """
    Retrying submitter for state-changing contract calls.

    Args:
        client: Shared RPC client
        rpc_url: Node base URL
        private_key: Wallet signing key (read-only)
        address: Wallet address, used as ``from`` and ``caller``
        max_attempts: Attempts before giving up
        retry_delay: Fixed pause between attempts, in seconds
        sleep: Sleep function (injectable for tests)
        clock: Timestamp source in seconds since epoch
        on_attempt_failed: Called with each AttemptFailure before the next attempt
    """

    def __init__(
        self,
        client: RpcClient,
        rpc_url: str,
        private_key: ed25519.Ed25519PrivateKey,
        address: str,
        *,
        max_attempts: int = MAX_ATTEMPTS,
        retry_delay: float = RETRY_DELAY,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.time,
        on_attempt_failed: Optional[Callable[[AttemptFailure], None]] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.client = client
        self.rpc_url = rpc_url
        self.address = address
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._private_key = private_key
        self._public_key = encode_public_key(private_key)
        self._sleep = sleep
        self._clock = clock
        self._on_attempt_failed = on_attempt_failed
        self.state = SubmitState.IDLE
        self.failures: list[AttemptFailure] = []

    def submit(self, contract: str, method: str, params: Sequence[str]) -> str:
        """
        Submit a contract call, retrying failed attempts.

        Args:
            contract: Contract address
            method: Contract method name
            params: String-encoded arguments

        Returns:
            Transaction hash accepted by the node

        Raises:
            RetryExhausted: If every attempt failed
        """
        self.failures = []
        for attempt in range(1, self.max_attempts + 1):
            try:
                tx_hash = self._attempt(contract, method, params)
            except RpcError as exc:
                failure = AttemptFailure(
                    attempt=attempt,
                    max_attempts=self.max_attempts,
                    state=self.state,
                    error=exc,
                )
                self.failures.append(failure)
                self._report(failure)
                if attempt < self.max_attempts:
                    self._sleep(self.retry_delay)
                continue

            self.state = SubmitState.SUCCEEDED
            logger.info("%s accepted on attempt %d: %s", method, attempt, tx_hash)
            return tx_hash

        self.state = SubmitState.FAILED
        raise RetryExhausted(list(self.failures))

    def _attempt(self, contract: str, method: str, params: Sequence[str]) -> str:
        self.state = SubmitState.FETCHING
        account = get_account_state(self.client, self.rpc_url, self.address)

        self.state = SubmitState.SIGNING
        tx = Transaction.for_contract_call(
            sender=self.address,
            contract=contract,
            observed_nonce=account.nonce,
            timestamp=self._clock(),
        )
        signature = sign(self._private_key, tx)

        self.state = SubmitState.SUBMITTING
        body = build_call_request(tx, method, params, signature, self._public_key)
        response = self.client.post(join_url(self.rpc_url, "call-contract"), body)
        return extract_tx_hash(response)

    def _report(self, failure: AttemptFailure) -> None:
        logger.warning("%s (while %s)", failure, failure.state.value)
        if self._on_attempt_failed is not None:
            self._on_attempt_failed(failure)
