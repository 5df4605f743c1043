from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OU = "1"


@dataclass(frozen=True)
class Transaction:
    """Fields covered by a contract-call signature.

    ``to_`` is the contract address; ``amount`` is ``"0"`` for contract
    calls and ``nonce`` is the sender's observed nonce plus one.
    """

    from_: str
    to_: str
    amount: str
    nonce: int
    ou: str
    timestamp: float

    @classmethod
    def for_contract_call(
        cls,
        sender: str,
        contract: str,
        observed_nonce: int,
        timestamp: float,
    ) -> "Transaction":
        return cls(
            from_=sender,
            to_=contract,
            amount="0",
            nonce=observed_nonce + 1,
            ou=DEFAULT_OU,
            timestamp=timestamp,
        )
