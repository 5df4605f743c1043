__all__ = [
    # Errors
    "Ocs01Error",
    "ConfigError",
    "RpcError",
    "NetworkError",
    "ApiError",
    "DecodeError",
    "MissingTxHashError",
    "ContractError",
    "RetryExhausted",
    # Config
    "Wallet",
    "ParamSpec",
    "MethodSpec",
    "ContractInterface",
    "SchemaRegistry",
    "SchemaValidationError",
    # Node interaction
    "RpcClient",
    "AccountState",
    "get_account_state",
    "call_view",
    "Transaction",
    "TransactionSubmitter",
    "SubmitState",
    "AttemptFailure",
    # Signing
    "CryptoError",
    "SignatureError",
    "canonicalize",
    "sign",
    "verify",
    "encode_signature",
    "encode_public_key",
    "load_signing_key",
    # Dispatch
    "Dispatcher",
    "MethodOutcome",
    "RandomParamGenerator",
]

from .errors import (
    ApiError,
    ConfigError,
    ContractError,
    DecodeError,
    MissingTxHashError,
    NetworkError,
    Ocs01Error,
    RetryExhausted,
    RpcError,
)
from .config.models import ContractInterface, MethodSpec, ParamSpec, Wallet
from .config.schemas import SchemaRegistry, SchemaValidationError
from .pneuma.account import AccountState, get_account_state
from .pneuma.rpc import RpcClient
from .pneuma.transaction import Transaction
from .pneuma.tx import AttemptFailure, SubmitState, TransactionSubmitter
from .pneuma.view import call_view
from .sigil.crypto import (
    CryptoError,
    SignatureError,
    canonicalize,
    encode_public_key,
    encode_signature,
    load_signing_key,
    sign,
    verify,
)
from .theurgy.dispatch import Dispatcher
from .theurgy.params import RandomParamGenerator
from .theurgy.report import MethodOutcome
