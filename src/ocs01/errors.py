from __future__ import annotations


class Ocs01Error(RuntimeError):
    exit_code: int = 1


class ConfigError(Ocs01Error):
    exit_code = 2


class RpcError(Ocs01Error):
    exit_code = 3


class NetworkError(RpcError):
    pass


class ApiError(RpcError):
    def __init__(self, status: int, body_text: str) -> None:
        super().__init__(f"api error ({status}): {body_text}")
        self.status = status
        self.body_text = body_text


class DecodeError(RpcError):
    pass


class MissingTxHashError(DecodeError):
    pass


class ContractError(Ocs01Error):
    exit_code = 4

    def __init__(self, raw_response: object) -> None:
        super().__init__(f"Error: {raw_response!r}")
        self.raw_response = raw_response


class RetryExhausted(Ocs01Error):
    exit_code = 5

    def __init__(self, failures: list) -> None:
        last = failures[-1].error if failures else None
        message = f"All retries failed ({len(failures)} attempts)"
        if last is not None:
            message += f": {last}"
        super().__init__(message)
        self.failures = failures
