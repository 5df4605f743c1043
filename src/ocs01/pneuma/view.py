"""Read-only contract calls. Unsigned, no nonce, no retry."""

from __future__ import annotations

import json
from typing import Any, Sequence

from ..errors import ContractError
from .rpc import RpcClient, join_url


def render_result(result: Any) -> str:
    if result is None:
        return "null"
    if isinstance(result, str):
        return result
    return json.dumps(result)


def call_view(
    client: RpcClient,
    rpc_url: str,
    contract: str,
    method: str,
    params: Sequence[str],
    caller: str,
) -> str:
    """
    Query a view method.

    Args:
        client: Shared RPC client
        rpc_url: Node base URL
        contract: Contract address
        method: View method name
        params: String-encoded arguments
        caller: Address the query is made on behalf of

    Returns:
        The result in textual form, ``"null"`` when the node sent none

    Raises:
        ContractError: If the node reports any status other than "success"
    """
    response = client.post(
        join_url(rpc_url, "contract/call-view"),
        {
            "contract": contract,
            "method": method,
            "params": list(params),
            "caller": caller,
        },
    )
    if not isinstance(response, dict) or response.get("status") != "success":
        raise ContractError(response)
    return render_result(response.get("result"))
