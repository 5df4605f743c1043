from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from ocs01.pneuma.rpc import RpcClient
from ocs01.sigil.crypto import generate_seed, load_signing_key

ADDRESS = "octTestAddress1111111111111111111111111111"
CONTRACT = "octContract22222222222222222222222222222222"
RPC_URL = "http://node.test"


class FakeNode:
    """In-memory node served through ``httpx.MockTransport``.

    ``nonces`` is consumed one value per balance request (the last value
    repeats). ``call_responses`` is consumed one item per call-contract
    request: a dict becomes a 200 JSON response, an ``httpx.Response`` is
    returned as is and an exception class is raised as a transport error.
    """

    def __init__(self, balance_raw: str = "2500000", nonces: list[int] | None = None) -> None:
        self.balance_raw = balance_raw
        self.nonces = list(nonces or [5])
        self.call_responses: list[Any] = []
        self.view_response: Any = {"status": "success", "result": "42"}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "GET" and path.startswith("/balance/"):
            nonce = self.nonces.pop(0) if len(self.nonces) > 1 else self.nonces[0]
            return httpx.Response(200, json={"balance_raw": self.balance_raw, "nonce": nonce})

        if request.method == "POST" and path == "/contract/call-view":
            if isinstance(self.view_response, httpx.Response):
                return self.view_response
            return httpx.Response(200, json=self.view_response)

        if request.method == "POST" and path == "/call-contract":
            item = self.call_responses.pop(0) if self.call_responses else {"tx_hash": "txhash-ok"}
            if isinstance(item, type) and issubclass(item, Exception):
                raise item("simulated transport failure", request=request)
            if isinstance(item, httpx.Response):
                return item
            return httpx.Response(200, json=item)

        return httpx.Response(404, text=f"no route for {request.method} {path}")

    def client(self) -> RpcClient:
        return RpcClient(transport=httpx.MockTransport(self.handler))

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def bodies(self, path: str) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests if r.url.path == path]


@pytest.fixture()
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture()
def seed() -> str:
    return generate_seed()


@pytest.fixture()
def private_key(seed: str):
    return load_signing_key(seed)


@pytest.fixture()
def wallet_file(tmp_path: Path, seed: str) -> Path:
    path = tmp_path / "wallet.json"
    path.write_text(json.dumps({"priv": seed, "addr": ADDRESS, "rpc": RPC_URL}), encoding="utf-8")
    return path


@pytest.fixture()
def interface_file(tmp_path: Path) -> Path:
    path = tmp_path / "exec_interface.json"
    payload = {
        "contract": CONTRACT,
        "methods": [
            {
                "name": "getCounter",
                "label": "Read counter",
                "params": [],
                "type": "view",
            },
            {
                "name": "increment",
                "label": "Increment counter",
                "params": [{"name": "amount", "type": "number", "max": 10}],
                "type": "call",
            },
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
