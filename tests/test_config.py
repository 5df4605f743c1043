"""Tests for wallet and interface loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ocs01.config.models import ContractInterface, ParamSpec, Wallet
from ocs01.config.schemas import SchemaRegistry, SchemaValidationError, load_json
from ocs01.errors import ConfigError


def _write(tmp_path: Path, name: str, payload) -> Path:
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


class TestWallet:
    def test_from_path(self, wallet_file: Path, seed: str) -> None:
        wallet = Wallet.from_path(wallet_file)
        assert wallet.priv == seed
        assert wallet.rpc == "http://node.test"

    def test_trailing_slash_stripped(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "wallet.json", {"priv": "x", "addr": "a", "rpc": "http://n/"})
        assert Wallet.from_path(path).rpc == "http://n"

    def test_rpc_override(self, wallet_file: Path) -> None:
        wallet = Wallet.from_path(wallet_file)
        assert wallet.with_rpc("https://other/").rpc == "https://other"
        assert wallet.with_rpc(None) is wallet

    def test_repr_hides_private_key(self, wallet_file: Path, seed: str) -> None:
        assert seed not in repr(Wallet.from_path(wallet_file))

    @pytest.mark.parametrize(
        "payload",
        [
            {"addr": "a", "rpc": "http://n"},
            {"priv": "x", "rpc": "http://n"},
            {"priv": "x", "addr": "a", "rpc": "ftp://n"},
            {"priv": 1, "addr": "a", "rpc": "http://n"},
        ],
    )
    def test_invalid_wallet(self, tmp_path: Path, payload) -> None:
        path = _write(tmp_path, "wallet.json", payload)
        with pytest.raises(SchemaValidationError) as excinfo:
            Wallet.from_path(path)
        assert excinfo.value.errors

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            Wallet.from_path(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            Wallet.from_path(_write(tmp_path, "wallet.json", "{not json"))


class TestInterface:
    def test_from_path(self, interface_file: Path) -> None:
        interface = ContractInterface.from_path(interface_file)
        assert [m.name for m in interface.methods] == ["getCounter", "increment"]
        view, call = interface.methods
        assert view.is_view and not view.is_call
        assert call.is_call
        assert call.params == (ParamSpec(name="amount", type="number", example=None, max=10),)

    def test_unknown_kind_is_loaded(self, tmp_path: Path) -> None:
        payload = {
            "contract": "c",
            "methods": [{"name": "m", "label": "M", "params": [], "type": "event"}],
        }
        method = ContractInterface.from_path(_write(tmp_path, "i.json", payload)).methods[0]
        assert method.kind == "event"
        assert not method.is_view and not method.is_call

    def test_example_and_null_max(self, tmp_path: Path) -> None:
        payload = {
            "contract": "c",
            "methods": [
                {
                    "name": "m",
                    "label": "M",
                    "params": [{"name": "to", "type": "address", "example": "octA", "max": None}],
                    "type": "call",
                }
            ],
        }
        param = ContractInterface.from_path(_write(tmp_path, "i.json", payload)).methods[0].params[0]
        assert param.example == "octA"
        assert param.max is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"methods": []},
            {"contract": "c", "methods": [{"name": "m", "label": "M", "type": "view"}]},
            {
                "contract": "c",
                "methods": [
                    {"name": "m", "label": "M", "type": "view", "params": [{"name": "p", "type": "n", "max": "10"}]}
                ],
            },
        ],
    )
    def test_invalid_interface(self, tmp_path: Path, payload) -> None:
        with pytest.raises(SchemaValidationError):
            ContractInterface.from_path(_write(tmp_path, "i.json", payload))


def test_registry_schemas_are_valid() -> None:
    registry = SchemaRegistry.default()
    for name in ("wallet.schema.json", "interface.schema.json"):
        registry.validator(name)


def test_load_json(tmp_path: Path) -> None:
    assert load_json(_write(tmp_path, "x.json", {"a": 1})) == {"a": 1}


def test_registry_reuses_compiled_validator() -> None:
    registry = SchemaRegistry()
    assert registry.validator("wallet.schema.json") is registry.validator("wallet.schema.json")


def test_validation_error_names_file_and_location(tmp_path: Path) -> None:
    path = _write(tmp_path, "wallet.json", {"priv": "x", "addr": 5, "rpc": "http://n"})
    with pytest.raises(SchemaValidationError) as excinfo:
        Wallet.from_path(path)
    assert str(path) in str(excinfo.value)
    assert any(err.startswith("addr: ") for err in excinfo.value.errors)
