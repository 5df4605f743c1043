from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from .schemas import SchemaRegistry, SchemaValidationError, load_json

VIEW = "view"
CALL = "call"


@dataclass(frozen=True)
class Wallet:
    priv: str
    addr: str
    rpc: str

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        registry: SchemaRegistry | None = None,
        source: Optional[Path] = None,
    ) -> "Wallet":
        registry = registry or SchemaRegistry.default()
        registry.validate(payload, "wallet.schema.json", source)
        return cls(priv=payload["priv"], addr=payload["addr"], rpc=payload["rpc"].rstrip("/"))

    @classmethod
    def from_path(cls, path: Path, registry: SchemaRegistry | None = None) -> "Wallet":
        return cls.from_dict(load_json(path), registry=registry, source=path)

    def with_rpc(self, rpc: Optional[str]) -> "Wallet":
        if not rpc:
            return self
        return replace(self, rpc=rpc.rstrip("/"))

    def __repr__(self) -> str:
        return f"Wallet(addr={self.addr!r}, rpc={self.rpc!r})"


@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    example: Optional[str] = None
    max: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ParamSpec":
        return cls(
            name=payload["name"],
            type=payload["type"],
            example=payload.get("example"),
            max=payload.get("max"),
        )


@dataclass(frozen=True)
class MethodSpec:
    name: str
    label: str
    params: tuple[ParamSpec, ...]
    kind: str

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "MethodSpec":
        return cls(
            name=payload["name"],
            label=payload["label"],
            params=tuple(ParamSpec.from_dict(p) for p in payload["params"]),
            kind=payload["type"],
        )

    @property
    def is_view(self) -> bool:
        return self.kind == VIEW

    @property
    def is_call(self) -> bool:
        return self.kind == CALL


@dataclass(frozen=True)
class ContractInterface:
    contract: str
    methods: tuple[MethodSpec, ...]

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        registry: SchemaRegistry | None = None,
        source: Optional[Path] = None,
    ) -> "ContractInterface":
        registry = registry or SchemaRegistry.default()
        registry.validate(payload, "interface.schema.json", source)
        return cls(
            contract=payload["contract"],
            methods=tuple(MethodSpec.from_dict(m) for m in payload["methods"]),
        )

    @classmethod
    def from_path(cls, path: Path, registry: SchemaRegistry | None = None) -> "ContractInterface":
        return cls.from_dict(load_json(path), registry=registry, source=path)


__all__ = [
    "CALL",
    "VIEW",
    "ContractInterface",
    "MethodSpec",
    "ParamSpec",
    "SchemaValidationError",
    "Wallet",
]
