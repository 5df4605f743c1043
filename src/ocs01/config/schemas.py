from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import jsonschema

from ..errors import ConfigError

SCHEMA_DIR = Path(__file__).resolve().parent / "schemas"


class SchemaValidationError(ConfigError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        detail = message
        if errors:
            detail += " " + "; ".join(errors)
        super().__init__(detail)
        self.errors = errors or []


@dataclass(frozen=True)
class SchemaRegistry:
    """Packaged JSON schemas for the wallet and interface files.

    Validators are compiled once per schema name and reused.
    """

    schema_root: Path = SCHEMA_DIR
    _validators: dict[str, jsonschema.Validator] = field(
        default_factory=dict, compare=False, repr=False
    )

    @classmethod
    def default(cls) -> "SchemaRegistry":
        return _DEFAULT_REGISTRY

    def validator(self, schema_name: str) -> jsonschema.Validator:
        cached = self._validators.get(schema_name)
        if cached is None:
            schema = load_json(self.schema_root / schema_name)
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
            cached = self._validators[schema_name] = validator_cls(schema)
        return cached

    def validate(self, instance: Any, schema_name: str, source: Optional[Path] = None) -> None:
        """Raise SchemaValidationError listing every violation, located by JSON path."""
        problems = sorted(
            f"{'/'.join(str(part) for part in err.absolute_path) or '<root>'}: {err.message}"
            for err in self.validator(schema_name).iter_errors(instance)
        )
        if problems:
            where = source or "config"
            raise SchemaValidationError(f"{where} does not match {schema_name}:", errors=problems)


_DEFAULT_REGISTRY = SchemaRegistry()


def load_json(path: Path) -> Any:
    """Read a JSON config file, turning read and parse failures into ConfigError."""
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
