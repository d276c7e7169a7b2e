"""
Transport contract tracking.

Checks that the transport models still follow the authored OpenAPI
document: same property names, same required set and same status spelling.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

from app.task.domain.errors import TaskError
from app.task.transport.config import TransportConfig

logger = logging.getLogger(__name__)


class ContractMismatchError(TaskError):
    """Raised when a transport model has drifted from the API contract."""

    def __init__(self, schema_name: str, errors: list[str]) -> None:
        self.schema_name = schema_name
        self.errors = errors
        super().__init__(
            f"Transport model does not match schema '{schema_name}':\n" + "\n".join(errors)
        )


class TransportContract:
    """
    The contract's view of one component schema.

    Example:
        contract = TransportContract.load()
        errors = contract.validate_model(Task, Status)
    """

    def __init__(self, schema_name: str, schema: dict[str, Any]) -> None:
        """
        Initialize the contract.

        Args:
            schema_name: Component schema name (e.g. "Task").
            schema: The component schema object.
        """
        self.schema_name = schema_name
        self.schema = schema

    @classmethod
    def load(cls, config: TransportConfig | None = None) -> TransportContract:
        """
        Load a component schema from the OpenAPI document.

        Args:
            config: Transport configuration (defaults to TransportConfig()).

        Returns:
            TransportContract for ``config.schema_name``.

        Raises:
            FileNotFoundError: If the document does not exist.
            KeyError: If the document has no such component schema.
        """
        config = config or TransportConfig()
        logger.debug("Loading transport contract from %s", config.schema_path)
        with config.schema_path.open(encoding="utf-8") as fp:
            document = json.load(fp)
        try:
            schema = document["components"]["schemas"][config.schema_name]
        except KeyError:
            raise KeyError(
                f"Schema '{config.schema_name}' not found in {config.schema_path}"
            ) from None
        return cls(config.schema_name, schema)

    def property_names(self) -> set[str]:
        """Return the property names declared by the schema."""
        return set(self.schema.get("properties", {}))

    def required_names(self) -> set[str]:
        """Return the property names the schema marks as required."""
        return set(self.schema.get("required", []))

    def status_values(self) -> list[str]:
        """Return the allowed values of the ``status`` property, in declared order."""
        return list(self.schema.get("properties", {}).get("status", {}).get("enum", []))

    def validate_model(
        self, model_cls: type[BaseModel], status_enum: type[Enum] | None = None
    ) -> list[str]:
        """
        Compare a transport model against the schema.

        Args:
            model_cls: Pydantic model whose aliases should match property names.
            status_enum: Enum whose values should match the status enum.

        Returns:
            List of drift errors (empty if the model tracks the schema).
        """
        errors: list[str] = []

        fields = model_cls.model_fields
        model_names = {field.alias or name for name, field in fields.items()}
        model_required = {
            field.alias or name for name, field in fields.items() if field.is_required()
        }

        for name in sorted(self.property_names() - model_names):
            errors.append(f"Property '{name}' is missing from {model_cls.__name__}")
        for name in sorted(model_names - self.property_names()):
            errors.append(f"Field '{name}' of {model_cls.__name__} is not in the schema")
        shared = self.property_names() & model_names
        for name in sorted((self.required_names() ^ model_required) & shared):
            expected = "required" if name in self.required_names() else "optional"
            errors.append(f"Property '{name}' should be {expected}")

        if status_enum is not None:
            enum_values = [member.value for member in status_enum]
            if enum_values != self.status_values():
                errors.append(
                    f"Status values {enum_values} do not match schema {self.status_values()}"
                )

        if errors:
            logger.warning(
                "Transport model %s drifted from schema %s (%d issues)",
                model_cls.__name__,
                self.schema_name,
                len(errors),
            )
        return errors

    def ensure_matches(
        self, model_cls: type[BaseModel], status_enum: type[Enum] | None = None
    ) -> None:
        """
        Raise if the model has drifted from the schema.

        Raises:
            ContractMismatchError: If ``validate_model`` reports any error.
        """
        errors = self.validate_model(model_cls, status_enum)
        if errors:
            raise ContractMismatchError(self.schema_name, errors)
