"""Tests for transport contract tracking."""

import json
from enum import Enum
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from app.task.transport import config as config_module
from app.task.transport.config import DEFAULT_SCHEMA_PATH, TransportConfig
from app.task.transport.contract import ContractMismatchError, TransportContract
from app.task.transport.task_model import Status, Task


class DriftedStatus(str, Enum):
    """Status enum with an extra member."""

    new = "new"
    in_progress = "in_progress"
    done = "done"
    canceled = "canceled"
    archived = "archived"


class DriftedTask(BaseModel):
    """Task model that lost a property and renamed another."""

    id: str
    title: str
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")
    status: DriftedStatus
    author: str
    description: str
    assignee_ids: list[str] | None = Field(default=None, alias="assigneeIds")
    priority: int | None = None
    planned_time: int | None = Field(default=None, alias="plannedTime")


class TestTransportConfig:
    """Test transport configuration."""

    def test_default_schema_path_exists(self) -> None:
        """Test that the bundled contract is found by default."""
        config = TransportConfig()

        assert config.schema_path == DEFAULT_SCHEMA_PATH
        assert config.schema_path.is_file()
        assert config.schema_name == "Task"

    def test_default_schema_ships_inside_package(self) -> None:
        """Test that the contract resolves within the installed package."""
        package_dir = Path(config_module.__file__).resolve().parent

        assert DEFAULT_SCHEMA_PATH.is_relative_to(package_dir)
        assert (package_dir / "specs" / "openapi.json").is_file()

    def test_string_path_is_converted(self, tmp_path: Path) -> None:
        """Test that a string path is accepted."""
        config = TransportConfig(schema_path=str(tmp_path / "api.json"))  # type: ignore[arg-type]

        assert config.schema_path == tmp_path / "api.json"

    def test_empty_schema_name_raises_error(self) -> None:
        """Test that an empty schema name is rejected."""
        with pytest.raises(ValueError, match="schema_name cannot be empty"):
            TransportConfig(schema_name="")


class TestTransportContract:
    """Test reading the contract and comparing models against it."""

    def test_load_default_contract(self) -> None:
        """Test the Task schema declares the contract's field names."""
        contract = TransportContract.load()

        assert contract.property_names() == {
            "id",
            "title",
            "description",
            "createdAt",
            "updatedAt",
            "status",
            "authorId",
            "assigneeIds",
            "priority",
            "plannedTime",
            "actualTime",
        }
        assert contract.required_names() == {
            "id",
            "title",
            "createdAt",
            "updatedAt",
            "status",
            "authorId",
        }
        assert contract.status_values() == ["new", "in_progress", "done", "canceled"]

    def test_transport_model_tracks_contract(self) -> None:
        """Test that the transport model matches the contract exactly."""
        contract = TransportContract.load()

        assert contract.validate_model(Task, Status) == []
        contract.ensure_matches(Task, Status)

    def test_drift_is_reported(self) -> None:
        """Test that every kind of drift is listed."""
        contract = TransportContract.load()

        errors = contract.validate_model(DriftedTask, DriftedStatus)

        assert "Property 'authorId' is missing from DriftedTask" in errors
        assert "Property 'actualTime' is missing from DriftedTask" in errors
        assert "Field 'author' of DriftedTask is not in the schema" in errors
        assert "Property 'description' should be optional" in errors
        assert any(error.startswith("Status values") for error in errors)

    def test_ensure_matches_raises_on_drift(self) -> None:
        """Test that drift raises ContractMismatchError."""
        contract = TransportContract.load()

        with pytest.raises(ContractMismatchError, match="does not match schema 'Task'") as exc_info:
            contract.ensure_matches(DriftedTask, DriftedStatus)

        assert exc_info.value.schema_name == "Task"
        assert len(exc_info.value.errors) >= 5

    def test_load_custom_document(self, tmp_path: Path) -> None:
        """Test loading a schema from another document."""
        document = {
            "components": {
                "schemas": {
                    "Note": {
                        "type": "object",
                        "required": ["id"],
                        "properties": {"id": {"type": "string"}},
                    }
                }
            }
        }
        path = tmp_path / "api.json"
        path.write_text(json.dumps(document), encoding="utf-8")

        contract = TransportContract.load(TransportConfig(schema_path=path, schema_name="Note"))

        assert contract.property_names() == {"id"}
        assert contract.status_values() == []

    def test_load_unknown_schema_raises_error(self) -> None:
        """Test that a missing component schema is reported."""
        with pytest.raises(KeyError, match="Schema 'Missing' not found"):
            TransportContract.load(TransportConfig(schema_name="Missing"))

    def test_load_missing_document_raises_error(self, tmp_path: Path) -> None:
        """Test that a missing document is reported."""
        with pytest.raises(FileNotFoundError):
            TransportContract.load(TransportConfig(schema_path=tmp_path / "missing.json"))
