"""Configuration for the transport layer."""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent / "specs" / "openapi.json"


@dataclass(frozen=True)
class TransportConfig:
    """
    Where the transport contract lives and which schema models track.

    Attributes:
        schema_path: Path to the OpenAPI document (JSON).
        schema_name: Name of the component schema describing a task.
    """

    schema_path: Path = field(default=DEFAULT_SCHEMA_PATH)
    schema_name: str = "Task"

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.schema_name:
            raise ValueError("schema_name cannot be empty")
        object.__setattr__(self, "schema_path", Path(self.schema_path))
