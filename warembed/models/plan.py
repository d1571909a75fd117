from pathlib import Path

from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class EmbeddingPlan:
    container_file: Path
    application_file: Path
    destination: Path
    configuration: dict[str, str] = Field(default_factory=dict)
