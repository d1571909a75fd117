from pathlib import Path

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass

DEFAULT_LOCAL_REPOSITORY = "~/.m2/repository"
DEFAULT_REMOTE_REPOSITORY = "https://repo.maven.apache.org/maven2"


@dataclass(frozen=True)
class RepositoryContext:
    local: Path = Field(default=Path(DEFAULT_LOCAL_REPOSITORY), validate_default=True)
    remote: tuple[str, ...] = (DEFAULT_REMOTE_REPOSITORY,)

    @field_validator("local", mode="after")
    @classmethod
    def _expand_local(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("remote", mode="after")
    @classmethod
    def _strip_slashes(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(url.rstrip("/") for url in value)
