from pathlib import Path
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator
from pydantic.dataclasses import dataclass

from .coordinate import ArtifactCoordinate
from .repository_context import RepositoryContext


def _option_text(value: Any) -> Any:
    # the container reads options as java.util.Properties strings
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


@dataclass(frozen=True)
class ProjectInfo:
    final_name: str
    packaging: str = "jar"
    build_directory: Path = Path("target")


@dataclass(frozen=True)
class PluginInfo:
    key: str
    dependencies: list[ArtifactCoordinate] = Field(default_factory=list)


@dataclass(frozen=True)
class EmbedSettings:
    filename: str | None = None
    output_directory: Path | None = None
    war_file: Path | None = None
    cmd_line_options: dict[str, str] = Field(default_factory=dict)
    on_reserved_collision: Literal["overwrite", "error"] = "overwrite"

    @field_validator("cmd_line_options", mode="before")
    @classmethod
    def _options_as_text(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {key: _option_text(option) for key, option in value.items()}


# unknown top-level keys are most likely typos
@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class BuildDescriptor:
    project: ProjectInfo
    plugins: list[PluginInfo] = Field(default_factory=list)
    embed: EmbedSettings = Field(default_factory=EmbedSettings)
    repositories: RepositoryContext = Field(default_factory=RepositoryContext)

    def plugin(self, key: str) -> PluginInfo | None:
        return next((p for p in self.plugins if p.key == key), None)

    def declared_dependencies(self, key: str) -> list[ArtifactCoordinate]:
        plugin = self.plugin(key)
        return list(plugin.dependencies) if plugin else []

    @property
    def output_directory(self) -> Path:
        return self.embed.output_directory or self.project.build_directory

    @property
    def destination(self) -> Path:
        filename = self.embed.filename or f"{self.project.final_name}-standalone.jar"
        return self.output_directory / filename

    @property
    def war_file(self) -> Path:
        return self.embed.war_file or self.project.build_directory / f"{self.project.final_name}.war"
