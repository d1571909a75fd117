from typing import Any

from pydantic import field_validator
from pydantic.dataclasses import dataclass

_EXTENSIONS = {
    "test-jar": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "java-source": "jar",
    "javadoc": "jar",
}


@dataclass(frozen=True)
class ArtifactCoordinate:
    group_id: str
    artifact_id: str
    version: str
    type: str = "jar"
    classifier: str = ""

    @field_validator("version", mode="before")
    @classmethod
    def _version_is_text(cls, value: Any) -> Any:
        # a float would turn 1.10 into 1.1 and resolve another artifact
        if isinstance(value, (int, float)):
            raise ValueError(f"version {value!r} must be given as a string, quote it in the build descriptor")
        return value

    @classmethod
    def parse(cls, value: str) -> "ArtifactCoordinate":
        parts = value.strip().split(":")
        if not 3 <= len(parts) <= 5 or not all(parts[:3]):
            raise ValueError(f"Invalid artifact coordinate '{value}', expected group:artifact:version[:type[:classifier]]")
        group_id, artifact_id, version = parts[:3]
        type_ = parts[3] if len(parts) > 3 and parts[3] else "jar"
        classifier = parts[4] if len(parts) > 4 else ""
        return cls(group_id=group_id, artifact_id=artifact_id, version=version, type=type_, classifier=classifier)

    @property
    def extension(self) -> str:
        return _EXTENSIONS.get(self.type, self.type)

    def file_name(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.artifact_id}-{self.version}{suffix}.{self.extension}"

    def path_of(self) -> str:
        group_path = self.group_id.replace(".", "/")
        return f"{group_path}/{self.artifact_id}/{self.version}/{self.file_name()}"

    def __str__(self) -> str:
        base = f"{self.group_id}:{self.artifact_id}:{self.version}:{self.type}"
        return f"{base}:{self.classifier}" if self.classifier else base


# coordinates of the servlet container shipped when the plugin declares none
DEFAULT_CONTAINER = ArtifactCoordinate(
    group_id="net.sourceforge.winstone",
    artifact_id="winstone",
    version="0.9.6",
    type="jar",
    classifier="",
)
CONTAINER_MARKER = "winstone"
PLUGIN_KEY = "net.sf.alchim:winstone-maven-plugin"
