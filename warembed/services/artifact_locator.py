import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Protocol

from warembed.models import ArtifactCoordinate, CONTAINER_MARKER, DEFAULT_CONTAINER, RepositoryContext
from warembed.utils.errors import ArtifactNotFoundError
from warembed.utils.logging import setup_logger


class ArtifactResolver(Protocol):
    def resolve(self, coordinate: ArtifactCoordinate, context: RepositoryContext) -> Path: ...


def is_container_artifact(coordinate: ArtifactCoordinate) -> bool:
    # loose match: any declared artifact mentioning the container wins
    return CONTAINER_MARKER in coordinate.artifact_id


class ArtifactLocator:
    def __init__(
        self,
        resolver: ArtifactResolver,
        context: RepositoryContext,
        is_container: Callable[[ArtifactCoordinate], bool] = is_container_artifact,
    ):
        self.resolver: ArtifactResolver = resolver
        self.context: RepositoryContext = context
        self.is_container: Callable[[ArtifactCoordinate], bool] = is_container
        self.logger: logging.Logger = setup_logger("ArtifactLocator")

    def candidates(
        self, declared: Iterable[ArtifactCoordinate], fallback: ArtifactCoordinate
    ) -> Iterator[ArtifactCoordinate]:
        yield from (c for c in declared if self.is_container(c))
        yield fallback

    def locate(
        self, declared: Iterable[ArtifactCoordinate], fallback: ArtifactCoordinate = DEFAULT_CONTAINER
    ) -> Path:
        for coordinate in self.candidates(declared, fallback):
            found = self.select(coordinate)
            if found is not None:
                return found
        raise ArtifactNotFoundError(
            "container artifact not found, please declare the winstone artifact in the plugin's dependencies"
        )

    def select(self, coordinate: ArtifactCoordinate) -> Path | None:
        found = Path(self.resolver.resolve(coordinate, self.context))
        if not found.exists():
            self.logger.warning(f"Artifact {coordinate} resolved to missing file {found}")
            return None
        self.logger.info(f"Selected container artifact {coordinate}")
        return found
