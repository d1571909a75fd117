import logging
from pathlib import Path
from typing import Mapping, override

from pydantic import TypeAdapter

from warembed.clients.artifact_resolver_client import ArtifactResolverClient
from warembed.models import ArtifactCoordinate, BuildDescriptor, DEFAULT_CONTAINER, EmbeddingPlan, PLUGIN_KEY
from warembed.repositories import BuildDescriptorRepository
from warembed.services.archive_embedder import ArchiveEmbedder
from warembed.services.artifact_locator import ArtifactLocator
from warembed.services.service import Service
from warembed.utils.logging import setup_logger

APPLICATION_PACKAGING = "war"


class EmbedService(Service):
    def __init__(
        self,
        descriptor_file_path: str,
        dry_run: bool = False,
        container: ArtifactCoordinate | None = None,
        options: Mapping[str, str] | None = None,
    ):
        self.resolver: ArtifactResolverClient = ArtifactResolverClient()
        self.descriptor_repository: BuildDescriptorRepository = BuildDescriptorRepository(descriptor_file_path)
        self.container: ArtifactCoordinate | None = container
        self.options: dict[str, str] = dict(options or {})
        self.dry_run: bool = dry_run
        self.logger: logging.Logger = setup_logger("EmbedService")

    @override
    def run(self) -> Path | None:
        descriptor = self.descriptor_repository.find()
        if descriptor is None:
            raise FileNotFoundError(f"Build descriptor {self.descriptor_repository.file_path} not found")

        if descriptor.project.packaging == APPLICATION_PACKAGING:
            self.logger.info(f"Skipping embed, nothing to do for packaging == '{APPLICATION_PACKAGING}'")
            return None

        plan = self.plan(descriptor)
        if self.dry_run:
            print(TypeAdapter(EmbeddingPlan).dump_json(plan, indent=2).decode())
            return None

        descriptor.output_directory.mkdir(parents=True, exist_ok=True)
        embedder = ArchiveEmbedder(on_reserved_collision=descriptor.embed.on_reserved_collision)
        return embedder.embed(plan.container_file, plan.application_file, plan.destination, plan.configuration)

    def plan(self, descriptor: BuildDescriptor) -> EmbeddingPlan:
        # NotFound must surface before the destination archive is opened
        locator = ArtifactLocator(self.resolver, descriptor.repositories)
        container_file = locator.locate(self.declared_dependencies(descriptor), DEFAULT_CONTAINER)
        return EmbeddingPlan(
            container_file=container_file,
            application_file=descriptor.war_file,
            destination=descriptor.destination,
            configuration={**descriptor.embed.cmd_line_options, **self.options},
        )

    def declared_dependencies(self, descriptor: BuildDescriptor) -> list[ArtifactCoordinate]:
        declared = descriptor.declared_dependencies(PLUGIN_KEY)
        if self.container is not None:
            declared.insert(0, self.container)
        return declared
