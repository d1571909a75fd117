from .coordinate import ArtifactCoordinate, CONTAINER_MARKER, DEFAULT_CONTAINER, PLUGIN_KEY
from .repository_context import RepositoryContext
from .build import BuildDescriptor, EmbedSettings, PluginInfo, ProjectInfo
from .plan import EmbeddingPlan

__all__ = [
    "ArtifactCoordinate",
    "CONTAINER_MARKER",
    "DEFAULT_CONTAINER",
    "PLUGIN_KEY",
    "RepositoryContext",
    "BuildDescriptor",
    "EmbedSettings",
    "PluginInfo",
    "ProjectInfo",
    "EmbeddingPlan",
]
