from pathlib import Path

import pytest

from warembed.models import ArtifactCoordinate, DEFAULT_CONTAINER, RepositoryContext
from warembed.services.artifact_locator import ArtifactLocator, is_container_artifact
from warembed.utils.errors import ArtifactNotFoundError

LOGGING = ArtifactCoordinate.parse("commons-logging:commons-logging:1.1")
WINSTONE_LITE = ArtifactCoordinate.parse("net.sourceforge.winstone:winstone-lite:0.9.10")
WINSTONE_BOOT = ArtifactCoordinate.parse("net.sourceforge.winstone:winstone:0.9.10:jar:boot")


class FakeResolver:
    """Resolves into a local repository, only the coordinates in ``available`` exist."""

    def __init__(self, root: Path, available=()):
        self.root = root
        self.calls = []
        for coordinate in available:
            path = root / coordinate.path_of()
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"jar")

    def resolve(self, coordinate, context):
        self.calls.append(coordinate)
        return self.root / coordinate.path_of()


@pytest.fixture
def context(tmp_path):
    return RepositoryContext(local=tmp_path, remote=())


def test_is_container_artifact():
    assert is_container_artifact(WINSTONE_LITE)
    assert not is_container_artifact(LOGGING)
    assert not is_container_artifact(ArtifactCoordinate.parse("org.example:Winstone:1.0"))


def test_declared_dependency_preferred_over_default(tmp_path, context):
    resolver = FakeResolver(tmp_path, available=[WINSTONE_LITE, DEFAULT_CONTAINER])
    locator = ArtifactLocator(resolver, context)

    found = locator.locate([LOGGING, WINSTONE_LITE], DEFAULT_CONTAINER)

    assert found == tmp_path / WINSTONE_LITE.path_of()
    assert resolver.calls == [WINSTONE_LITE]


def test_first_matching_declared_dependency_wins(tmp_path, context):
    resolver = FakeResolver(tmp_path, available=[WINSTONE_LITE, WINSTONE_BOOT])
    locator = ArtifactLocator(resolver, context)

    assert locator.locate([WINSTONE_BOOT, WINSTONE_LITE]) == tmp_path / WINSTONE_BOOT.path_of()


def test_unresolvable_declared_dependency_falls_through(tmp_path, context):
    resolver = FakeResolver(tmp_path, available=[DEFAULT_CONTAINER])
    locator = ArtifactLocator(resolver, context)

    found = locator.locate([WINSTONE_LITE], DEFAULT_CONTAINER)

    assert found == tmp_path / DEFAULT_CONTAINER.path_of()
    assert resolver.calls == [WINSTONE_LITE, DEFAULT_CONTAINER]


def test_empty_declaration_uses_default(tmp_path, context):
    resolver = FakeResolver(tmp_path, available=[DEFAULT_CONTAINER])
    locator = ArtifactLocator(resolver, context)

    assert locator.locate([]) == tmp_path / DEFAULT_CONTAINER.path_of()
    assert resolver.calls == [DEFAULT_CONTAINER]


def test_not_found(tmp_path, context):
    resolver = FakeResolver(tmp_path)
    locator = ArtifactLocator(resolver, context)

    with pytest.raises(ArtifactNotFoundError, match="container artifact not found"):
        locator.locate([LOGGING, WINSTONE_LITE])
    assert resolver.calls == [WINSTONE_LITE, DEFAULT_CONTAINER]


def test_custom_predicate(tmp_path, context):
    exact = ArtifactCoordinate.parse("org.example:my-container:1.0")
    resolver = FakeResolver(tmp_path, available=[exact, WINSTONE_LITE])
    locator = ArtifactLocator(resolver, context, is_container=lambda c: c == exact)

    assert locator.locate([WINSTONE_LITE, exact]) == tmp_path / exact.path_of()
