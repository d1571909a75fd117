import logging
from contextlib import contextmanager
from typing import Iterator, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Closeable(Protocol):
    def close(self) -> None: ...


T = TypeVar("T", bound=Closeable)


def release_quietly(resource: Closeable | None) -> None:
    """Close ``resource`` and log, never raise, if that fails.

    Used on every exit path so a close failure can't replace the error that
    is already propagating.
    """
    if resource is None:
        return
    try:
        resource.close()
    except Exception as e:
        logger.warning(f"Failed to close {resource!r}: {e}")


@contextmanager
def released(resource: T) -> Iterator[T]:
    try:
        yield resource
    finally:
        release_quietly(resource)
