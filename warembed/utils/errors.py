class ArtifactNotFoundError(Exception):
    """No container artifact could be resolved to an existing local file."""


class EmbeddingError(OSError):
    """Reading a source or writing the destination archive failed.

    The destination file, if present, is partial and must not be used.
    """
