"""Merges the container distribution, the web application and its startup
options into one executable archive.

Layout of the result::

    <every entry of the container archive, unchanged>
    embedded.war          the application archive, byte for byte
    embedded.properties   command line options (only when some are given)

The container's bootstrap code unpacks ``embedded.war`` and reads
``embedded.properties`` at startup.
"""
import logging
import os
import struct
import time
import zipfile
from pathlib import Path
from typing import IO, Literal, Mapping

from warembed.utils import properties
from warembed.utils.errors import EmbeddingError
from warembed.utils.logging import setup_logger
from warembed.utils.resources import release_quietly, released

APPLICATION_ENTRY = "embedded.war"
CONFIGURATION_ENTRY = "embedded.properties"
RESERVED_ENTRIES = (APPLICATION_ENTRY, CONFIGURATION_ENTRY)
CONFIGURATION_COMMENT = "embedded command line options for winstone"

DEFAULT_BUFFER_SIZE = 1024
ZIP64_EXTRA_ID = 0x0001


def copy_stream(source: IO[bytes], target: IO[bytes], buffer_size: int = DEFAULT_BUFFER_SIZE) -> int:
    copied = 0
    while chunk := source.read(buffer_size):
        target.write(chunk)
        copied += len(chunk)
    return copied


def _strip_zip64_extra(extra: bytes) -> bytes:
    # zipfile writes its own zip64 record when needed, a copied one would be stale
    kept = []
    i = 0
    while i + 4 <= len(extra):
        header_id, size = struct.unpack("<HH", extra[i:i + 4])
        if header_id != ZIP64_EXTRA_ID:
            kept.append(extra[i:i + 4 + size])
        i += 4 + size
    return b"".join(kept)


class ArchiveEmbedder:
    def __init__(
        self,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        on_reserved_collision: Literal["overwrite", "error"] = "overwrite",
    ):
        self.buffer_size: int = buffer_size
        self.on_reserved_collision: str = on_reserved_collision
        self.logger: logging.Logger = setup_logger("ArchiveEmbedder")

    def embed(
        self,
        container_file: str | Path,
        application_file: str | Path,
        destination: str | Path,
        configuration: Mapping[str, str] | None = None,
    ) -> Path:
        destination = Path(destination)
        try:
            output = zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED)
        except OSError as e:
            raise EmbeddingError(f"Unable to open {destination} for writing: {e}") from e

        try:
            self.put_container(output, Path(container_file))
            self.put_application(output, Path(application_file))
            self.put_configuration(output, configuration)
        except EmbeddingError:
            release_quietly(output)
            raise
        except Exception as e:
            release_quietly(output)
            raise EmbeddingError(f"Failed to build {destination}, the file is incomplete: {e}") from e

        try:
            output.close()
        except Exception as e:
            raise EmbeddingError(f"Failed to finalize {destination}, the file is incomplete: {e}") from e
        self.logger.info(f"{destination} created")
        return destination

    def put_container(self, output: zipfile.ZipFile, container_file: Path) -> None:
        self.logger.info(f"use container file: {container_file.name}")
        try:
            source = zipfile.ZipFile(container_file, "r")
        except (OSError, zipfile.BadZipFile) as e:
            raise EmbeddingError(f"Unable to read container archive {container_file}: {e}") from e

        with released(source):
            for entry in source.infolist():
                if entry.filename in RESERVED_ENTRIES:
                    if self.on_reserved_collision == "error":
                        raise EmbeddingError(f"Container archive {container_file} already has an entry named {entry.filename}")
                    self.logger.warning(f"Container entry {entry.filename} is replaced by the embedded one")
                    continue
                self.logger.debug(f"copying file: {entry.filename}")
                with source.open(entry) as fin, output.open(self.clone_entry(entry), "w") as fout:
                    copy_stream(fin, fout, self.buffer_size)

    def put_application(self, output: zipfile.ZipFile, application_file: Path) -> None:
        self.logger.info(f"use war file: {application_file.name}")
        with open(application_file, "rb") as fin:
            entry = self.new_entry(APPLICATION_ENTRY, os.fstat(fin.fileno()).st_size)
            with output.open(entry, "w") as fout:
                copy_stream(fin, fout, self.buffer_size)

    def put_configuration(self, output: zipfile.ZipFile, configuration: Mapping[str, str] | None) -> None:
        if not configuration:
            self.logger.info("no cmd line options to embed")
            return
        with output.open(self.new_entry(CONFIGURATION_ENTRY), "w") as fout:
            properties.store(configuration, fout, CONFIGURATION_COMMENT)

    @staticmethod
    def clone_entry(entry: zipfile.ZipInfo) -> zipfile.ZipInfo:
        clone = zipfile.ZipInfo(entry.filename, date_time=entry.date_time)
        clone.compress_type = entry.compress_type
        clone.comment = entry.comment
        clone.extra = _strip_zip64_extra(entry.extra)
        clone.create_system = entry.create_system
        clone.external_attr = entry.external_attr
        clone.internal_attr = entry.internal_attr
        # size hint, lets zipfile decide on zip64 up front
        clone.file_size = entry.file_size
        return clone

    @staticmethod
    def new_entry(name: str, size: int = 0) -> zipfile.ZipInfo:
        entry = zipfile.ZipInfo(name, date_time=time.localtime(time.time())[:6])
        entry.compress_type = zipfile.ZIP_DEFLATED
        entry.external_attr = 0o644 << 16
        entry.file_size = size
        return entry
