import logging
import os
from pathlib import Path

import requests

from warembed.models import ArtifactCoordinate, RepositoryContext

logger = logging.getLogger(__name__)


class ArtifactResolverClient:
    def __init__(self, timeout: float = 30, chunk_size: int = 64 * 1024):
        self.timeout: float = timeout
        self.chunk_size: int = chunk_size

    def resolve(self, coordinate: ArtifactCoordinate, context: RepositoryContext) -> Path:
        target = context.local / coordinate.path_of()
        if target.is_file():
            logger.debug(f"Artifact {coordinate} found in local repository: {target}")
            return target
        for remote in context.remote:
            if self.download(f"{remote}/{coordinate.path_of()}", target):
                logger.info(f"Downloaded {coordinate} from {remote}")
                return target
        logger.warning(f"Artifact {coordinate} could not be downloaded from any remote repository")
        return target

    def download(self, url: str, target: Path) -> bool:
        partial = target.with_name(target.name + ".part")
        try:
            with requests.get(url=url, stream=True, timeout=self.timeout) as response:
                if response.status_code != 200:
                    logger.warning(f"Failed to download {url} (status code {response.status_code})")
                    return False
                target.parent.mkdir(parents=True, exist_ok=True)
                with open(partial, "wb") as f:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        f.write(chunk)
            os.replace(partial, target)
            return True
        except Exception as e:
            logger.error(f"Error downloading {url}: {e}")
            partial.unlink(missing_ok=True)
            return False
