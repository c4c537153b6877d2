"""On-disk store for NSEC3 reverse lookup tables."""

import hashlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Tuple, Union

from shared.domain.consts import CacheFile
from shared.domain.models import CacheArtifact

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    """Process umask (os.umask can only be read by setting it)."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


def cache_key(salt: str, iterations: int) -> str:
    """
    Deterministic identifier for a (salt, iterations) pair.

    Uses the salt text exactly as given (not the decoded bytes), so "ab"
    and "AB" are different keys. The domain is not part of the key.

    Returns:
        Lower-case hex MD5 of "<salt>_<iterations>".
    """
    raw = f"{salt}{CacheFile.KEY_SEPARATOR}{iterations}"
    return hashlib.md5(raw.encode("utf-8")).hexdigest()


def cache_filename(salt: str, iterations: int) -> str:
    """File name of the cache artifact for a (salt, iterations) pair."""
    return f"{CacheFile.PREFIX}{cache_key(salt, iterations)}{CacheFile.SUFFIX}"


class CacheStore:
    """
    Reads and writes cache artifacts in a single directory.

    Each (salt, iterations) pair maps to one file name; writing the same pair
    again replaces the previous file, even for a different domain.
    Writes go through a temporary file in the target directory followed by
    os.replace(), so readers never observe a half-written artifact.
    No locking: one writer per file name is assumed.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def path_for(self, salt: str, iterations: int) -> Path:
        """Destination path for a (salt, iterations) pair."""
        return self.directory / cache_filename(salt, iterations)

    def save(self, artifact: CacheArtifact) -> Tuple[Path, int]:
        """
        Serialize an artifact as pretty-printed JSON.

        Creates the directory if needed. I/O errors are not retried.

        Returns:
            Tuple of (final path, file size in bytes).

        Raises:
            OSError: If the directory or file cannot be written.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        output_path = self.path_for(artifact.salt, artifact.iterations)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{output_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                # mkstemp creates 0600; give the artifact the mode a plain open() would
                os.fchmod(f.fileno(), 0o666 & ~_current_umask())
                json.dump(artifact.model_dump(), f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, output_path)
        except BaseException:
            # Leave no temp file behind; the original error propagates
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

        file_size = output_path.stat().st_size
        logger.info(
            f"Saved {len(artifact.hashes)} hashes to {output_path} ({file_size} bytes)"
        )
        return output_path, file_size

    @staticmethod
    def load(path: Union[str, Path]) -> CacheArtifact:
        """
        Read an artifact back from disk.

        Raises:
            OSError: If the file cannot be read.
            pydantic.ValidationError: If the content is not a valid artifact.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return CacheArtifact.model_validate(data)
