"""Read-only access to the archive being repackaged.

Wraps ZIP-family (zip, jar, amp) and TAR-family (tar, tar.gz, tgz, ...)
containers behind one entry listing, so the rest of the pipeline only deals
with entry paths and byte streams.
"""

import logging
import os
import tarfile
import zipfile
import zlib
from typing import IO, Callable, Dict, Iterator, List, Optional

from modeljar.exceptions import SourceArchiveError

logger = logging.getLogger(__name__)

# Errors a member read can raise, whatever the container flavour
READ_ERRORS = (OSError, EOFError, zipfile.BadZipFile, tarfile.TarError, zlib.error)


class ArchiveEntry:
    """A single member of a source archive."""

    def __init__(self, path: str, is_dir: bool, size: int, opener: Callable[[], IO[bytes]]):
        self.path = path
        self.is_dir = is_dir
        self.size = size
        self._opener = opener

    @property
    def base_name(self) -> str:
        """Final path component, ignoring any trailing slash."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    def open(self) -> IO[bytes]:
        """Open the member for binary reading.

        Raises:
            OSError: If the member is a directory or has no readable content
        """
        if self.is_dir:
            raise IsADirectoryError(f"'{self.path}' is a directory")
        return self._opener()

    def read(self) -> bytes:
        with self.open() as f:
            return f.read()

    def __repr__(self) -> str:
        return f"ArchiveEntry(path={self.path!r}, is_dir={self.is_dir}, size={self.size})"


class SourceArchive:
    """Context-managed, read-only view over an input archive."""

    def __init__(self, archive_path: str):
        """Initialize with path to the archive.

        Args:
            archive_path: Path to a zip/jar/amp or tar archive

        Raises:
            SourceArchiveError: If the file doesn't exist
        """
        self.archive_path = str(archive_path)
        if not os.path.isfile(self.archive_path):
            raise SourceArchiveError(f"Archive file '{self.archive_path}' not found")

        self._zip: Optional[zipfile.ZipFile] = None
        self._tar: Optional[tarfile.TarFile] = None
        self._entries: Optional[List[ArchiveEntry]] = None
        self._by_path: Dict[str, ArchiveEntry] = {}

    def open(self) -> "SourceArchive":
        """Open the container and index its entries.

        Raises:
            SourceArchiveError: If the file is not a readable zip or tar archive
        """
        if self._entries is not None:
            return self

        try:
            if zipfile.is_zipfile(self.archive_path):
                self._zip = zipfile.ZipFile(self.archive_path, "r")
                self._entries = [self._zip_entry(info) for info in self._zip.infolist()]
            elif tarfile.is_tarfile(self.archive_path):
                self._tar = tarfile.open(self.archive_path, "r:*")
                self._entries = self._tar_entries()
            else:
                raise SourceArchiveError(
                    f"'{self.archive_path}' is not a supported archive (expected zip/jar/amp or tar)"
                )
        except READ_ERRORS as e:
            self.close()
            raise SourceArchiveError(f"Failed to open archive '{self.archive_path}': {e}") from e

        # First occurrence wins for exact-path lookups
        for entry in self._entries:
            self._by_path.setdefault(entry.path, entry)

        logger.debug(f"Opened {self.archive_path} with {len(self._entries)} entries")
        return self

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None
        if self._tar is not None:
            self._tar.close()
            self._tar = None
        self._entries = None
        self._by_path = {}

    def __enter__(self) -> "SourceArchive":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def entries(self) -> Iterator[ArchiveEntry]:
        """Iterate entries in the container's own enumeration order."""
        if self._entries is None:
            raise SourceArchiveError(f"Archive '{self.archive_path}' is not open")
        return iter(self._entries)

    def get(self, path: str) -> Optional[ArchiveEntry]:
        """Return the entry whose path equals `path` exactly, or None."""
        if self._entries is None:
            raise SourceArchiveError(f"Archive '{self.archive_path}' is not open")
        return self._by_path.get(path)

    def _zip_entry(self, info: zipfile.ZipInfo) -> ArchiveEntry:
        zf = self._zip
        return ArchiveEntry(
            path=info.filename,
            is_dir=info.is_dir(),
            size=info.file_size,
            opener=lambda: _open_zip_member(zf, info),
        )

    def _tar_entries(self) -> List[ArchiveEntry]:
        tf = self._tar
        entries = []
        for member in tf.getmembers():
            if not (member.isdir() or member.isfile()):
                logger.debug(f"Skipping non-regular tar member {member.name}")
                continue
            entries.append(ArchiveEntry(
                path=member.name + "/" if member.isdir() else member.name,
                is_dir=member.isdir(),
                size=member.size,
                opener=lambda m=member: _extract_tar_member(tf, m),
            ))
        return entries


def _open_zip_member(zf: zipfile.ZipFile, info: zipfile.ZipInfo) -> IO[bytes]:
    # zipfile reports encrypted members and unknown compression methods
    # outside the OSError family
    try:
        return zf.open(info, "r")
    except (RuntimeError, NotImplementedError) as e:
        raise OSError(f"Zip member '{info.filename}' cannot be read: {e}") from e


def _extract_tar_member(tf: tarfile.TarFile, member: tarfile.TarInfo) -> IO[bytes]:
    stream = tf.extractfile(member)
    if stream is None:
        raise OSError(f"Tar member '{member.name}' has no readable content")
    return stream
