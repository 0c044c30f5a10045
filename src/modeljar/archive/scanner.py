"""
Detect Alfresco content-model XML files inside a source archive.

Detection is a containment test on the head of each XML file, not a parse:
a file counts as a model when its first few KB contain both "<model" and
"name=". Anything past the sniff window is never looked at.
"""

import logging
from typing import IO, List

from modeljar.archive.source_archive import READ_ERRORS, ArchiveEntry, SourceArchive
from modeljar.core.settings import MODEL_MARKERS, SNIFF_BYTES
from modeljar.exceptions import NoModelsFoundError
from modeljar.schemas.module import MatchedEntry

logger = logging.getLogger(__name__)


def has_xml_extension(entry: ArchiveEntry) -> bool:
    return not entry.is_dir and entry.base_name.lower().endswith(".xml")


def is_model_document(stream: IO[bytes], sniff_bytes: int = SNIFF_BYTES) -> bool:
    """
    True when the first `sniff_bytes` of `stream` contain every model marker.
    """
    head = stream.read(sniff_bytes)
    return all(marker in head for marker in MODEL_MARKERS)


def _qualifies(entry: ArchiveEntry, sniff_bytes: int) -> bool:
    try:
        with entry.open() as stream:
            return is_model_document(stream, sniff_bytes)
    except READ_ERRORS as e:
        logger.warning(f"Skipping unreadable entry {entry.path}: {e}")
        return False


def find_model_entries(archive: SourceArchive, sniff_bytes: int = SNIFF_BYTES) -> List[MatchedEntry]:
    """
    Collect every content-model XML file in `archive`.

    Args:
        archive: An open source archive
        sniff_bytes: How much of each candidate to inspect

    Returns:
        Matched entries in the archive's enumeration order

    Raises:
        NoModelsFoundError: if nothing qualifies
    """
    matches: List[MatchedEntry] = []
    candidates = 0

    for entry in archive.entries():
        if not has_xml_extension(entry):
            continue
        candidates += 1
        if not _qualifies(entry, sniff_bytes):
            logger.debug(f"{entry.path} is not a content model")
            continue
        try:
            content = entry.read()
        except READ_ERRORS as e:
            logger.warning(f"Skipping unreadable entry {entry.path}: {e}")
            continue
        logger.info(f"Found content model: {entry.path}")
        matches.append(MatchedEntry(source_path=entry.path, content=content))

    logger.debug(f"Scanned {candidates} XML candidates, {len(matches)} content models")
    if not matches:
        raise NoModelsFoundError(
            f"No Alfresco content model XML files found in {archive.archive_path}"
        )
    return matches
