"""
Reading and bumping the module version.
"""

import io
import logging

from modeljar.archive.source_archive import READ_ERRORS, SourceArchive
from modeljar.core.settings import DEFAULT_VERSION, VERSION_KEY, module_properties_path
from modeljar.exceptions import SourceArchiveError

logger = logging.getLogger(__name__)


def resolve_module_version(
    archive: SourceArchive, module_name: str, default: str = DEFAULT_VERSION
) -> str:
    """
    Return the `module.version` declared in the module's properties file.

    Falls back to `default` when the properties member is absent or carries no
    version key; both cases look the same to the caller.

    Raises:
        SourceArchiveError: if the member exists but cannot be read
    """
    properties_path = module_properties_path(module_name)
    entry = archive.get(properties_path)
    if entry is None:
        logger.info(f"{properties_path} not found in archive; using default version {default}")
        return default

    try:
        with io.TextIOWrapper(entry.open(), encoding="utf-8", errors="replace", newline="\n") as reader:
            for line in reader:
                line = line.rstrip("\r\n")
                if line.startswith(VERSION_KEY):
                    return line[len(VERSION_KEY):]
    except READ_ERRORS as e:
        raise SourceArchiveError(f"Could not read {properties_path}: {e}") from e

    logger.warning(f"No {VERSION_KEY!r} line in {properties_path}; using default version {default}")
    return default


def increment_version(version: str) -> str:
    """
    Bump the last dotted component by one.

    Versions shorter than three components are zero-padded first. A
    non-numeric last component is left alone and ".1" is appended, so the
    result can be longer than the input:

        1.2.3 -> 1.2.4
        1     -> 1.0.1
        1.2.x -> 1.2.x.1
    """
    parts = version.split(".")
    while len(parts) < 3:
        parts.append("0")

    last = parts[-1]
    if last.isascii() and last.isdigit():
        parts[-1] = str(int(last) + 1)
    else:
        parts.append("1")

    return ".".join(parts)
