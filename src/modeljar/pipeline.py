"""
End-to-end repackaging: source archive in, module JAR out.

    name     <- input filename
    version  <- module.properties in the source, bumped by one
    models   <- XML entries carrying a content-model signature
    output   <- fixed module layout with generated descriptors
"""

import logging
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple, Union

from modeljar.archive.scanner import find_model_entries
from modeljar.archive.source_archive import SourceArchive
from modeljar.archive.staging import stage_entries
from modeljar.core.config import Settings, get_settings
from modeljar.core.naming import clean_module_name
from modeljar.core.versioning import increment_version, resolve_module_version
from modeljar.exceptions import ConfigurationError, NoModelsFoundError, SourceArchiveError
from modeljar.packaging.assembler import build_module_jar, model_output_path
from modeljar.schemas.module import MatchedEntry, ModuleIdentity, RepackageResult

logger = logging.getLogger(__name__)


def derive_module_name(source_path: Union[str, Path, None]) -> str:
    """
    Module name for `source_path`.

    Raises:
        ConfigurationError: if no path is given or the filename yields no name
    """
    if not source_path or not str(source_path).strip():
        raise ConfigurationError("Please provide a ZIP file path")
    name = clean_module_name(str(source_path))
    if not name:
        raise ConfigurationError(f"Cannot derive a module name from '{source_path}'")
    return name


def read_versions(archive: SourceArchive, module_name: str, settings: Settings) -> Tuple[str, str]:
    """Return (current, next) version for the module."""
    try:
        current = resolve_module_version(archive, module_name, default=settings.default_version)
    except SourceArchiveError as e:
        logger.warning(f"Could not read current version: {e}")
        current = settings.default_version
    return current, increment_version(current)


def scan_source(
    source_path: Union[str, Path, None], settings: Optional[Settings] = None
) -> Tuple[ModuleIdentity, str, List[MatchedEntry]]:
    """
    Everything up to (but not including) writing: name, versions and models.

    Returns:
        (module identity with the new version, current version, matched entries)
    """
    settings = settings or get_settings()
    name = derive_module_name(source_path)
    logger.info(f"Module name: {name}")

    with SourceArchive(str(source_path)) as archive:
        current, new_version = read_versions(archive, name, settings)
        logger.info(f"Version {current} -> {new_version}")
        entries = find_model_entries(archive, sniff_bytes=settings.sniff_bytes)

    return ModuleIdentity(name=name, version=new_version), current, entries


def repackage(
    source_path: Union[str, Path, None],
    output_path: Union[str, Path, None] = None,
    settings: Optional[Settings] = None,
) -> RepackageResult:
    """
    Repackage the content models of `source_path` into a module JAR.

    Args:
        source_path: Input archive (zip, jar, amp or tar)
        output_path: Destination JAR; defaults to settings.default_output
        settings: Runtime configuration

    Returns:
        Summary of what was written

    Raises:
        ConfigurationError: no input path, or no usable module name
        SourceArchiveError: the input cannot be opened
        NoModelsFoundError: nothing to package; no output is written
        ArchiveAssemblyError: writing the JAR failed
    """
    settings = settings or get_settings()
    output_path = Path(output_path or settings.default_output)

    module, current, entries = scan_source(source_path, settings)

    with tempfile.TemporaryDirectory(prefix="alfresco-models") as staging_dir:
        staged, dropped = stage_entries(entries, Path(staging_dir))
        if not staged:
            raise NoModelsFoundError("No Alfresco content model XML files could be extracted")

        build_module_jar(
            output_path,
            staged,
            module,
            built_by=settings.resolve_built_by(),
        )

    return RepackageResult(
        output_path=output_path,
        module=module,
        previous_version=current,
        model_paths=sorted(model_output_path(module.name, m.base_name) for m in staged),
        dropped=dropped,
    )
