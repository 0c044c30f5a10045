"""
Assemble the module JAR.

Write order is fixed so the archive is reproducible apart from timestamps:
directory markers (sorted), the manifest, the two generated descriptors,
then the model files sorted by destination path. Every file entry lands
under a directory marker that has already been written.
"""

import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from modeljar.core.settings import (
    MANIFEST_PATH,
    METADATA_DIR,
    MODULE_NAMESPACE,
    model_dir,
    module_context_path,
    module_properties_path,
    module_root,
)
from modeljar.exceptions import ArchiveAssemblyError
from modeljar.rendering.template_engine import TemplateEngine, build_manifest_data
from modeljar.schemas.module import DescriptorData, MatchedEntry, ModuleIdentity, StagedModel

logger = logging.getLogger(__name__)

DIR_MODE = 0o40755
FILE_MODE = 0o100644
MSDOS_DIRECTORY_FLAG = 0x10

ModelSource = Union[StagedModel, MatchedEntry]


def module_directories(module_name: str) -> List[str]:
    """Directory markers for the module layout, parents before children."""
    return sorted([
        f"{METADATA_DIR}/",
        f"{MODULE_NAMESPACE}/",
        f"{MODULE_NAMESPACE}/module/",
        f"{module_root(module_name)}/",
        f"{model_dir(module_name)}/",
    ])


def model_output_path(module_name: str, base_name: str) -> str:
    """Destination of a model file inside the JAR, always with forward slashes."""
    return f"{model_dir(module_name)}/{base_name}".replace("\\", "/")


def _date_time(timestamp: datetime):
    return timestamp.timetuple()[:6]


def _dir_info(name: str, timestamp: datetime) -> zipfile.ZipInfo:
    if not name.endswith("/"):
        name += "/"
    info = zipfile.ZipInfo(name, date_time=_date_time(timestamp))
    info.compress_type = zipfile.ZIP_STORED
    info.external_attr = (DIR_MODE << 16) | MSDOS_DIRECTORY_FLAG
    return info


def _file_info(name: str, timestamp: datetime, compress: bool) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=_date_time(timestamp))
    info.compress_type = zipfile.ZIP_DEFLATED if compress else zipfile.ZIP_STORED
    info.external_attr = FILE_MODE << 16
    return info


def _model_bytes(model: ModelSource) -> bytes:
    if isinstance(model, MatchedEntry):
        return model.content
    return model.staged_path.read_bytes()


def build_module_jar(
    output_path: Union[str, Path],
    models: Sequence[ModelSource],
    module: ModuleIdentity,
    *,
    built_by: str = "",
    timestamp: Optional[datetime] = None,
    engine: Optional[TemplateEngine] = None,
) -> List[str]:
    """
    Write the module JAR to `output_path`.

    Args:
        output_path: Destination file; its parent directory must exist
        models: Model files to package, staged or still in memory
        module: Name and new version of the module
        built_by: Identity recorded as Built-By in the manifest
        timestamp: Modification time for every entry (defaults to now)
        engine: Template engine for the generated descriptors

    Returns:
        Entry names in the order they were written

    Raises:
        ArchiveAssemblyError: on any failure; a partial file may be left behind
    """
    timestamp = timestamp or datetime.now()
    engine = engine or TemplateEngine()
    name = module.name

    by_destination = {model_output_path(name, m.base_name): m for m in models}
    descriptor = DescriptorData(
        name=name,
        version=module.version,
        model_paths=list(by_destination),
    )
    manifest = build_manifest_data(name, module.version, built_by)

    written: List[str] = []
    try:
        with zipfile.ZipFile(output_path, "w") as zf:
            for directory in module_directories(name):
                zf.writestr(_dir_info(directory, timestamp), b"")
                written.append(directory)

            zf.writestr(
                _file_info(MANIFEST_PATH, timestamp, compress=False),
                engine.render_manifest(manifest).encode("utf-8"),
            )
            written.append(MANIFEST_PATH)

            for path, text in (
                (module_properties_path(name), engine.render_properties(descriptor)),
                (module_context_path(name), engine.render_context(descriptor)),
            ):
                zf.writestr(_file_info(path, timestamp, compress=True), text.encode("utf-8"))
                written.append(path)

            for destination in descriptor.model_paths:
                content = _model_bytes(by_destination[destination])
                zf.writestr(_file_info(destination, timestamp, compress=True), content)
                written.append(destination)
                logger.debug(f"Added {destination} ({len(content)} bytes)")
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveAssemblyError(f"Failed to create JAR file {output_path}: {e}") from e

    logger.info(f"Wrote {output_path} with {len(descriptor.model_paths)} model files")
    return written
