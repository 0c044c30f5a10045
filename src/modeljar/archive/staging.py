"""
Copy matched model files into a scratch directory ahead of packaging.
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple

from modeljar.schemas.module import MatchedEntry, StagedModel

logger = logging.getLogger(__name__)


def stage_entries(entries: List[MatchedEntry], staging_dir: Path) -> Tuple[List[StagedModel], List[str]]:
    """
    Write each matched entry to `staging_dir` under its base name.

    Entries are flattened to their base name, so two sources sharing a base
    name collide: the later one overwrites the earlier (logged as a warning).
    An entry that cannot be written is logged and dropped.

    Returns:
        (staged models in first-seen base-name order, source paths that were dropped)
    """
    staging_dir = Path(staging_dir)
    staged: Dict[str, StagedModel] = {}
    dropped: List[str] = []

    for entry in entries:
        dest = staging_dir / entry.base_name
        try:
            dest.write_bytes(entry.content)
        except OSError as e:
            logger.error(f"Failed to extract {entry.source_path}: {e}")
            dropped.append(entry.source_path)
            continue

        previous = staged.get(entry.base_name)
        if previous is not None:
            logger.warning(
                f"{entry.source_path} overwrites {previous.source_path}: "
                f"both are packaged as {entry.base_name}"
            )
        staged[entry.base_name] = StagedModel(source_path=entry.source_path, staged_path=dest)

    return list(staged.values()), dropped
