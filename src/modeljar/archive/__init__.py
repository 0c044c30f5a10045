# src/modeljar/archive/__init__.py
from modeljar.archive.source_archive import ArchiveEntry, SourceArchive
from modeljar.archive.scanner import find_model_entries, is_model_document
from modeljar.archive.staging import stage_entries

__all__ = [
    'ArchiveEntry',
    'SourceArchive',
    'find_model_entries',
    'is_model_document',
    'stage_entries',
]
