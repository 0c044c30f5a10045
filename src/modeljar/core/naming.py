"""
Derive a module name from an archive filename.
"""

import re
from pathlib import PurePath

# Trailing version token: "-1.0.0", "_v2.3", "-1.0-SNAPSHOT", ...
VERSION_SUFFIX_RE = re.compile(r"[-_]v?\d+(\.\d+)*(-SNAPSHOT)?$")


def strip_extension(filename: str) -> str:
    """Return the base name of `filename` without its final extension."""
    # Treat both separators as path boundaries so Windows paths work everywhere
    base = PurePath(filename.replace("\\", "/")).name
    stem, dot, _ = base.rpartition(".")
    if not dot or not stem:
        return base
    # addon-1.0.tar.gz carries two extensions
    if stem.lower().endswith(".tar"):
        stem = stem[:-4]
    return stem


def clean_module_name(filename: str) -> str:
    """
    Strip directories, the extension and one trailing version token.

    >>> clean_module_name("dist/my-addon-1.2.0-SNAPSHOT.amp")
    'my-addon'

    A name with no version-like suffix is returned as-is (minus extension).
    A name that is nothing but a version token strips to the empty string;
    callers decide what to do with that.
    """
    return VERSION_SUFFIX_RE.sub("", strip_extension(filename), count=1)
