"""
Error types raised by the repackaging pipeline.

Everything the CLI should turn into a non-zero exit derives from ModelJarError.
Recoverable conditions (version fallback, a dropped entry) are logged instead.
"""


class ModelJarError(Exception):
    """Base class for fatal repackaging errors."""


class ConfigurationError(ModelJarError):
    """Required input is missing or cannot yield a module name."""


class SourceArchiveError(ModelJarError):
    """The source archive cannot be opened or read."""


class NoModelsFoundError(ModelJarError):
    """No content-model XML files qualified for packaging."""


class ArchiveAssemblyError(ModelJarError):
    """Writing the destination archive failed."""
