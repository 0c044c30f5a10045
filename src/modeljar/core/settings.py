"""
Project-wide constants for the generated module layout that are unlikely to change at runtime.
"""

MODULE_NAMESPACE = "alfresco"
METADATA_DIR = "META-INF"
MANIFEST_PATH = f"{METADATA_DIR}/MANIFEST.MF"

PROPERTIES_FILENAME = "module.properties"
CONTEXT_FILENAME = "module-context.xml"
MODEL_SUBDIR = "model"

VERSION_KEY = "module.version="
DEFAULT_VERSION = "1.0.0"
DEFAULT_OUTPUT = "models.jar"

# Only the head of each candidate XML file is inspected
SNIFF_BYTES = 4096
MODEL_MARKERS = (b"<model", b"name=")

# Manifest markers
MANIFEST_VERSION = "1.0"
CREATED_BY = "Alfresco Model Extractor"
BUILD_JDK = "17.0.5"
MANIFEST_PACKAGE = "org.alfresco.module"

# Spring bootstrap beans the module context hangs off
MODEL_BOOTSTRAP_PARENT = "dictionaryModelBootstrap"
MODEL_BOOTSTRAP_DEPENDS_ON = "dictionaryBootstrap"


def module_root(module_name: str) -> str:
    """Logical path of the module directory inside an archive (no trailing slash)."""
    return f"{MODULE_NAMESPACE}/module/{module_name}"


def module_properties_path(module_name: str) -> str:
    return f"{module_root(module_name)}/{PROPERTIES_FILENAME}"


def module_context_path(module_name: str) -> str:
    return f"{module_root(module_name)}/{CONTEXT_FILENAME}"


def model_dir(module_name: str) -> str:
    return f"{module_root(module_name)}/{MODEL_SUBDIR}"
