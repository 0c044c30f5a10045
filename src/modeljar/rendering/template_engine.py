# src/modeljar/rendering/template_engine.py
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from modeljar.core.settings import (
    BUILD_JDK,
    CREATED_BY,
    MANIFEST_PACKAGE,
    MANIFEST_VERSION,
    MODEL_BOOTSTRAP_DEPENDS_ON,
    MODEL_BOOTSTRAP_PARENT,
)
from modeljar.schemas.module import DescriptorData, ManifestData

PROPERTIES_TEMPLATE = "module.properties"
CONTEXT_TEMPLATE = "module-context.xml"
MANIFEST_TEMPLATE = "MANIFEST.MF"


class TemplateEngine:
    """
    Renders the fixed module descriptor formats shipped with the package.
    """

    def __init__(self):
        self.templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(['xml']),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)

    def render_properties(self, data: DescriptorData) -> str:
        """
        module.properties: id, title and description all carry the module name.
        """
        return self.render(PROPERTIES_TEMPLATE, data.model_dump())

    def render_context(self, data: DescriptorData) -> str:
        """
        module-context.xml: a Spring bean registering every model path, sorted.
        """
        context = data.model_dump()
        context.update(
            bootstrap_parent=MODEL_BOOTSTRAP_PARENT,
            bootstrap_depends_on=MODEL_BOOTSTRAP_DEPENDS_ON,
        )
        return self.render(CONTEXT_TEMPLATE, context)

    def render_manifest(self, data: ManifestData) -> str:
        return self.render(MANIFEST_TEMPLATE, data.model_dump())


def build_manifest_data(name: str, version: str, built_by: str) -> ManifestData:
    """Manifest context with the fixed build markers filled in."""
    return ManifestData(
        name=name,
        version=version,
        built_by=built_by,
        manifest_version=MANIFEST_VERSION,
        created_by=CREATED_BY,
        build_jdk=BUILD_JDK,
        package=MANIFEST_PACKAGE,
    )
