# src/modeljar/rendering/__init__.py
from modeljar.rendering.template_engine import TemplateEngine

__all__ = [
    'TemplateEngine'
]
