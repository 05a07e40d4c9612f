"""Backends turning resolved blueprints into source text."""

from .php_generator import (
    generate_class,
    generate_file,
    render_class,
    render_file,
    render_method,
    render_property,
    save_class_file,
)

__all__ = [
    "generate_class",
    "generate_file",
    "render_class",
    "render_file",
    "render_method",
    "render_property",
    "save_class_file",
]
