"""
Code Synthesis Package

Builds an in-memory model of object-oriented source constructs (classes,
interfaces, methods, properties, comments) and renders it as formatted
source text.

ARCHITECTURAL GUARANTEE:
------------------------
This package never reads existing code. It only assembles definitions
supplied programmatically and prints them.

Pipeline:
    Blueprint (mutable builder) -> resolve() -> ResolvedBlueprint -> render_class()
"""

__version__ = "0.1.0"
