"""
Adapters layer - Layout file input.
"""

from .yaml_layout_source import YamlLayoutSource

__all__ = ["YamlLayoutSource"]
