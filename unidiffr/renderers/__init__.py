"""
Output renderers for parsed diffs.

Available renderers:
- RawRenderer: human-readable debug dump
- JsonRenderer: structured JSON document
"""

from typing import Any, Dict

from unidiffr.renderers.base_renderer import BaseRenderer
from unidiffr.renderers.json_renderer import JsonRenderer
from unidiffr.renderers.raw_renderer import RawRenderer

# Map of output format names to renderer classes
RENDERERS = {
    "raw": RawRenderer,
    "json": JsonRenderer,
}


def get_renderer(config: Dict[str, Any]) -> BaseRenderer:
    """
    Initialize the renderer selected by configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Renderer instance for config["output_format"]

    Raises:
        ValueError: If the output format is unknown
    """
    output_format = config.get("output_format", "raw")
    if output_format not in RENDERERS:
        raise ValueError(f"Unknown output format '{output_format}'")
    return RENDERERS[output_format](config)


__all__ = [
    'BaseRenderer',
    'RawRenderer',
    'JsonRenderer',
    'RENDERERS',
    'get_renderer',
]
