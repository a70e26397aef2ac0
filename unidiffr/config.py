#!/usr/bin/env python3

import os
from typing import Dict, Any

DEFAULT_OUTPUT_FORMAT = "raw"
DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"


def load_config() -> Dict[str, Any]:
    """
    Loads configuration from environment variables.

    Returns:
        Dict containing configuration values
    """
    output_format = os.environ.get("UNIDIFFR_OUTPUT_FORMAT", "").strip().lower() or DEFAULT_OUTPUT_FORMAT

    # Fall back to the default indent when the variable is not a non-negative integer
    json_indent_raw = os.environ.get("UNIDIFFR_JSON_INDENT", "")
    try:
        json_indent = int(json_indent_raw) if json_indent_raw.strip() else DEFAULT_JSON_INDENT
    except ValueError:
        json_indent = DEFAULT_JSON_INDENT
    if json_indent < 0:
        json_indent = DEFAULT_JSON_INDENT

    log_level = os.environ.get("UNIDIFFR_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL

    config = {
        # Output configuration
        "output_format": output_format,
        "json_indent": json_indent,

        # Logging configuration
        "log_level": log_level,
    }

    return config
