"""Common literal values used across folio_content.

These constants keep default paths and output formats centralized so the
CLI, loaders and tests import the same values without drifting.

Examples
--------
>>> from folio_content import _constants
>>> str(_constants.DEFAULT_CONTENT_PATH)
'data/content.yaml'
>>> "canonical" in _constants.OUTPUT_FORMATS
True
"""

import typing as typ
from pathlib import Path

DEFAULT_CONTENT_PATH = Path("data/content.yaml")
OutputFormat = typ.Literal["json", "yaml", "canonical"]
OUTPUT_FORMATS: tuple[str, ...] = typ.get_args(OutputFormat)
