"""Environment-variable-based configuration for the Pixela command line."""

from __future__ import annotations

import os

PIXELA_USERNAME: str = os.environ.get("PIXELA_USERNAME", "")
PIXELA_TOKEN: str = os.environ.get("PIXELA_TOKEN", "")
PIXELA_BASE_URL: str = os.environ.get("PIXELA_BASE_URL", "https://pixe.la")
# Raw string; parsed in main().
PIXELA_TIMEOUT: str = os.environ.get("PIXELA_TIMEOUT", "")
