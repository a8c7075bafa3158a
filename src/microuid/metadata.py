"""Project metadata shared by the package and its command line."""

from __future__ import annotations

PROJECT_NAME = "microuid"
__version__ = "0.1.0"
