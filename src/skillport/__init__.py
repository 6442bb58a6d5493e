"""skillport: Resolve, fetch, and install agent skills from GitHub repositories."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
