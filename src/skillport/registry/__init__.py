"""Skills registry access: lookup, search, and install reporting.

Public API::

    from skillport.registry import RegistryClient, RegistryRecord, SearchPage
"""

from __future__ import annotations

from skillport.registry.client import RegistryClient
from skillport.registry.models import RegistryRecord, RegistrySkill, SearchPage

__all__ = [
    "RegistryClient",
    "RegistryRecord",
    "RegistrySkill",
    "SearchPage",
]
