"""Local installation of resolved skills into agent stores.

Public API::

    from skillport.install import (
        AGENT_TABLE, AgentProfile, StorageKind, get_profile, detect_agent,
        DirectoryMaterializer, install, remove, list_installed,
    )
"""

from __future__ import annotations

from skillport.install.agents import (
    AGENT_TABLE,
    DEFAULT_AGENT,
    AgentPaths,
    AgentProfile,
    StorageKind,
    detect_agent,
    get_profile,
)
from skillport.install.materializer import DirectoryMaterializer, MaterializeResult
from skillport.install.store import (
    InstalledSkill,
    InstallOutcome,
    install,
    list_installed,
    remove,
)

__all__ = [
    "AGENT_TABLE",
    "DEFAULT_AGENT",
    "AgentPaths",
    "AgentProfile",
    "DirectoryMaterializer",
    "InstallOutcome",
    "InstalledSkill",
    "MaterializeResult",
    "StorageKind",
    "detect_agent",
    "get_profile",
    "install",
    "list_installed",
    "remove",
]
