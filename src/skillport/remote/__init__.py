"""Remote access to GitHub and the skills registry.

Public API::

    from skillport.remote import HttpClient, TreeClient, RepoTreeEntry
"""

from __future__ import annotations

from skillport.remote.http_client import HttpClient
from skillport.remote.tree import RepoTreeEntry, TreeClient

__all__ = [
    "HttpClient",
    "RepoTreeEntry",
    "TreeClient",
]
