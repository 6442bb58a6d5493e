"""skillport exception hierarchy.

All public exceptions inherit from SkillportError, giving callers a single
base class to catch when they want to handle any skillport-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations


class SkillportError(Exception):
    """Base exception for all skillport errors."""


class ClassificationError(SkillportError):
    """Raised when a skill reference cannot be parsed.

    Covers empty input, empty path segments, too many segments, and
    URLs on hosts that are not recognised at all.
    """


class UnsupportedSourceError(ClassificationError):
    """Raised for references that parse but cannot be installed from.

    Local filesystem paths, ``git@`` clone URLs and non-GitHub hosts are
    recognised so the user gets a precise message, then rejected.
    """


class NotFoundError(SkillportError):
    """Raised when every lookup strategy failed to locate a skill.

    Attributes:
        target: The skill id or ``owner/repo`` that was searched.
        available: Skill names that *were* found, when known.
    """

    def __init__(self, message: str, *, target: str = "", available: list[str] | None = None) -> None:
        super().__init__(message)
        self.target = target
        self.available = list(available or [])


class TransportError(SkillportError):
    """Raised on network failures and timeouts.

    Always recoverable inside the resolver: it means "not found here,
    try the next candidate".
    """

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class AmbiguousMatchError(SkillportError):
    """Raised when a repository holds several skills and none was selected.

    Attributes:
        choices: Every skill name found, so the caller can re-invoke
            with an explicit selection.
    """

    def __init__(self, message: str, *, choices: list[str]) -> None:
        super().__init__(message)
        self.choices = list(choices)


class SkillIOError(SkillportError):
    """Raised when writing to or deleting from a local agent store fails.

    No cleanup of partially written state is attempted.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path
