"""Outcome of a single scaffolding action."""

from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    CREATED = "created"
    SKIPPED_EXISTING = "skipped-existing"
    WOULD_CREATE = "would-create"
    OVERWROTE = "overwrote"
    WOULD_OVERWRITE = "would-overwrite"
    FAILED = "failed"


@dataclass(frozen=True)
class ActionResult:
    """What happened (or would happen) to one path.

    Expected conditions such as "already exists" are reported here rather
    than raised; ``reason`` is only set for FAILED.
    """

    outcome: Outcome
    path: str
    reason: str | None = None

    @classmethod
    def failed(cls, path, reason):
        return cls(Outcome.FAILED, path, reason)

    @property
    def is_dry_run(self) -> bool:
        return self.outcome in (Outcome.WOULD_CREATE, Outcome.WOULD_OVERWRITE)
