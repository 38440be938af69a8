# -*- coding: utf-8 -*-
"""Account: best-effort cascading deletion.

Every category owned by the user is deleted in order. A failing category is
recorded and skipped; the loop always runs to the end. The identity record is
revoked last, and only its outcome decides overall success.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeletionStep:
    table: str
    label: str


DELETION_STEPS: Sequence[DeletionStep] = (
    DeletionStep("ai_messages", "AI messages"),
    DeletionStep("ai_conversations", "AI conversations"),
    DeletionStep("medication_doses", "Medication doses"),
    DeletionStep("medications", "Medications"),
    DeletionStep("nutrition_logs", "Nutrition logs"),
    DeletionStep("water_logs", "Water logs"),
    DeletionStep("exercise_logs", "Exercise logs"),
    DeletionStep("symptom_logs", "Symptom logs"),
    DeletionStep("vitals", "Vitals"),
    DeletionStep("check_ins", "Check-ins"),
    DeletionStep("health_goals", "Health goals"),
    DeletionStep("saved_tips", "Saved tips"),
    DeletionStep("profiles", "Profile"),
)


class AccountStore(Protocol):
    def delete_owned(self, table: str, user_id: str) -> int:
        """Delete rows of `table` owned by `user_id`; return the affected count."""

    def delete_identity(self, user_id: str) -> None:
        """Remove the user record itself; raise on failure."""


@dataclass(frozen=True)
class StepDeleted:
    label: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"step": self.label, "success": True, "count": self.count}


@dataclass(frozen=True)
class StepFailed:
    label: str
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"step": self.label, "success": False}


StepOutcome = Union[StepDeleted, StepFailed]


@dataclass
class DeletionReport:
    results: List[StepOutcome] = field(default_factory=list)
    identity_revoked: bool = False
    identity_error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.identity_revoked

    def results_payload(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.results]


def delete_step(store: AccountStore, step: DeletionStep, user_id: str) -> StepOutcome:
    try:
        count = store.delete_owned(step.table, user_id)
    except Exception as exc:
        logger.warning("Error deleting from %s: %s", step.table, exc, exc_info=True)
        return StepFailed(label=step.label, error=str(exc))
    return StepDeleted(label=step.label, count=int(count or 0))


def delete_account(
    store: AccountStore,
    user_id: str,
    steps: Sequence[DeletionStep] = DELETION_STEPS,
) -> DeletionReport:
    """Delete everything owned by `user_id`, then the identity.

    Categories run strictly in sequence. Zero rows is a success with count 0.
    """
    report = DeletionReport(results=[delete_step(store, step, user_id) for step in steps])

    try:
        store.delete_identity(user_id)
    except Exception as exc:
        logger.error("Error deleting identity %s: %s", user_id, exc, exc_info=True)
        report.identity_error = str(exc)
        return report

    report.identity_revoked = True
    failed = [r.label for r in report.results if isinstance(r, StepFailed)]
    if failed:
        logger.warning("Account %s deleted with failed steps: %s", user_id, ", ".join(failed))
    return report
