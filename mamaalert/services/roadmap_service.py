"""
Emergency Roadmap Service

The 36-week emergency-preparedness roadmap: per-user checked state,
progress, badge tier and the week-based partitions shown to the user.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from mamaalert.extensions import db
from mamaalert.models.planning import EmergencyChecklistItem, EmergencyPlanning
from mamaalert.services.roadmap_constants import BADGE_THRESHOLDS, EMERGENCY_ROADMAP, UPCOMING_LIMIT
from mamaalert.utils.enums import BadgeTier, RoadmapCategory
from mamaalert.utils.notices import Notice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoadmapItem:
    id: str
    week: int
    category: RoadmapCategory
    label: str
    emoji: Optional[str] = None

    def to_dict(self, is_checked: bool = False) -> Dict[str, Any]:
        return {
            "id": self.id,
            "week": self.week,
            "category": self.category.value,
            "label": self.label,
            "emoji": self.emoji,
            "is_checked": is_checked,
        }


@dataclass(frozen=True)
class RoadmapProgress:
    completed: int
    total: int
    percentage: int
    completed_weeks: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "completed": self.completed,
            "total": self.total,
            "percentage": self.percentage,
            "completed_weeks": self.completed_weeks,
        }


ROADMAP: List[RoadmapItem] = [
    RoadmapItem(id=item_id, week=week, category=category, label=label, emoji=emoji)
    for item_id, week, category, emoji, label in EMERGENCY_ROADMAP
]
ROADMAP_BY_ID: Dict[str, RoadmapItem] = {item.id: item for item in ROADMAP}


def badge_for(completed_weeks: int) -> Optional[BadgeTier]:
    for threshold, tier in BADGE_THRESHOLDS:
        if completed_weeks >= threshold:
            return tier
    return None


def compute_progress(checked: Dict[str, bool], items: List[RoadmapItem] = ROADMAP) -> RoadmapProgress:
    done = [item for item in items if checked.get(item.id)]
    total = len(items)
    # Half-up rounding
    percentage = math.floor(len(done) * 100 / total + 0.5) if total else 0
    completed_weeks = max((item.week for item in done), default=0)
    return RoadmapProgress(len(done), total, percentage, completed_weeks)


def partition(current_week: int, items: List[RoadmapItem] = ROADMAP) -> Dict[str, List[RoadmapItem]]:
    ordered = sorted(items, key=lambda item: item.week)
    return {
        "this_week": [item for item in ordered if item.week == current_week],
        "upcoming": [item for item in ordered if item.week > current_week][:UPCOMING_LIMIT],
        "unlocked": [item for item in ordered if item.week <= current_week],
    }


class RoadmapTracker:
    """Checklist state of one user.

    Each item is stored as its own row keyed by (user_id, item_id), so two
    toggles of different items never overwrite each other.
    """

    def __init__(self, user_id: int, session=None):
        self.user_id = user_id
        self.session = session
        self._celebrated = False
        self.notices: List[Notice] = []

    def load_state(self) -> Dict[str, bool]:
        state = {item.id: False for item in ROADMAP}
        rows = EmergencyChecklistItem.query.filter_by(user_id=self.user_id).all()
        for row in rows:
            if row.item_id in state:
                state[row.item_id] = bool(row.is_checked)
        return state

    def weekly_reminders(self) -> bool:
        plan = EmergencyPlanning.query.filter_by(user_id=self.user_id).first()
        return bool(plan.weekly_reminders) if plan else False

    def toggle(self, item_id: str) -> Optional[bool]:
        """Flip one item. Returns the new checked state, or None when the write failed.

        Raises:
            ValueError: if item_id is not part of the roadmap
        """
        if item_id not in ROADMAP_BY_ID:
            raise ValueError(f"ITEM_NOT_FOUND: unknown roadmap item '{item_id}'")

        try:
            row = EmergencyChecklistItem.query.filter_by(user_id=self.user_id, item_id=item_id).first()
            if row is None:
                row = EmergencyChecklistItem(user_id=self.user_id, item_id=item_id, is_checked=True)
                db.session.add(row)
            else:
                row.is_checked = not row.is_checked
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Error updating checklist: %s", e)
            self.notices.append(Notice("Error", "Failed to update checklist.", "destructive"))
            return None
        return bool(row.is_checked)

    def set_weekly_reminders(self, enabled: bool) -> bool:
        try:
            plan = EmergencyPlanning.query.filter_by(user_id=self.user_id).first()
            if plan is None:
                plan = EmergencyPlanning(user_id=self.user_id)
                db.session.add(plan)
            plan.weekly_reminders = bool(enabled)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Error toggling reminders: %s", e)
            self.notices.append(Notice("Error", "Failed to update reminder settings.", "destructive"))
            return False

        if enabled:
            self.notices.append(Notice("Reminders Enabled", "You'll receive weekly reminders until your due date."))
        else:
            self.notices.append(Notice("Reminders Disabled", "Weekly reminders have been turned off."))
        return True

    def _already_celebrated(self) -> bool:
        if self.session is not None:
            return self.session.completion_celebrated
        return self._celebrated

    def _mark_celebrated(self):
        if self.session is not None:
            self.session.completion_celebrated = True
        self._celebrated = True

    def check_completion(self, progress: RoadmapProgress) -> bool:
        """Emit the completion notice once per session."""
        if progress.percentage < 100 or self._already_celebrated():
            return False
        self._mark_celebrated()
        self.notices.append(Notice(
            "Emergency plan complete! 🎉",
            "You've finished every step of your emergency roadmap.",
        ))
        return True

    def summary(self, current_week: int) -> Dict[str, Any]:
        state = self.load_state()
        progress = compute_progress(state)
        self.check_completion(progress)
        badge = badge_for(progress.completed_weeks)
        parts = partition(current_week)

        return {
            "current_week": current_week,
            "items": [item.to_dict(state[item.id]) for item in ROADMAP],
            "progress": progress.to_dict(),
            "badge": badge.value if badge else None,
            "this_week": [item.to_dict(state[item.id]) for item in parts["this_week"]],
            "upcoming": [item.to_dict(state[item.id]) for item in parts["upcoming"]],
            "unlocked_count": len(parts["unlocked"]),
            "weekly_reminders": self.weekly_reminders(),
        }
