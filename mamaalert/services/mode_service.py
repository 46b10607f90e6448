"""
Mode Service

Derives the user mode (onboarding / pregnancy / postpartum) from the
pregnancy record and keeps it in memory for the user's session.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from mamaalert.extensions import db
from mamaalert.models.pregnancy import PregnancyData
from mamaalert.utils.enums import UserMode
from mamaalert.utils.notices import Notice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModeState:
    mode: UserMode
    delivery_date: Optional[date] = None


def mode_from_record(record: Optional[PregnancyData]) -> ModeState:
    if record is None:
        return ModeState(UserMode.ONBOARDING)
    if record.delivery_date is not None:
        return ModeState(UserMode.POSTPARTUM, record.delivery_date)
    return ModeState(UserMode.PREGNANCY)


def resolve_mode(user_id: int) -> ModeState:
    """Read the user's pregnancy record and derive the mode.

    A failed read falls back to onboarding.
    """
    try:
        record = PregnancyData.query.filter_by(user_id=user_id).first()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error determining user mode: %s", e)
        return ModeState(UserMode.ONBOARDING)
    return mode_from_record(record)


def parse_delivery_date(value: Union[str, date]) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


class ModeStore:
    """In-memory mode of one user session.

    Transitions persist first and only then update the in-memory state, so a
    failed write leaves ``mode`` and ``delivery_date`` at their last good
    values and records a destructive notice instead.
    """

    def __init__(self, user_id: int):
        self.user_id = user_id
        self.mode = UserMode.ONBOARDING
        self.delivery_date: Optional[date] = None
        self.notices: List[Notice] = []

    def refresh_mode(self) -> ModeState:
        state = resolve_mode(self.user_id)
        self.mode = state.mode
        self.delivery_date = state.delivery_date
        return state

    def drain_notices(self) -> List[Notice]:
        notices, self.notices = self.notices, []
        return notices

    def switch_to_postpartum(self, delivery_date: Union[str, date]) -> bool:
        delivered_on = parse_delivery_date(delivery_date)
        try:
            record = PregnancyData.query.filter_by(user_id=self.user_id).first()
            if record is None:
                record = PregnancyData(user_id=self.user_id)
                db.session.add(record)
            record.delivery_date = delivered_on
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Error switching to postpartum mode: %s", e)
            self.notices.append(Notice("Error", "Failed to update delivery information.", "destructive"))
            return False

        self.mode = UserMode.POSTPARTUM
        self.delivery_date = delivered_on
        self.notices.append(Notice(
            "Congratulations! 🎉",
            "Welcome to postpartum care. Your care plan has been updated.",
        ))
        return True

    def switch_to_pregnancy(self) -> bool:
        try:
            PregnancyData.query.filter_by(user_id=self.user_id).update(
                {"delivery_date": None}, synchronize_session="fetch"
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Error switching to pregnancy mode: %s", e)
            self.notices.append(Notice("Error", "Failed to switch mode.", "destructive"))
            return False

        self.mode = UserMode.PREGNANCY
        self.delivery_date = None
        self.notices.append(Notice("Switched to Pregnancy Mode", "You're now back in pregnancy care."))
        return True

    def set_onboarding_mode(self, mode: Union[str, UserMode], today: Optional[date] = None) -> bool:
        chosen = UserMode(mode)
        if chosen == UserMode.PREGNANCY:
            if resolve_mode(self.user_id).mode == UserMode.POSTPARTUM:
                return self.switch_to_pregnancy()
            self.mode = UserMode.PREGNANCY
            return True
        if chosen == UserMode.POSTPARTUM:
            return self.switch_to_postpartum(today or date.today())
        raise ValueError("mode must be 'pregnancy' or 'postpartum'")

    def to_dict(self):
        return {
            "mode": self.mode.value,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
        }
