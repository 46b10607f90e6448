"""
Pregnancy Service

Gestational week calculation and the per-user pregnancy record.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from mamaalert.extensions import db
from mamaalert.models.pregnancy import PregnancyData

logger = logging.getLogger(__name__)

MAX_WEEKS = 42
GESTATION_DAYS = 280

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def current_week(lmp: DateLike, now: Optional[DateLike] = None) -> int:
    """Whole weeks elapsed since the last menstrual period, clamped to [0, 42].

    The difference is taken as an absolute value, so an LMP in the future
    counts the same as one in the past.
    """
    today = _as_date(now) if now is not None else date.today()
    days = abs((today - _as_date(lmp)).days)
    return min(max(days // 7, 0), MAX_WEEKS)


def lmp_from_due_date(due_date: date) -> date:
    return due_date - timedelta(days=GESTATION_DAYS)


def week_for_record(record: Optional[PregnancyData], today: Optional[date] = None) -> int:
    if record is None:
        return 0
    lmp = record.last_menstrual_period
    if lmp is None and record.due_date is not None:
        lmp = lmp_from_due_date(record.due_date)
    if lmp is not None:
        return current_week(lmp, today)
    return record.weeks_pregnant or 0


def get_record(user_id: int) -> Optional[PregnancyData]:
    return PregnancyData.query.filter_by(user_id=user_id).first()


def sync_week(record: PregnancyData, today: Optional[date] = None) -> int:
    """Recompute the week and store it when it drifted from weeks_pregnant.

    A failed write is logged and the computed week is still returned.
    """
    week = week_for_record(record, today)
    has_dates = record.last_menstrual_period is not None or record.due_date is not None
    if has_dates and week != record.weeks_pregnant:
        try:
            record.weeks_pregnant = week
            db.session.commit()
            logger.info("Updated pregnancy week for user %s to %s", record.user_id, week)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Error updating pregnancy week: %s", e)
    return week


def upsert_pregnancy_details(user_id: int, data: Dict[str, Any]) -> PregnancyData:
    """Create or update the single pregnancy record of a user.

    Args:
        user_id: Owner of the record
        data: Fields already validated by PregnancyDetailsSchema

    Raises:
        SQLAlchemyError: when the write fails (session is rolled back)
    """
    record = get_record(user_id)
    if record is None:
        record = PregnancyData(user_id=user_id)
        db.session.add(record)

    for field, value in data.items():
        setattr(record, field, value)

    # A new LMP without an explicit due date moves the due date with it
    lmp_changed = data.get("last_menstrual_period") is not None and "due_date" not in data
    if record.last_menstrual_period is not None and (lmp_changed or record.due_date is None):
        record.due_date = record.last_menstrual_period + timedelta(days=GESTATION_DAYS)

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return record


def current_week_for_user(user_id: int, today: Optional[date] = None) -> int:
    record = get_record(user_id)
    if record is None:
        return 0
    return sync_week(record, today)
