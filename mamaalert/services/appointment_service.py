import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from mamaalert.extensions import db
from mamaalert.models.appointment import Appointment
from mamaalert.services import sms_service
from mamaalert.utils.enums import MessageType

logger = logging.getLogger(__name__)


def create_appointment(user_id: int, data: Dict[str, Any]) -> Appointment:
    appt = Appointment(user_id=user_id, **data)
    try:
        db.session.add(appt)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return appt


def list_appointments(user_id: int, upcoming_only: bool = False, today: Optional[date] = None) -> List[Appointment]:
    query = Appointment.query.filter_by(user_id=user_id)
    if upcoming_only:
        query = query.filter(Appointment.appointment_date >= (today or date.today()))
    return query.order_by(Appointment.appointment_date, Appointment.appointment_time).all()


def delete_appointment(user_id: int, appointment_id: int) -> bool:
    appt = Appointment.query.filter_by(id=appointment_id, user_id=user_id).first()
    if not appt:
        return False
    try:
        db.session.delete(appt)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return True


def reminder_text(appt: Appointment) -> str:
    return (
        f"Reminder: you have an appointment at {appt.hospital_name} on "
        f"{appt.appointment_date.isoformat()} at {appt.appointment_time.strftime('%H:%M')}. "
        "This is an automated message from MamaAlert."
    )


def send_due_reminders(user_id: int, today: Optional[date] = None) -> Dict[str, Any]:
    """Text the user about tomorrow's appointments that were not reminded yet.

    An appointment is marked reminded only when its SMS was delivered.
    """
    tomorrow = (today or date.today()) + timedelta(days=1)
    due = Appointment.query.filter_by(
        user_id=user_id, appointment_date=tomorrow, reminder_sent=False
    ).all()

    sent, failed = [], []
    for appt in due:
        phone = appt.user.phone if appt.user else None
        if not phone:
            failed.append({"id": appt.id, "error": "No phone number on profile"})
            continue
        result = sms_service.send_sms(
            message=reminder_text(appt),
            user_name=appt.user.display_name,
            message_type=MessageType.APPOINTMENT.value,
            phone_number=phone,
        )
        if result.delivered:
            appt.reminder_sent = True
            sent.append(appt.id)
        else:
            failed.append({"id": appt.id, "error": result.error or "SMS not delivered"})

    if sent:
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Error marking reminders as sent: %s", e)
            raise

    return {"due": len(due), "sent": sent, "failed": failed}
