"""
Emergency Alert Service

Records an emergency alert and fans it out to the user's emergency contacts
by SMS. The alert row is the durability point: it is committed before any
notification is attempted and is never rolled back by an SMS failure.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from mamaalert.extensions import db
from mamaalert.models.emergency import EmergencyAlert, EmergencyContact
from mamaalert.models.user import User
from mamaalert.services import sms_service
from mamaalert.services.geolocation_service import DEFAULT_LOCATION, LocationResult, locate
from mamaalert.utils.enums import AlertPolicy, MessageType
from mamaalert.utils.notices import Notice

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Emergency alert triggered by user"
FAILURE_DESCRIPTION = "Failed to send emergency alert. Please call emergency services directly."


class EmergencyAlertError(Exception):
    """The alert could not be stored."""


@dataclass
class AlertDispatchResult:
    alert: EmergencyAlert
    location: LocationResult
    contacts_notified: int = 0
    sms: Optional[sms_service.SmsDispatchResult] = None
    sms_error: Optional[str] = None
    notices: List[Notice] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alert": self.alert.to_dict(),
            "contacts_notified": self.contacts_notified,
            "sms": self.sms.to_dict() if self.sms else None,
            "sms_error": self.sms_error,
            "notifications": [n.to_dict() for n in self.notices],
        }


def load_contacts(user_id: int) -> List[Dict[str, str]]:
    rows = EmergencyContact.query.filter_by(user_id=user_id).order_by(
        EmergencyContact.is_primary.desc(), EmergencyContact.id
    ).all()
    return [{"name": c.name, "phone": c.phone} for c in rows if (c.phone or "").strip()]


def trigger(
    user_id: int,
    message: str = DEFAULT_MESSAGE,
    location: str = DEFAULT_LOCATION,
    coords: Optional[Tuple[float, float]] = None,
    client_ip: Optional[str] = None,
    alert_type: str = "emergency",
    message_type: str = MessageType.EMERGENCY.value,
    sms_location: Optional[str] = None,
    geolocate: bool = True,
) -> AlertDispatchResult:
    """
    Store an emergency alert and notify the user's contacts.

    Args:
        user_id: User raising the alert
        message: Free-text alert message
        location: Location string used when no position can be found
        coords: (lat, lng) reported by the caller's device
        client_ip: Address used for the IP lookup fallback
        alert_type: Stored alert type
        message_type: SMS message type sent to contacts
        sms_location: Location shown in the SMS (defaults to the resolved one)
        geolocate: Set to False to keep ``location`` as given

    Returns:
        AlertDispatchResult carrying the stored alert and the SMS outcome

    Raises:
        EmergencyAlertError: when the alert row cannot be written
    """
    if geolocate:
        position = locate(location, coords=coords, client_ip=client_ip)
    else:
        position = LocationResult(location, False)

    try:
        user = User.query.get(user_id)
        user_name = user.display_name if user else "Unknown User"
        contacts = load_contacts(user_id)

        alert = EmergencyAlert(
            user_id=user_id,
            alert_type=alert_type,
            message=message,
            location=position.location,
        )
        db.session.add(alert)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error sending emergency alert: %s", e)
        raise EmergencyAlertError(FAILURE_DESCRIPTION) from e

    logger.info("Emergency alert %s stored for user %s", alert.id, user_id)
    result = AlertDispatchResult(alert=alert, location=position)

    if contacts:
        try:
            sms = sms_service.send_sms(
                message=message,
                user_name=user_name,
                message_type=message_type,
                contacts=contacts,
                user_location=sms_location or position.location,
            )
            result.sms = sms
            result.contacts_notified = sms.messages_sent
            if not sms.delivered:
                result.sms_error = sms.error or "No SMS could be delivered"
        except Exception as e:
            # Alert row is already committed; SMS is best effort
            logger.error("SMS sending failed: %s", e)
            result.sms_error = str(e)

    if result.sms_error:
        result.notices.append(Notice(
            "Emergency Alert Logged",
            "Your alert was saved but SMS notifications could not be sent. Please call your contacts directly.",
            "warning",
        ))
    elif contacts:
        result.notices.append(Notice(
            "Emergency Alert Sent!",
            "Emergency contacts notified via SMS and nearest healthcare centers have been alerted.",
            "destructive",
        ))
    else:
        result.notices.append(Notice(
            "Emergency Alert Sent!",
            "Emergency alert logged. Add emergency contacts to receive SMS notifications.",
            "destructive",
        ))
    return result


def list_alerts(user_id: int, limit: int = 20) -> List[EmergencyAlert]:
    return EmergencyAlert.query.filter_by(user_id=user_id).order_by(
        EmergencyAlert.timestamp.desc()
    ).limit(limit).all()


def auto_alert_allowed(user_id: int, location_tag: str, policy: str, now: Optional[datetime] = None) -> bool:
    """Whether an automatically raised alert may fire under the configured policy.

    ``once_per_day`` allows one auto alert per source tag per calendar day.
    """
    policy = AlertPolicy(policy)
    if policy == AlertPolicy.NEVER:
        return False
    if policy == AlertPolicy.ALWAYS:
        return True

    day_start = datetime.combine((now or datetime.utcnow()).date(), time.min)
    existing = EmergencyAlert.query.filter(
        EmergencyAlert.user_id == user_id,
        EmergencyAlert.location == location_tag,
        EmergencyAlert.timestamp >= day_start,
    ).first()
    return existing is None
