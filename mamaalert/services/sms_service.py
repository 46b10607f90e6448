"""
SMS Service

Sends text messages through the Termii gateway, one request per recipient.
Delivery is best effort: every call returns an SmsDispatchResult and never
raises for gateway or network failures.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import requests
from flask import current_app

from mamaalert.utils.enums import MessageType

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Successfully Sent"

EMERGENCY_TEMPLATE = """EMERGENCY ALERT
{user_name} has triggered an emergency alert and needs immediate assistance.

Location: {location}

Please check on them immediately or call emergency services if needed.

Time: {time}

This is an automated message from MamaAlert."""


@dataclass
class SmsDispatchResult:
    success: bool
    messages_sent: int = 0
    total_contacts: int = 0
    results: List[Dict[str, Any]] = field(default_factory=list)
    provider: str = "Termii"
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.success and self.messages_sent > 0

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "success": self.success,
            "messagesSent": self.messages_sent,
            "totalContacts": self.total_contacts,
            "results": self.results,
            "provider": self.provider,
        }
        if self.error:
            body["error"] = self.error
        return body


def format_message(message: str, message_type: str, user_name: str,
                   user_location: Optional[str] = None, now: Optional[datetime] = None) -> str:
    if message_type == MessageType.EMERGENCY.value and user_location:
        return EMERGENCY_TEMPLATE.format(
            user_name=user_name,
            location=user_location,
            time=(now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S"),
        )
    return message


def _send_one(phone: str, text: str, recipient: Optional[str]) -> Dict[str, Any]:
    cfg = current_app.config
    url = f"{cfg['TERMII_BASE_URL'].rstrip('/')}/api/sms/send"
    label = recipient or phone
    payload = {
        "to": phone,
        "from": cfg.get("TERMII_SENDER_ID", "MamaAlert"),
        "sms": text,
        "type": "plain",
        "channel": "generic",
        "api_key": cfg["TERMII_API_KEY"],
    }

    try:
        resp = requests.post(url, json=payload, timeout=cfg.get("SMS_TIMEOUT", 15))
        result = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("Error sending SMS to %s: %s", phone, e)
        return {"contact": label, "phone": phone, "success": False, "error": str(e)}

    if resp.ok and result.get("message") == SUCCESS_MESSAGE:
        logger.info("SMS sent successfully to %s", phone)
        return {"contact": label, "phone": phone, "success": True, "messageId": result.get("message_id")}

    logger.error("Failed to send SMS to %s: %s", phone, result)
    return {"contact": label, "phone": phone, "success": False, "error": result.get("message") or "Unknown error"}


def send_sms(
    message: str,
    user_name: str,
    message_type: str = MessageType.GENERAL.value,
    contacts: Optional[Iterable[Dict[str, str]]] = None,
    phone_number: Optional[str] = None,
    user_location: Optional[str] = None,
) -> SmsDispatchResult:
    """
    Send a message to a list of contacts and/or a single phone number.

    Args:
        message: Message body (replaced by the emergency template for
            emergency messages that carry a location)
        user_name: Name of the user the message is about
        message_type: One of MessageType values
        contacts: Iterable of {"name", "phone"} dicts
        phone_number: Optional single extra recipient
        user_location: Location string for emergency messages

    Returns:
        SmsDispatchResult with one entry per attempted recipient
    """
    if not current_app.config.get("TERMII_API_KEY"):
        logger.error("Termii API key not configured")
        return SmsDispatchResult(success=False, error="Termii API key not configured")

    text = format_message(message or "", message_type, user_name, user_location)
    results = []

    for contact in contacts or []:
        phone = (contact.get("phone") or "").strip()
        if phone:
            results.append(_send_one(phone, text, contact.get("name")))

    if phone_number:
        results.append(_send_one(phone_number, text, user_name))

    sent = sum(1 for r in results if r["success"])
    return SmsDispatchResult(success=True, messages_sent=sent, total_contacts=len(results), results=results)
