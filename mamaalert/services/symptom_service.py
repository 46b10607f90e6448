"""
Symptom Service

Symptom logging with danger-sign detection, and the full-term labor watch.
Both can raise an automatic emergency alert, limited by
SEVERE_SYMPTOM_ALERT_POLICY.
"""

import logging
from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from mamaalert.extensions import db
from mamaalert.models.symptom import SymptomLog
from mamaalert.services import emergency_alert_service
from mamaalert.utils.enums import LaborSignSeverity, MessageType, SymptomSeverity

logger = logging.getLogger(__name__)

SYMPTOM_ALERT_TAG = "Symptom Logger - Auto-triggered"
LABOR_ALERT_TAG = "Labor Watch - Auto-triggered"
FULL_TERM_WEEK = 37

EMERGENCY_SYMPTOMS = [
    "severe headache",
    "heavy bleeding",
    "severe abdominal pain",
    "chest pain",
    "difficulty breathing",
    "fainting",
    "seizures",
    "severe nausea and vomiting",
    "high fever",
]

EMERGENCY_RECOMMENDATIONS = [
    "🚨 Contact your healthcare provider immediately",
    "🏥 Consider going to the nearest hospital",
    "📞 Alert your emergency contacts",
    "📝 Document all symptoms for medical consultation",
]

NAUSEA_RECOMMENDATIONS = [
    "🍃 Eat small, frequent meals",
    "💧 Stay well hydrated",
    "🍋 Try ginger or lemon",
    "😴 Get adequate rest",
]

HEADACHE_RECOMMENDATIONS = [
    "💧 Ensure adequate hydration",
    "😴 Rest in a quiet, dark room",
    "🩺 Monitor if headaches persist",
    "📝 Track headache patterns",
]

GENERAL_RECOMMENDATIONS = [
    "📝 Monitor symptoms closely",
    "💧 Stay hydrated",
    "😴 Get adequate rest",
    "🩺 Consult your healthcare provider if symptoms worsen",
]


def is_emergency_symptom(symptom: str, severity: str) -> bool:
    text = (symptom or "").lower()
    return severity == SymptomSeverity.SEVERE.value or any(e in text for e in EMERGENCY_SYMPTOMS)


def recommendations_for(symptom: str, is_emergency: bool) -> List[str]:
    if is_emergency:
        return list(EMERGENCY_RECOMMENDATIONS)
    text = (symptom or "").lower()
    if "nausea" in text or "morning sickness" in text:
        return list(NAUSEA_RECOMMENDATIONS)
    if "headache" in text:
        return list(HEADACHE_RECOMMENDATIONS)
    return list(GENERAL_RECOMMENDATIONS)


def _auto_alert(user_id: int, tag: str, message: str, sms_location: str, message_type: str) -> Optional[Dict[str, Any]]:
    policy = current_app.config.get("SEVERE_SYMPTOM_ALERT_POLICY", "once_per_day")
    if not emergency_alert_service.auto_alert_allowed(user_id, tag, policy):
        logger.info("Auto alert for user %s suppressed by policy %s", user_id, policy)
        return None
    result = emergency_alert_service.trigger(
        user_id,
        message=message,
        location=tag,
        geolocate=False,
        message_type=message_type,
        sms_location=sms_location,
    )
    return result.to_dict()


def log_symptom(user_id: int, symptom: str, severity: str, description: Optional[str] = None) -> Dict[str, Any]:
    """
    Store a symptom and raise an alert for danger signs.

    Raises:
        SQLAlchemyError: if the symptom cannot be stored
        EmergencyAlertError: if the automatic alert cannot be stored
    """
    emergency = is_emergency_symptom(symptom, severity)
    entry = SymptomLog(
        user_id=user_id,
        symptom_type=symptom,
        description=description,
        severity=severity,
        is_emergency=emergency,
    )
    try:
        db.session.add(entry)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    alert = None
    if emergency:
        alert = _auto_alert(
            user_id,
            SYMPTOM_ALERT_TAG,
            f"Danger symptom logged: {symptom} (severity: {severity}). Immediate attention may be required.",
            sms_location="Symptom Logger",
            message_type=MessageType.EMERGENCY.value,
        )

    return {
        "symptom": entry.to_dict(),
        "is_emergency": emergency,
        "recommendations": recommendations_for(symptom, emergency),
        "alert": alert,
    }


def list_symptoms(user_id: int, limit: int = 20) -> List[SymptomLog]:
    return SymptomLog.query.filter_by(user_id=user_id).order_by(SymptomLog.timestamp.desc()).limit(limit).all()


def labor_alert_needed(signs: List[Dict[str, Any]]) -> bool:
    active = [s for s in signs if s.get("is_active")]
    high = sum(1 for s in active if s.get("severity") == LaborSignSeverity.HIGH.value)
    medium = sum(1 for s in active if s.get("severity") == LaborSignSeverity.MEDIUM.value)
    return high >= 1 or medium >= 2


def evaluate_labor_signs(user_id: int, signs: List[Dict[str, Any]], current_week: int) -> Dict[str, Any]:
    active_names = [s["name"] for s in signs if s.get("is_active")]
    is_full_term = current_week >= FULL_TERM_WEEK
    alert_needed = is_full_term and labor_alert_needed(signs)
    alert = None
    if alert_needed:
        alert = _auto_alert(
            user_id,
            LABOR_ALERT_TAG,
            f"URGENT: High-risk labor signs detected - {', '.join(active_names)}. Immediate medical attention required.",
            sms_location="Labor Watch",
            message_type=MessageType.LABOR_EMERGENCY.value,
        )
    return {
        "is_full_term": is_full_term,
        "current_week": current_week,
        "active_signs": active_names,
        "alert_needed": alert_needed,
        "alert": alert,
    }
