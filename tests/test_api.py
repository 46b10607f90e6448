import os
import sys
from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from mamaalert import create_app
from mamaalert.extensions import db
from mamaalert.models.appointment import Appointment
from mamaalert.models.emergency import EmergencyAlert
from mamaalert.services import ai_nurse_service, sms_service
from mamaalert.services.symptom_service import LABOR_ALERT_TAG, SYMPTOM_ALERT_TAG
from mamaalert.utils.auth import decode_token


@pytest.fixture()
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def register(client, email="api@example.com", phone=None):
    r = client.post("/api/auth/register", json={
        "email": email, "password": "secret1", "first_name": "Amaka", "last_name": "Nwosu", "phone": phone,
    })
    assert r.status_code == 201, r.data
    body = r.get_json()
    return {"Authorization": f"Bearer {body['token']}"}, body


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"


def test_register_login_flow(client):
    headers, body = register(client)
    assert body["mode"] == "onboarding"
    assert body["delivery_date"] is None
    assert body["user"]["email"] == "api@example.com"

    r = client.post("/api/auth/register", json={
        "email": "API@example.com", "password": "secret1", "first_name": "Again",
    })
    assert r.status_code == 409

    r = client.post("/api/auth/login", json={"email": "api@example.com", "password": "wrong"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"

    r = client.post("/api/auth/login", json={"email": "api@example.com", "password": "secret1"})
    assert r.status_code == 200
    assert r.get_json()["token"]


def test_protected_routes_need_token(client):
    assert client.get("/api/profile").status_code == 401
    r = client.get("/api/profile", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_profile_update(client):
    headers, _ = register(client)
    r = client.put("/api/profile", json={"first_name": "  Chi ", "phone": "+2348011111111"}, headers=headers)
    assert r.status_code == 200
    assert r.get_json()["first_name"] == "Chi"
    assert client.get("/api/profile", headers=headers).get_json()["phone"] == "+2348011111111"


def test_pregnancy_details_set_week_and_mode(client):
    headers, _ = register(client)
    lmp = date.today() - timedelta(days=70)
    r = client.put("/api/pregnancy", json={"last_menstrual_period": lmp.isoformat()}, headers=headers)
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["current_week"] == 10
    assert data["mode"] == "pregnancy"
    assert data["pregnancy"]["due_date"] == (lmp + timedelta(days=280)).isoformat()
    assert data["pregnancy"]["weeks_pregnant"] == 10

    mode = client.get("/api/mode", headers=headers).get_json()
    assert mode["mode"] == "pregnancy"


def test_pregnancy_details_validation(client):
    headers, _ = register(client)
    future = (date.today() + timedelta(days=3)).isoformat()
    r = client.put("/api/pregnancy", json={"last_menstrual_period": future}, headers=headers)
    assert r.status_code == 400

    r = client.put("/api/pregnancy", json={
        "last_menstrual_period": "2026-01-10", "due_date": "2026-01-01",
    }, headers=headers)
    assert r.status_code == 400
    assert "due_date" in r.get_json()["error"]["details"]


def test_empty_pregnancy_record(client):
    headers, _ = register(client)
    data = client.get("/api/pregnancy", headers=headers).get_json()
    assert data["pregnancy"] is None
    assert data["current_week"] == 0


def test_mild_symptom_gives_advice_only(client, app):
    headers, _ = register(client)
    r = client.post("/api/symptoms", json={"symptom": "Morning sickness", "severity": "mild"}, headers=headers)
    assert r.status_code == 201
    data = r.get_json()
    assert data["is_emergency"] is False
    assert data["alert"] is None
    assert "🍃 Eat small, frequent meals" in data["recommendations"]
    with app.app_context():
        assert EmergencyAlert.query.count() == 0


def test_severe_symptom_alerts_once_per_day(client, app):
    headers, body = register(client)
    for _ in range(2):
        r = client.post("/api/symptoms", json={"symptom": "Heavy bleeding", "severity": "moderate"}, headers=headers)
        assert r.status_code == 201

    items = client.get("/api/symptoms", headers=headers).get_json()["items"]
    assert len(items) == 2
    assert all(i["is_emergency"] for i in items)

    with app.app_context():
        alerts = EmergencyAlert.query.filter_by(user_id=body["user"]["id"]).all()
        assert len(alerts) == 1
        assert alerts[0].location == SYMPTOM_ALERT_TAG


def test_severe_symptom_alert_policy_always(client, app):
    app.config["SEVERE_SYMPTOM_ALERT_POLICY"] = "always"
    headers, _ = register(client)
    for _ in range(2):
        r = client.post("/api/symptoms", json={"symptom": "Dizziness", "severity": "severe"}, headers=headers)
        assert r.get_json()["alert"] is not None
    with app.app_context():
        assert EmergencyAlert.query.count() == 2


def test_severe_symptom_alert_policy_never(client, app):
    app.config["SEVERE_SYMPTOM_ALERT_POLICY"] = "never"
    headers, _ = register(client)
    r = client.post("/api/symptoms", json={"symptom": "Seizures", "severity": "severe"}, headers=headers)
    data = r.get_json()
    assert data["is_emergency"] is True
    assert data["alert"] is None


def test_symptom_requires_name(client):
    headers, _ = register(client)
    r = client.post("/api/symptoms", json={"severity": "mild"}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"]["message"] == "Please select a symptom"


def test_labor_watch(client, app):
    headers, _ = register(client)
    lmp = date.today() - timedelta(days=38 * 7)
    client.put("/api/pregnancy", json={"last_menstrual_period": lmp.isoformat()}, headers=headers)

    r = client.post("/api/labor-watch", json={"signs": [
        {"name": "Regular contractions", "severity": "medium", "is_active": True},
        {"name": "Water breaking", "severity": "high", "is_active": False},
    ]}, headers=headers)
    data = r.get_json()
    assert data["is_full_term"] is True
    assert data["current_week"] == 38
    assert data["alert_needed"] is False
    assert data["alert"] is None

    r = client.post("/api/labor-watch", json={"signs": [
        {"name": "Regular contractions", "severity": "medium", "is_active": True},
        {"name": "Lower back pain", "severity": "medium", "is_active": True},
    ]}, headers=headers)
    data = r.get_json()
    assert data["alert_needed"] is True
    assert data["alert"]["alert"]["location"] == LABOR_ALERT_TAG
    assert "Regular contractions, Lower back pain" in data["alert"]["alert"]["message"]


def test_appointment_crud_and_reminders(client, app, monkeypatch):
    headers, _ = register(client, phone="+2348022222222")
    tomorrow = date.today() + timedelta(days=1)
    r = client.post("/api/appointments", json={
        "appointment_date": tomorrow.isoformat(),
        "appointment_time": "09:30",
        "hospital_name": "Lagos University Teaching Hospital",
    }, headers=headers)
    assert r.status_code == 201, r.data
    appt_id = r.get_json()["id"]

    client.post("/api/appointments", json={
        "appointment_date": (date.today() + timedelta(days=10)).isoformat(),
        "appointment_time": "14:00",
        "hospital_name": "Clinic",
    }, headers=headers)

    sent = []

    def fake_send(**kwargs):
        sent.append(kwargs)
        return sms_service.SmsDispatchResult(success=True, messages_sent=1, total_contacts=1)

    monkeypatch.setattr(sms_service, "send_sms", fake_send)
    r = client.post("/api/appointments/reminders", headers=headers)
    assert r.get_json() == {"due": 1, "sent": [appt_id], "failed": []}
    assert sent[0]["phone_number"] == "+2348022222222"
    assert "Lagos University Teaching Hospital" in sent[0]["message"]
    assert "09:30" in sent[0]["message"]

    # already reminded
    r = client.post("/api/appointments/reminders", headers=headers)
    assert r.get_json()["due"] == 0

    items = client.get("/api/appointments?upcoming=true", headers=headers).get_json()["items"]
    assert [i["hospital_name"] for i in items] == ["Lagos University Teaching Hospital", "Clinic"]
    assert items[0]["reminder_sent"] is True

    assert client.delete(f"/api/appointments/{appt_id}", headers=headers).status_code == 200
    assert client.delete(f"/api/appointments/{appt_id}", headers=headers).status_code == 404


def test_reminder_not_marked_when_sms_fails(client, app, monkeypatch):
    headers, _ = register(client, phone="+2348022222222")
    client.post("/api/appointments", json={
        "appointment_date": (date.today() + timedelta(days=1)).isoformat(),
        "appointment_time": "08:00",
        "hospital_name": "General Hospital",
    }, headers=headers)

    monkeypatch.setattr(sms_service, "send_sms", lambda **kw: sms_service.SmsDispatchResult(
        success=True, messages_sent=0, total_contacts=1,
    ))
    data = client.post("/api/appointments/reminders", headers=headers).get_json()
    assert data["sent"] == []
    assert len(data["failed"]) == 1
    with app.app_context():
        assert Appointment.query.first().reminder_sent is False


def test_chat_without_key_returns_fallback(client):
    headers, _ = register(client)
    r = client.post("/api/chat", json={"message": "Is it safe to eat pepper soup?"}, headers=headers)
    assert r.status_code == 502
    data = r.get_json()
    assert data["success"] is False
    assert data["fallbackResponse"] == ai_nurse_service.FALLBACK_RESPONSE


def test_chat_empty_message(client):
    headers, _ = register(client)
    r = client.post("/api/chat", json={"message": ""}, headers=headers)
    assert r.status_code == 400


def test_chat_success(client, app, monkeypatch):
    app.config["GEMINI_API_KEY"] = "test-gemini-key"
    headers, _ = register(client)
    calls = {}

    class FakeModels:
        def generate_content(self, model, contents, config):
            calls["contents"] = contents
            calls["system"] = config.system_instruction
            return SimpleNamespace(text="  Drink plenty of water.  ")

    class FakeClient:
        def __init__(self, api_key):
            calls["api_key"] = api_key
            self.models = FakeModels()

    monkeypatch.setattr(ai_nurse_service.genai, "Client", FakeClient)
    r = client.post("/api/chat", json={
        "message": "What should I drink?", "pregnancyWeek": 20, "hasDelivered": False,
    }, headers=headers)
    assert r.status_code == 200
    assert r.get_json() == {"response": "Drink plenty of water.", "success": True}
    assert calls["api_key"] == "test-gemini-key"
    assert "Week 20 of pregnancy" in calls["system"]
    assert "MamaAlert AI Nurse" in calls["system"]


def test_system_prompt_postpartum_context():
    prompt = ai_nurse_service.build_system_prompt(has_delivered=True, baby_count=2, baby_ages=["3 weeks", "3 weeks"])
    assert "postpartum care" in prompt
    assert "2 baby(ies)" in prompt


def test_healthcare_without_key(client):
    headers, _ = register(client)
    r = client.get("/api/healthcare/nearby?lat=6.5&lng=3.4", headers=headers)
    assert r.status_code == 503
    assert r.get_json()["error"]["code"] == "CONFIG_ERROR"

    r = client.get("/api/healthcare/nearby?lat=6.5", headers=headers)
    assert r.status_code == 400


def test_token_timestamps_are_utc(client, app):
    _, body = register(client)
    with app.app_context():
        claims = decode_token(body["token"])
    now = datetime.now(timezone.utc).timestamp()
    assert abs(claims["iat"] - now) < 60
    assert claims["exp"] - claims["iat"] == app.config["JWT_EXPIRES_HOURS"] * 3600


def test_changing_lmp_moves_due_date(client):
    headers, _ = register(client)
    first = date.today() - timedelta(days=70)
    client.put("/api/pregnancy", json={"last_menstrual_period": first.isoformat()}, headers=headers)

    second = date.today() - timedelta(days=140)
    r = client.put("/api/pregnancy", json={"last_menstrual_period": second.isoformat()}, headers=headers)
    data = r.get_json()
    assert data["pregnancy"]["due_date"] == (second + timedelta(days=280)).isoformat()
    assert data["current_week"] == 20

    # an explicit due date is kept as given
    due = second + timedelta(days=285)
    r = client.put("/api/pregnancy", json={
        "last_menstrual_period": second.isoformat(), "due_date": due.isoformat(),
    }, headers=headers)
    assert r.get_json()["pregnancy"]["due_date"] == due.isoformat()

    # updating other fields leaves the due date alone
    r = client.put("/api/pregnancy", json={"doctor_name": "Dr. Okafor"}, headers=headers)
    assert r.get_json()["pregnancy"]["due_date"] == due.isoformat()


def test_labor_watch_before_full_term_raises_no_alert(client, app):
    headers, _ = register(client)
    lmp = date.today() - timedelta(days=70)
    client.put("/api/pregnancy", json={"last_menstrual_period": lmp.isoformat()}, headers=headers)

    r = client.post("/api/labor-watch", json={"signs": [
        {"name": "Water breaking", "severity": "high", "is_active": True},
    ]}, headers=headers)
    data = r.get_json()
    assert data["current_week"] == 10
    assert data["is_full_term"] is False
    assert data["alert_needed"] is False
    assert data["alert"] is None
    with app.app_context():
        assert EmergencyAlert.query.filter_by(location=LABOR_ALERT_TAG).count() == 0
