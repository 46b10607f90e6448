import os
import sys
from types import SimpleNamespace

import pytest
import requests
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session as OrmSession

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from mamaalert import create_app
from mamaalert.extensions import db
from mamaalert.models.emergency import EmergencyAlert, EmergencyContact
from mamaalert.models.user import User
from mamaalert.services import emergency_alert_service, geolocation_service, sms_service
from mamaalert.services.emergency_alert_service import EmergencyAlertError


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


def register(client, email="alert@example.com"):
    r = client.post("/api/auth/register", json={
        "email": email, "password": "secret1", "first_name": "Funmi", "last_name": "Ade",
    })
    assert r.status_code == 201, r.data
    body = r.get_json()
    return {"Authorization": f"Bearer {body['token']}"}, body["user"]["id"]


def add_contacts(client, headers):
    for name, phone in [("Tunde", "+2348012345678"), ("Bisi", "+2348098765432")]:
        r = client.post("/api/emergency/contacts", json={
            "name": name, "phone": phone, "relationship": "family",
        }, headers=headers)
        assert r.status_code == 201, r.data


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status
        self.ok = 200 <= status < 300

    def json(self):
        return self._payload


def test_contacts_crud(client):
    headers, _ = register(client)
    r = client.post("/api/emergency/contacts", json={"name": "Tunde"}, headers=headers)
    assert r.status_code == 400

    add_contacts(client, headers)
    items = client.get("/api/emergency/contacts", headers=headers).get_json()["items"]
    assert [c["name"] for c in items] == ["Tunde", "Bisi"]

    cid = items[1]["id"]
    r = client.put(f"/api/emergency/contacts/{cid}", json={"is_primary": True}, headers=headers)
    assert r.status_code == 200
    items = client.get("/api/emergency/contacts", headers=headers).get_json()["items"]
    assert items[0]["name"] == "Bisi"

    assert client.delete(f"/api/emergency/contacts/{cid}", headers=headers).status_code == 200
    assert client.delete(f"/api/emergency/contacts/{cid}", headers=headers).status_code == 404


def test_alert_without_contacts_is_still_stored(client):
    headers, user_id = register(client)
    r = client.post("/api/emergency/alerts", json={}, headers=headers)
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["alert"]["message"] == "Emergency alert triggered by user"
    assert data["alert"]["location"] == "Location not available"
    assert data["sms"] is None
    assert "Add emergency contacts" in data["notifications"][0]["description"]


def test_alert_survives_sms_failure(client, app, monkeypatch):
    headers, user_id = register(client)
    add_contacts(client, headers)

    def boom(**kwargs):
        raise RuntimeError("gateway unreachable")

    monkeypatch.setattr(sms_service, "send_sms", boom)
    r = client.post("/api/emergency/alerts", json={"message": "Bleeding"}, headers=headers)
    assert r.status_code == 201, r.data
    data = r.get_json()
    assert data["sms_error"] == "gateway unreachable"
    assert data["notifications"][0]["variant"] == "warning"

    with app.app_context():
        alerts = EmergencyAlert.query.filter_by(user_id=user_id).all()
        assert len(alerts) == 1
        assert alerts[0].message == "Bleeding"


def test_alert_sends_one_sms_call_with_all_contacts(client, monkeypatch):
    headers, _ = register(client)
    add_contacts(client, headers)
    calls = []

    def fake_send(**kwargs):
        calls.append(kwargs)
        return sms_service.SmsDispatchResult(success=True, messages_sent=2, total_contacts=2)

    monkeypatch.setattr(sms_service, "send_sms", fake_send)
    r = client.post("/api/emergency/alerts", json={"latitude": 6.5, "longitude": 3.4}, headers=headers)
    assert r.status_code == 201
    data = r.get_json()
    assert data["alert"]["location"] == "6.5, 3.4"
    assert data["contacts_notified"] == 2

    assert len(calls) == 1
    assert [c["name"] for c in calls[0]["contacts"]] == ["Tunde", "Bisi"]
    assert calls[0]["user_name"] == "Funmi Ade"
    assert calls[0]["message_type"] == "emergency"
    assert calls[0]["user_location"] == "6.5, 3.4"


def test_exactly_one_alert_per_trigger(app):
    with app.app_context():
        user = User(email="x@example.com", password="x", first_name="X")
        db.session.add(user)
        db.session.commit()
        for _ in range(3):
            emergency_alert_service.trigger(user.id)
        assert EmergencyAlert.query.filter_by(user_id=user.id).count() == 3


def test_persistence_failure_is_fatal(client, app, monkeypatch):
    headers, user_id = register(client)

    def fail_commit(*args, **kwargs):
        raise OperationalError("INSERT INTO emergency_alerts", {}, Exception("disk full"))

    monkeypatch.setattr(OrmSession, "commit", fail_commit)
    r = client.post("/api/emergency/alerts", json={}, headers=headers)
    monkeypatch.undo()

    assert r.status_code == 500
    err = r.get_json()["error"]
    assert err["code"] == "ALERT_FAILED"
    assert "call emergency services directly" in err["message"]

    with app.app_context():
        assert EmergencyAlert.query.count() == 0
        monkeypatch.setattr(OrmSession, "commit", fail_commit)
        with pytest.raises(EmergencyAlertError):
            emergency_alert_service.trigger(user_id)


def test_geolocation_failure_keeps_default(app, monkeypatch):
    app.config["GEOLOCATION_URL"] = "https://geo.invalid/json"

    def timeout(*args, **kwargs):
        raise requests.Timeout("timed out")

    monkeypatch.setattr(geolocation_service.requests, "get", timeout)
    with app.app_context():
        result = geolocation_service.locate()
        assert result.location == "Location not available"
        assert result.resolved is False

        custom = geolocation_service.locate("Home")
        assert custom.location == "Home"


def test_geolocation_ip_lookup(app, monkeypatch):
    app.config["GEOLOCATION_URL"] = "https://geo.example/json"
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen["timeout"] = timeout
        return SimpleNamespace(raise_for_status=lambda: None, json=lambda: {"latitude": 9.05, "longitude": 7.49})

    monkeypatch.setattr(geolocation_service.requests, "get", fake_get)
    with app.app_context():
        result = geolocation_service.locate()
    assert result.location == "9.05, 7.49"
    assert result.source == "ip"
    assert seen["timeout"] == app.config["GEOLOCATION_TIMEOUT"]


def test_sms_service_reports_each_recipient(app, monkeypatch):
    sent = []

    def fake_post(url, json=None, timeout=None):
        sent.append(json)
        if json["to"] == "+2348000000000":
            return FakeResponse({"message": "Insufficient balance"}, 400)
        return FakeResponse({"message": "Successfully Sent", "message_id": "abc"})

    monkeypatch.setattr(sms_service.requests, "post", fake_post)
    with app.app_context():
        result = sms_service.send_sms(
            message="",
            user_name="Funmi Ade",
            message_type="emergency",
            contacts=[{"name": "Tunde", "phone": "+2348012345678"}, {"name": "Nobody", "phone": ""}],
            phone_number="+2348000000000",
            user_location="6.5, 3.4",
        )

    assert result.success is True
    assert result.total_contacts == 2
    assert result.messages_sent == 1
    assert result.results[0]["messageId"] == "abc"
    assert result.results[1]["error"] == "Insufficient balance"
    assert sent[0]["api_key"] == "test-termii-key"
    assert sent[0]["from"] == "MamaAlert"
    assert "Funmi Ade has triggered an emergency alert" in sent[0]["sms"]
    assert "Location: 6.5, 3.4" in sent[0]["sms"]


def test_sms_service_without_api_key(app):
    app.config["TERMII_API_KEY"] = None
    with app.app_context():
        result = sms_service.send_sms(message="hi", user_name="A", phone_number="+2348012345678")
    assert result.success is False
    assert "not configured" in result.error


def test_sms_endpoint_requires_recipient(client):
    headers, _ = register(client)
    r = client.post("/api/sms/send", json={"userName": "A", "message": "hi"}, headers=headers)
    assert r.status_code == 400
    r = client.post("/api/sms/send", json={
        "userName": "A", "message": "hi", "phoneNumber": "+2348012345678", "messageType": "spam",
    }, headers=headers)
    assert r.status_code == 400


def test_list_alerts_newest_first(client):
    headers, _ = register(client)
    client.post("/api/emergency/alerts", json={"message": "first"}, headers=headers)
    client.post("/api/emergency/alerts", json={"message": "second"}, headers=headers)
    items = client.get("/api/emergency/alerts", headers=headers).get_json()["items"]
    assert len(items) == 2
    assert {i["message"] for i in items} == {"first", "second"}
