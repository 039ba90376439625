import pytest

from src.photo_validation.photo_validation.container import wire
from src.photo_validation.photo_validation.main import create_app
from src.photo_validation.photo_validation.scoring.config import BRAND_WEIGHTED_PROFILE
from tests.fakes import WEAK_PAYLOAD, InMemoryValidations, RecordingNotifier, StubAnnotator, make_check_ins, make_users


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    validations = InMemoryValidations()
    container = wire(
        users_repo=make_users(),
        checkins_repo=make_check_ins(validations),
        validations_repo=validations,
        notifier=RecordingNotifier(),
        annotator=StubAnnotator(WEAK_PAYLOAD),
        profile=BRAND_WEIGHTED_PROFILE,
    )
    return create_app(container)


def _client_as(app, user_id=None):
    client = app.test_client()
    if user_id:
        with client.session_transaction() as sess:
            sess["user_id"] = user_id
    return client


def test_run_returns_the_validation(app):
    resp = _client_as(app, "sup-1").post("/api/photo-validation/run", json={"checkInId": "chk-1"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["validation"]["status"] == "needs_review"
    assert body["validation"]["triggeredBy"] == "sup-1"


@pytest.mark.parametrize(
    "user_id, payload, status, code",
    [
        (None, {"checkInId": "chk-1"}, 401, "unauthenticated"),
        ("emp-1", {"checkInId": "chk-1"}, 403, "permission-denied"),
        ("sup-1", {}, 400, "invalid-argument"),
        ("sup-1", {"checkInId": "nope"}, 404, "not-found"),
        ("sup-1", {"checkInId": "chk-nophoto"}, 412, "failed-precondition"),
    ],
)
def test_run_errors_map_to_http_statuses(app, user_id, payload, status, code):
    resp = _client_as(app, user_id).post("/api/photo-validation/run", json=payload)
    assert resp.status_code == status
    body = resp.get_json()
    assert body["success"] is False
    assert body["code"] == code
    assert body["message"]


def test_review_then_read_back(app):
    client = _client_as(app, "sup-1")
    client.post("/api/photo-validation/run", json={"checkInId": "chk-1"})

    resp = client.post(
        "/api/photo-validation/review",
        json={"checkInId": "chk-1", "approved": False, "notes": "bad lighting"},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Photo rejected"}

    doc = client.get("/api/photo-validation/chk-1").get_json()["validation"]
    assert doc["status"] == "rejected"
    assert doc["rejectionReason"] == "bad lighting"
    assert doc["reviewedBy"] == "sup-1"


def test_review_rejects_non_boolean_decision(app):
    client = _client_as(app, "adm-1")
    client.post("/api/photo-validation/run", json={"checkInId": "chk-1"})
    resp = client.post("/api/photo-validation/review", json={"checkInId": "chk-1", "approved": "true"})
    assert resp.status_code == 400


def test_read_unknown_validation_is_404(app):
    resp = _client_as(app, "sup-1").get("/api/photo-validation/chk-1")
    assert resp.status_code == 404


def test_upload_hook_requires_token(app):
    client = app.test_client()
    resp = client.post("/hooks/photo-uploaded", json={"name": "attendance-photos/2025/12/emp-1/chk-1_1.jpg"})
    assert resp.status_code == 403

    resp = client.post(
        "/hooks/photo-uploaded",
        json={"name": "attendance-photos/2025/12/emp-1/chk-1_1.jpg", "bucket": "bucket"},
        headers={"X-Hook-Token": "test-hook-token"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["processed"] is True
    assert resp.get_json()["checkInId"] == "chk-1"


def test_upload_hook_refuses_non_ascii_token(app):
    resp = app.test_client().post(
        "/hooks/photo-uploaded",
        json={"name": "attendance-photos/2025/12/emp-1/chk-1_1.jpg", "bucket": "bucket"},
        headers={"X-Hook-Token": "tökén"},
    )
    assert resp.status_code == 403
    assert resp.get_json()["code"] == "permission-denied"


class UnreadableValidations(InMemoryValidations):
    def get(self, check_in_id):
        raise ConnectionError("database is unavailable")


def test_read_failure_returns_json_internal_error(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    validations = UnreadableValidations()
    app = create_app(
        wire(
            users_repo=make_users(),
            checkins_repo=make_check_ins(validations),
            validations_repo=validations,
            notifier=RecordingNotifier(),
            annotator=StubAnnotator(WEAK_PAYLOAD),
            profile=BRAND_WEIGHTED_PROFILE,
        )
    )

    resp = _client_as(app, "sup-1").get("/api/photo-validation/chk-1")
    assert resp.status_code == 500
    body = resp.get_json()
    assert body["success"] is False
    assert body["code"] == "internal"
