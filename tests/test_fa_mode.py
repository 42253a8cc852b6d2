import pytest
from sqlalchemy.exc import IntegrityError

from conftest import CLASS
from models.fa_settings import FASetting as FASettingModel, FA_MODES
from services.exceptions import ValidationError
from services.fa_settings import get_fa_mode, set_fa_mode


def _settings(db):
    db.expire_all()
    return db.query(FASettingModel).all()


def test_setting_twice_keeps_only_latest_mode(client, db):
    client.post("/api/fa-mode", json=dict(CLASS, mode="Online Quiz"))
    res = client.post("/api/fa-mode", json=dict(CLASS, mode="Poster"))

    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "FA Mode set successfully"
    assert body["data"]["mode"] == "Poster"
    assert body["data"]["createdAt"]

    rows = _settings(db)
    assert len(rows) == 1
    assert rows[0].mode == "Poster"


def test_setting_one_class_leaves_others_alone(client, db):
    client.post("/api/fa-mode", json=dict(CLASS, mode="Assignment"))
    client.post("/api/fa-mode", json=dict(CLASS, division="B", mode="Presentation"))

    assert sorted(s.mode for s in _settings(db)) == ["Assignment", "Presentation"]


def test_get_returns_setting_for_class(client):
    client.post("/api/fa-mode", json=dict(CLASS, mode="Offline Test"))

    res = client.get("/api/fa-mode", params=CLASS)

    assert res.status_code == 200
    data = res.json()["data"]
    assert {k: data[k] for k in CLASS} == CLASS
    assert data["mode"] == "Offline Test"


def test_get_returns_null_when_unset(client):
    res = client.get("/api/fa-mode", params=CLASS)

    assert res.json() == {"success": True, "data": None}


@pytest.mark.parametrize("field", list(CLASS))
def test_get_requires_every_filter(client, field):
    params = {k: v for k, v in CLASS.items() if k != field}
    res = client.get("/api/fa-mode", params=params)

    assert res.status_code == 400
    assert res.json()["message"] == "All filter parameters are required"


@pytest.mark.parametrize("field", list(CLASS) + ["mode"])
def test_set_requires_every_field(client, db, field):
    body = {k: v for k, v in dict(CLASS, mode="Other").items() if k != field}
    res = client.post("/api/fa-mode", json=body)

    assert res.status_code == 400
    assert res.json()["message"] == "All fields are required"
    assert _settings(db) == []


def test_set_rejects_unknown_mode(client, db):
    res = client.post("/api/fa-mode", json=dict(CLASS, mode="Viva"))

    assert res.status_code == 400
    assert "Invalid FA mode" in res.json()["message"]
    assert _settings(db) == []


def test_every_listed_mode_is_accepted(db):
    for mode in FA_MODES:
        assert set_fa_mode(db, mode=mode, **CLASS).mode == mode
    assert get_fa_mode(db, **CLASS).mode == FA_MODES[-1]


def test_invalid_mode_keeps_existing_setting(db):
    set_fa_mode(db, mode="Assignment", **CLASS)

    with pytest.raises(ValidationError):
        set_fa_mode(db, mode="Viva", **CLASS)

    assert get_fa_mode(db, **CLASS).mode == "Assignment"


# 교체(삭제 + 등록)는 한 트랜잭션으로 처리하고, 학급당 1건은 DB 제약으로도 보장
# (동시 설정 요청이 겹치면 늦게 커밋하는 쪽이 제약 위반으로 실패)
def test_store_rejects_second_setting_for_same_class(db):
    db.add(FASettingModel(mode="Assignment", **CLASS))
    db.commit()

    db.add(FASettingModel(mode="Poster", **CLASS))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert [s.mode for s in _settings(db)] == ["Assignment"]
