import pytest

from conftest import CLASS, add_marks, add_query, add_students
from models.fa_settings import FASetting as FASettingModel
from services.class_stats import calculate_class_stats, round_half_up


def test_empty_class_has_zero_stats(db):
    assert calculate_class_stats(db, **CLASS) == {
        "avgMarks": 0,
        "totalStudents": 0,
        "submissionsReceived": 0,
        "pendingQueries": 0,
        "faModeSet": False,
    }


def test_average_is_rounded_mean_of_all_rows(db):
    add_marks(db, [70, 80, 85])

    stats = calculate_class_stats(db, **CLASS)
    assert stats["avgMarks"] == 78
    assert stats["submissionsReceived"] == 3


def test_repeated_uploads_each_count_once(db):
    add_marks(db, [40], paper="Unit 1")
    add_marks(db, [40], paper="Unit 1")
    add_marks(db, [100], paper="Unit 2")

    stats = calculate_class_stats(db, **CLASS)
    assert stats["submissionsReceived"] == 3
    assert stats["avgMarks"] == 60


@pytest.mark.parametrize("value, expected", [(70.5, 71), (70.49, 70), (71.5, 72), (0.5, 1), (-0.5, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_marks_from_other_classes_are_ignored(db):
    add_marks(db, [90])
    add_marks(db, [10], division="B")
    add_marks(db, [10], subject="OS")

    stats = calculate_class_stats(db, **CLASS)
    assert stats["avgMarks"] == 90
    assert stats["submissionsReceived"] == 1


def test_total_students_ignores_subject(db):
    add_students(db, 4)
    add_students(db, 2, division="B")

    assert calculate_class_stats(db, **CLASS)["totalStudents"] == 4
    assert calculate_class_stats(db, **dict(CLASS, subject="Anything"))["totalStudents"] == 4


def test_pending_queries_match_full_tuple(db):
    add_query(db)
    add_query(db, status="resolved")
    add_query(db, subject="OS")
    add_query(db, year="TY")

    assert calculate_class_stats(db, **CLASS)["pendingQueries"] == 1


def test_fa_mode_flag(db):
    db.add(FASettingModel(mode="Assignment", **CLASS))
    db.commit()

    assert calculate_class_stats(db, **CLASS)["faModeSet"] is True
    assert calculate_class_stats(db, **dict(CLASS, division="B"))["faModeSet"] is False


# ==========================================================
# /api/class-stats
# ==========================================================
def test_class_stats_endpoint(client, db):
    add_students(db, 3)
    add_marks(db, [70, 80, 85])
    add_query(db)

    res = client.post("/api/class-stats", json=CLASS)

    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "data": {
            "avgMarks": 78,
            "totalStudents": 3,
            "submissionsReceived": 3,
            "pendingQueries": 1,
            "faModeSet": False,
        },
    }


@pytest.mark.parametrize("field", list(CLASS))
def test_class_stats_requires_every_field(client, field):
    body = {k: v for k, v in CLASS.items() if k != field}
    res = client.post("/api/class-stats", json=body)

    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "All filter parameters are required"}


def test_class_stats_accepts_numeric_year(client, db):
    add_marks(db, [50], year="2")

    res = client.post("/api/class-stats", json=dict(CLASS, year=2))

    assert res.json()["data"]["submissionsReceived"] == 1


def test_class_stats_rejects_non_object_body(client):
    res = client.post("/api/class-stats", json=["DBMS"])

    assert res.status_code == 400
    assert res.json()["success"] is False
