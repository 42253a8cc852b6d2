import os
import tempfile
from datetime import datetime, timedelta, timezone

# ✅ 앱 모듈을 불러오기 전에 테스트용 SQLite/업로드 경로 지정
_TMP_DIR = tempfile.mkdtemp(prefix="marks-tracker-tests-")
os.environ["DB_DSN"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")

import pytest
from fastapi.testclient import TestClient

from config.settings import settings
from database.db import Base, SessionLocal, engine, init_db
from main import app
from models.students import Student as StudentModel
from models.marks import Marks as MarksModel
from models.queries import Query as QueryModel
from models.notifications import Notification as NotificationModel

init_db()

CLASS = {"subject": "DBMS", "division": "A", "department": "Computer", "year": "SY"}
BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload_dir():
    return settings.UPLOAD_DIR


# ==========================================================
# 테스트 데이터 헬퍼
# ==========================================================
def add_students(db, count, **overrides):
    ctx = {k: v for k, v in CLASS.items() if k != "subject"}
    ctx.update(overrides)
    for i in range(count):
        db.add(StudentModel(student_id=f"S{i:03d}", name=f"Student {i}", **ctx))
    db.commit()


def add_marks(db, scores, paper="Unit 1", **overrides):
    ctx = dict(CLASS, **overrides)
    for i, score in enumerate(scores):
        db.add(MarksModel(student_id=f"S{i:03d}", student_name=f"Student {i}", paper=paper, marks=score, **ctx))
    db.commit()


def add_query(db, minutes=0, status="pending", **overrides):
    ctx = dict(CLASS, **overrides)
    query = QueryModel(
        student_id="S001",
        student_name="Student 1",
        message="Why was paper 2 marked down?",
        status=status,
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        **ctx,
    )
    db.add(query)
    db.commit()
    return query.id


def add_notification(db, minutes=0, status="active", message="Marks published"):
    notification = NotificationModel(
        type="marks", message=message, status=status, timestamp=BASE_TIME + timedelta(minutes=minutes)
    )
    db.add(notification)
    db.commit()
    return notification.id
