from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import SessionLocal
from schemas.queries import QueryRespond, serialize_query, serialize_notification
from services.exceptions import ValidationError
from services.query_workflow import list_queries_with_notifications, respond_to_query

router = APIRouter(prefix="/queries", tags=["학생 문의"])

# ==========================================================
# [공통] DB 세션 관리
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ✅ [READ] 전체 문의 + 활성 알림 (최신순)
@router.get("")
def read_queries(db: Session = Depends(get_db)):
    queries, notifications = list_queries_with_notifications(db)
    return {
        "success": True,
        "data": {
            "queries": [serialize_query(q) for q in queries],
            "notifications": [serialize_notification(n) for n in notifications],
        },
    }


# ✅ [UPDATE] 문의 답변 등록 → resolved
@router.post("/respond")
def respond_query(payload: QueryRespond, db: Session = Depends(get_db)):
    if not payload.queryId or not payload.response:
        raise ValidationError("Query ID and response are required")

    query = respond_to_query(db, payload.queryId, payload.response)
    return {
        "success": True,
        "data": serialize_query(query),
        "message": "Response submitted successfully",
    }
