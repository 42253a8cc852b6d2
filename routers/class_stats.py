from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import SessionLocal
from schemas.class_stats import ClassStats
from schemas.common import ClassContext, SuccessEnvelope
from services.class_stats import calculate_class_stats
from services.exceptions import ValidationError

router = APIRouter(prefix="/class-stats", tags=["학급 통계"])

# ==========================================================
# [공통] DB 세션 관리
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ✅ [STATS] 학급 평균/학생 수/제출 수/미해결 문의/FA 설정 여부
@router.post("", response_model=SuccessEnvelope[ClassStats], response_model_exclude_none=True)
def read_class_stats(payload: ClassContext, db: Session = Depends(get_db)):
    if payload.missing_fields():
        raise ValidationError("All filter parameters are required")

    stats = calculate_class_stats(db, **payload.as_filter())
    return {"success": True, "data": stats}
