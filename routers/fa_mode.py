from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import SessionLocal
from schemas.common import ClassContext
from schemas.fa_settings import FASettingCreate, serialize_fa_setting
from services.exceptions import ValidationError
from services.fa_settings import get_fa_mode, set_fa_mode

router = APIRouter(prefix="/fa-mode", tags=["FA 모드"])

# ==========================================================
# [공통] DB 세션 관리
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ✅ [SET] 학급 FA 모드 설정 (기존 설정 교체)
@router.post("")
def create_fa_mode(payload: FASettingCreate, db: Session = Depends(get_db)):
    if payload.missing_fields():
        raise ValidationError("All fields are required")

    setting = set_fa_mode(db, mode=payload.mode, **payload.as_filter())
    return {
        "success": True,
        "data": serialize_fa_setting(setting),
        "message": "FA Mode set successfully",
    }


# ✅ [READ] 학급 FA 모드 조회 (없으면 data: null)
@router.get("")
def read_fa_mode(
    subject: Optional[str] = None,
    division: Optional[str] = None,
    department: Optional[str] = None,
    year: Optional[str] = None,
    db: Session = Depends(get_db),
):
    context = ClassContext(subject=subject, division=division, department=department, year=year)
    if context.missing_fields():
        raise ValidationError("All filter parameters are required")

    setting = get_fa_mode(db, **context.as_filter())
    return {"success": True, "data": serialize_fa_setting(setting)}
