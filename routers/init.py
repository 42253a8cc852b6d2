from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import SessionLocal
from services.lookups import load_filter_options

router = APIRouter(prefix="/init", tags=["초기 데이터"])

# ==========================================================
# [공통] DB 세션 관리
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ✅ [READ] 필터 선택지(과목/학과/학년/분반) + FA 모드 목록
@router.get("")
def read_init_data(db: Session = Depends(get_db)):
    return {"success": True, "data": load_filter_options(db)}
