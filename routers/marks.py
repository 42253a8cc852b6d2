from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from database.db import SessionLocal
from schemas.common import SuccessEnvelope
from schemas.marks import MarksUploadContext, MarksUploadResult
from services.exceptions import ValidationError
from services.marks_import import process_marks_upload

router = APIRouter(prefix="/upload-marks", tags=["성적 업로드"])

# ==========================================================
# [공통] DB 세션 관리
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ✅ [UPLOAD] CSV/엑셀 성적 일괄 등록 (multipart: file + 학급 정보 + paper)
@router.post("", response_model=SuccessEnvelope[MarksUploadResult])
def upload_marks(
    file: Optional[UploadFile] = File(None),
    subject: Optional[str] = Form(None),
    division: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    year: Optional[str] = Form(None),
    paper: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    context = MarksUploadContext(
        subject=subject, division=division, department=department, year=year, paper=paper
    )
    if context.missing_fields():
        raise ValidationError("All fields are required")

    count = process_marks_upload(db, file.file, file.filename, context.model_dump())
    return {
        "success": True,
        "data": {"count": count},
        "message": f"Marks uploaded successfully for {count} students",
    }
