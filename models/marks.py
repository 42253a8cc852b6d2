from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Float, String, DateTime, Index
from database.db import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Marks(Base):
    __tablename__ = "marks"  # 업로드된 성적 테이블 (업로드마다 행 추가, 중복 제거 없음)
    __table_args__ = (
        Index("ix_marks_class_context", "subject", "division", "department", "year"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # 성적 고유 ID
    student_id = Column(String(50), nullable=False)                         # 학번 (students 테이블과 검증하지 않음)
    student_name = Column(String(100), nullable=False)                      # 학생 이름 (파일에서 복사)
    subject = Column(String(100), nullable=False)                           # 과목
    division = Column(String(20), nullable=False)                           # 분반
    department = Column(String(100), nullable=False)                        # 학과
    year = Column(String(20), nullable=False)                               # 학년
    paper = Column(String(100), nullable=False)                             # 시험지/평가 회차
    marks = Column(Float, nullable=False, default=0)                        # 점수
    uploaded_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)  # 업로드 시각
