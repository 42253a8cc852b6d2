from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, Index
from database.db import Base

QUERY_STATUSES = ("pending", "resolved")


def _utcnow():
    return datetime.now(timezone.utc)


class Query(Base):
    __tablename__ = "queries"  # 학생 문의 테이블
    __table_args__ = (
        Index("ix_queries_class_context", "subject", "division", "department", "year", "status"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # 문의 고유 ID
    student_id = Column(String(50), nullable=False)                         # 학번
    student_name = Column(String(100), nullable=False)                      # 학생 이름
    subject = Column(String(100), nullable=False)                           # 과목
    division = Column(String(20), nullable=False)                           # 분반
    department = Column(String(100), nullable=False)                        # 학과
    year = Column(String(20), nullable=False)                               # 학년
    message = Column(Text, nullable=False)                                  # 문의 내용
    response = Column(Text, nullable=True)                                  # 교수자 답변 (미답변 시 NULL)
    status = Column(Enum(*QUERY_STATUSES, name="query_status"), nullable=False, default="pending")  # pending → resolved
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)       # 문의 등록 시각
