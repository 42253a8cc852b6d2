from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from database.db import Base

# ✅ FA(Formative Assessment) 모드 고정 목록 (/api/init 응답 순서 그대로)
FA_MODES = ("Online Quiz", "Offline Test", "Assignment", "Presentation", "Poster", "Other")


def _utcnow():
    return datetime.now(timezone.utc)


class FASetting(Base):
    __tablename__ = "fa_settings"  # 학급별 FA 모드 설정 테이블
    __table_args__ = (
        # 학급(과목/분반/학과/학년)당 설정은 최대 1건
        UniqueConstraint("subject", "division", "department", "year", name="uq_fa_settings_class_context"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # 설정 고유 ID
    subject = Column(String(100), nullable=False)                           # 과목
    division = Column(String(20), nullable=False)                           # 분반
    department = Column(String(100), nullable=False)                        # 학과
    year = Column(String(20), nullable=False)                               # 학년
    mode = Column(String(50), nullable=False)                               # FA 모드 (FA_MODES 중 하나)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)  # 설정 시각
