from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Enum
from database.db import Base

NOTIFICATION_STATUSES = ("active", "inactive")


def _utcnow():
    return datetime.now(timezone.utc)


class Notification(Base):
    __tablename__ = "notifications"  # 알림 테이블 (API에서는 조회만)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # 알림 고유 ID
    type = Column(String(50), nullable=False)                               # 알림 유형
    message = Column(String(500), nullable=False)                           # 알림 내용
    status = Column(Enum(*NOTIFICATION_STATUSES, name="notification_status"), nullable=False, default="active")  # 노출 여부
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)                     # 등록 시각
