import csv
import sys
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from database.db import SessionLocal, init_db
from models.notifications import Notification as NotificationModel, NOTIFICATION_STATUSES  # ✅ 모델 import

CSV_PATH = "data/notifications.csv"  # ✅ 파일 경로 (type,message,status,timestamp)

def migrate_notifications(csv_path: str = CSV_PATH) -> int:
    init_db()
    db: Session = SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                status = (row.get("status") or "active").strip()
                if status not in NOTIFICATION_STATUSES:
                    raise ValueError(f"알 수 없는 알림 상태: {status}")

                timestamp = row.get("timestamp")
                notification = NotificationModel(
                    type=row["type"].strip(),                   # 알림 유형
                    message=row["message"],                     # 알림 내용
                    status=status,                              # active / inactive
                    timestamp=datetime.fromisoformat(timestamp.strip()) if timestamp else datetime.now(timezone.utc)
                )
                db.add(notification)
                count += 1
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print(f"✅ 알림 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_notifications(*sys.argv[1:2])
