import csv
import sys
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from database.db import SessionLocal, init_db
from models.queries import Query as QueryModel, QUERY_STATUSES  # ✅ 모델 import

CSV_PATH = "data/queries.csv"  # ✅ 파일 경로

def _parse_timestamp(value):
    # 비어 있으면 현재 시각, ISO-8601 문자열이면 그대로 사용
    if not value:
        return datetime.now(timezone.utc)
    return datetime.fromisoformat(value.strip())

def migrate_queries(csv_path: str = CSV_PATH) -> int:
    init_db()
    db: Session = SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                status = (row.get("status") or "pending").strip()
                if status not in QUERY_STATUSES:
                    raise ValueError(f"알 수 없는 문의 상태: {status}")

                query = QueryModel(
                    student_id=row["studentId"].strip(),        # 학번
                    student_name=row["studentName"].strip(),    # 학생 이름
                    subject=row["subject"].strip(),             # 과목
                    division=row["division"].strip(),           # 분반
                    department=row["department"].strip(),       # 학과
                    year=row["year"].strip(),                   # 학년
                    message=row["message"],                     # 문의 내용
                    response=row.get("response") or None,       # 답변 (없으면 NULL)
                    status=status,                              # pending / resolved
                    timestamp=_parse_timestamp(row.get("timestamp"))
                )
                db.add(query)
                count += 1
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print(f"✅ 학생 문의 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_queries(*sys.argv[1:2])
