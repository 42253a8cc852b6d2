import csv
import sys
from sqlalchemy.orm import Session
from database.db import SessionLocal, init_db
from models.students import Student as StudentModel  # ✅ 모델 import

CSV_PATH = "data/students.csv"  # ✅ 파일 경로 (studentId,name,department,year,division)

def migrate_students(csv_path: str = CSV_PATH) -> int:
    init_db()
    db: Session = SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                student = StudentModel(
                    student_id=row["studentId"].strip(),        # 학번
                    name=row["name"].strip(),                   # 학생 이름
                    department=row["department"].strip(),       # 학과
                    year=row["year"].strip(),                   # 학년
                    division=row["division"].strip()            # 분반
                )
                db.add(student)
                count += 1
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

    print(f"✅ 학생 정보 CSV → DB 마이그레이션 완료 ({count}건)")
    return count

if __name__ == "__main__":
    migrate_students(*sys.argv[1:2])
