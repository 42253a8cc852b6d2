import math

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.students import Student as StudentModel
from models.marks import Marks as MarksModel
from models.queries import Query as QueryModel
from models.fa_settings import FASetting as FASettingModel


def round_half_up(value: float) -> int:
    """0.5는 항상 올림 (내장 round()는 짝수 쪽으로 반올림)"""
    return int(math.floor(value + 0.5))


def calculate_class_stats(db: Session, subject: str, division: str, department: str, year: str) -> dict:
    """
    학급(과목/분반/학과/학년) 통계 계산
    - avgMarks: 해당 학급 성적 행 전체의 산술 평균(반올림), 행이 없으면 0
      같은 파일을 다시 올려도 행마다 한 번씩 집계됨 (학생/회차별 중복 제거 없음)
    - totalStudents: 학생 정보에는 과목이 없으므로 학과/학년/분반으로만 집계
    """
    class_filter = (
        MarksModel.subject == subject,
        MarksModel.division == division,
        MarksModel.department == department,
        MarksModel.year == year,
    )

    submissions, total_marks = db.query(
        func.count(MarksModel.id), func.sum(MarksModel.marks)
    ).filter(*class_filter).one()

    avg_marks = round_half_up(total_marks / submissions) if submissions else 0

    total_students = db.query(func.count(StudentModel.id)).filter(
        StudentModel.department == department,
        StudentModel.year == year,
        StudentModel.division == division,
    ).scalar()

    pending_queries = db.query(func.count(QueryModel.id)).filter(
        QueryModel.subject == subject,
        QueryModel.division == division,
        QueryModel.department == department,
        QueryModel.year == year,
        QueryModel.status == "pending",
    ).scalar()

    fa_setting = db.query(FASettingModel.id).filter(
        FASettingModel.subject == subject,
        FASettingModel.division == division,
        FASettingModel.department == department,
        FASettingModel.year == year,
    ).first()

    return {
        "avgMarks": avg_marks,
        "totalStudents": total_students or 0,
        "submissionsReceived": submissions,
        "pendingQueries": pending_queries or 0,
        "faModeSet": fa_setting is not None,
    }
