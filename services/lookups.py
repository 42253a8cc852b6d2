from sqlalchemy.orm import Session

from models.students import Student as StudentModel
from models.marks import Marks as MarksModel
from models.fa_settings import FA_MODES


def _distinct(db: Session, column) -> list:
    rows = db.query(column).filter(column.isnot(None)).distinct().order_by(column).all()
    return [r[0] for r in rows]


def load_filter_options(db: Session) -> dict:
    """화면 필터용 선택지: 과목은 성적에서, 학과/학년/분반은 학생 정보에서 수집"""
    return {
        "subjects": _distinct(db, MarksModel.subject),
        "departments": _distinct(db, StudentModel.department),
        "years": _distinct(db, StudentModel.year),
        "divisions": _distinct(db, StudentModel.division),
        "faModes": list(FA_MODES),
    }
