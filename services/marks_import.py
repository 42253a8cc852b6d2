"""
services/marks_import.py

- 업로드된 성적 파일(CSV / XLS / XLSX)을 Marks 행으로 변환해 일괄 저장
- 처리 순서
  1) 임시 파일 저장 (크기/확장자 검사)
  2) 확장자별 파싱: CSV는 한 행씩 스트리밍, 엑셀은 첫 시트를 통째로 로드
  3) 행마다 학번/이름/점수 컬럼을 별칭 목록에서 찾아 검증
  4) 모든 행이 유효할 때만 한 번에 insert (한 행이라도 오류면 아무것도 저장하지 않음)
  5) 성공/실패와 상관없이 임시 파일 삭제
"""

import csv
import logging
import math
import re
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd
from sqlalchemy.orm import Session

from config.settings import settings
from models.marks import Marks as MarksModel
from services.exceptions import ValidationError
from utils.uploads import check_extension, remove_file, save_upload_file

logger = logging.getLogger(__name__)

# ==========================================================
# 컬럼 별칭 (앞에서부터 순서대로 확인, 값이 있는 첫 컬럼 사용)
# ==========================================================
STUDENT_ID_COLUMNS = ("Student ID", "student_id", "ID")
STUDENT_NAME_COLUMNS = ("Name", "student_name", "Student Name")
MARKS_COLUMNS = ("Marks", "marks", "Score")

SPREADSHEET_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}

# 엑셀에서 정수 학번이 101.0 처럼 읽히는 경우
_INTEGRAL_FLOAT = re.compile(r"^-?\d+\.0+$")

# CSV 파일 자체를 읽지 못할 때 발생하는 예외들 (엑셀은 iter_spreadsheet_rows에서 변환)
_READ_ERRORS = (csv.Error, UnicodeDecodeError)


def resolve_column(row: Dict, candidates: Sequence[str]) -> Optional[str]:
    for key in candidates:
        value = row.get(key)
        if value is None:
            continue
        value = str(value).strip()
        if value:
            return value
    return None


def _normalize_id(value: str) -> str:
    if _INTEGRAL_FLOAT.match(value):
        return value.split(".", 1)[0]
    return value


def parse_score(raw: Optional[str]) -> float:
    """점수 컬럼이 없으면 0, 숫자가 아니면(또는 NaN/inf) 오류"""
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        raise ValidationError("Invalid marks format")
    if not math.isfinite(value):
        raise ValidationError("Invalid marks format")
    return value


# ==========================================================
# 파서 (모두 (파일 기준 행 번호, 행) 쌍을 돌려줌, 헤더 = 1행)
# ==========================================================
def iter_csv_rows(path: Path) -> Iterator[Tuple[int, Dict]]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for row in reader:
            # 빈 줄은 DictReader가 건너뛰므로 line_num으로 실제 행 번호 사용
            # 헤더보다 칸이 많은 행은 None 키로 들어옴 → 무시
            yield reader.line_num, {k.strip(): v for k, v in row.items() if isinstance(k, str)}


def iter_spreadsheet_rows(path: Path, ext: str) -> Iterator[Tuple[int, Dict]]:
    try:
        df = pd.read_excel(path, sheet_name=0, dtype=str, engine=SPREADSHEET_ENGINES[ext])
    except Exception as e:
        # 엔진마다 예외 종류가 제각각 (빈 .xls는 xlrd에서 TypeError)
        raise ValidationError(f"Unable to read uploaded file: {e}")
    df.columns = [str(c).strip() for c in df.columns]
    # dropna 후에도 원래 index가 유지됨 → index 0 = 2행
    df = df.dropna(how="all")
    for index, record in zip(df.index, df.to_dict(orient="records")):
        yield int(index) + 2, {k: (None if pd.isna(v) else v) for k, v in record.items()}


def read_rows(path: Path, ext: str) -> Iterator[Tuple[int, Dict]]:
    if ext == ".csv":
        return iter_csv_rows(path)
    if ext in SPREADSHEET_ENGINES:
        return iter_spreadsheet_rows(path, ext)
    raise ValidationError("Unsupported file type")


# ==========================================================
# 변환/검증
# ==========================================================
def build_marks_records(rows: Iterable[Tuple[int, Dict]], context: Dict[str, str]) -> List[MarksModel]:
    """
    행 → MarksModel 목록
    - context: subject/division/department/year/paper (모든 행에 그대로 복사)
    - rows: (파일 기준 행 번호, 행) 쌍, 행 번호는 오류 메시지에 사용
    """
    records = []
    try:
        for line_no, row in rows:
            student_id = resolve_column(row, STUDENT_ID_COLUMNS)
            student_name = resolve_column(row, STUDENT_NAME_COLUMNS)
            if not student_id or not student_name:
                raise ValidationError(f"Student ID and Name are required in the file (row {line_no})")

            try:
                score = parse_score(resolve_column(row, MARKS_COLUMNS))
            except ValidationError:
                raise ValidationError(f"Invalid marks format (row {line_no})")

            records.append(
                MarksModel(
                    student_id=_normalize_id(student_id),
                    student_name=student_name,
                    subject=context["subject"],
                    division=context["division"],
                    department=context["department"],
                    year=context["year"],
                    paper=context["paper"],
                    marks=score,
                )
            )
    except _READ_ERRORS as e:
        raise ValidationError(f"Unable to read uploaded file: {e}")
    return records


def import_marks_file(db: Session, path: Path, ext: str, context: Dict[str, str]) -> int:
    records = build_marks_records(read_rows(path, ext), context)
    try:
        db.add_all(records)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return len(records)


def process_marks_upload(db: Session, src: BinaryIO, filename: str, context: Dict[str, str]) -> int:
    """
    업로드 1건 처리 (저장 → 파싱/검증 → 일괄 저장 → 임시 파일 삭제)
    - 반환값: 저장된 성적 행 수
    """
    ext = check_extension(filename, settings.ALLOWED_UPLOAD_EXTENSIONS)
    path = save_upload_file(src, filename, settings.UPLOAD_DIR, settings.MAX_UPLOAD_BYTES)
    logger.info(
        "성적 업로드 시작: file=%s subject=%s division=%s department=%s year=%s paper=%s",
        filename, context["subject"], context["division"], context["department"],
        context["year"], context["paper"],
    )
    try:
        count = import_marks_file(db, path, ext, context)
    except ValidationError as e:
        logger.warning("성적 업로드 거부: file=%s (%s)", filename, e.message)
        raise
    finally:
        remove_file(path)

    logger.info("성적 업로드 완료: file=%s rows=%d", filename, count)
    return count
