import logging

from sqlalchemy.orm import Session

from models.fa_settings import FASetting as FASettingModel, FA_MODES
from services.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _class_filter(subject: str, division: str, department: str, year: str):
    return (
        FASettingModel.subject == subject,
        FASettingModel.division == division,
        FASettingModel.department == department,
        FASettingModel.year == year,
    )


def set_fa_mode(db: Session, subject: str, division: str, department: str, year: str, mode: str) -> FASettingModel:
    """
    학급 FA 모드 설정 (기존 설정 삭제 후 새로 등록)
    - 삭제와 등록을 한 트랜잭션(commit 1회)으로 처리
    - 동시에 같은 학급을 설정하면 uq_fa_settings_class_context 제약으로 한쪽이 실패 (재시도 없음)
    """
    if mode not in FA_MODES:
        raise ValidationError(f"Invalid FA mode. Allowed modes: {', '.join(FA_MODES)}")

    try:
        removed = (
            db.query(FASettingModel)
            .filter(*_class_filter(subject, division, department, year))
            .delete(synchronize_session="fetch")
        )
        # UNIQUE 제약 검사 전에 DELETE가 먼저 반영되도록 flush
        db.flush()

        setting = FASettingModel(
            subject=subject,
            division=division,
            department=department,
            year=year,
            mode=mode,
        )
        db.add(setting)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(setting)
    logger.info(
        "FA 모드 설정: %s/%s/%s/%s → %s (기존 %d건 교체)",
        subject, division, department, year, mode, removed,
    )
    return setting


def get_fa_mode(db: Session, subject: str, division: str, department: str, year: str):
    """학급 FA 모드 조회 (없으면 None)"""
    return (
        db.query(FASettingModel)
        .filter(*_class_filter(subject, division, department, year))
        .first()
    )
