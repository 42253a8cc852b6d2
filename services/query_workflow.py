import logging

from sqlalchemy.orm import Session

from models.queries import Query as QueryModel
from models.notifications import Notification as NotificationModel
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def list_queries_with_notifications(db: Session):
    """전체 문의 + 활성 알림, 둘 다 최신순"""
    queries = db.query(QueryModel).order_by(QueryModel.timestamp.desc(), QueryModel.id.desc()).all()
    notifications = (
        db.query(NotificationModel)
        .filter(NotificationModel.status == "active")
        .order_by(NotificationModel.timestamp.desc(), NotificationModel.id.desc())
        .all()
    )
    return queries, notifications


# SQLite/MySQL BIGINT 범위 (벗어나면 드라이버에서 OverflowError)
_MAX_ID = 2 ** 63 - 1


def _parse_query_id(query_id):
    # 숫자가 아니거나 범위를 벗어난 ID는 존재할 수 없는 문의로 취급
    try:
        pk = int(str(query_id).strip())
    except (TypeError, ValueError):
        return None
    if not -_MAX_ID - 1 <= pk <= _MAX_ID:
        return None
    return pk


def respond_to_query(db: Session, query_id, response: str) -> QueryModel:
    """
    문의에 답변 등록 후 resolved 처리
    - 이미 resolved인 문의도 답변을 덮어씀 (마지막 요청 우선)
    """
    pk = _parse_query_id(query_id)
    query = db.get(QueryModel, pk) if pk is not None else None
    if query is None:
        raise NotFoundError("Query not found")

    query.response = response
    query.status = "resolved"
    db.commit()
    db.refresh(query)

    logger.info("문의 답변 완료: query_id=%s", query.id)
    return query
