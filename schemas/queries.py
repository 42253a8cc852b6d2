from typing import Optional, Union

from pydantic import BaseModel

from schemas.common import iso


# ==========================================================
# [입력용 스키마]
# ==========================================================
class QueryRespond(BaseModel):
    queryId: Optional[Union[int, str]] = None    # 문의 ID
    response: Optional[str] = None               # 답변 내용


# ==========================================================
# [출력용 직렬화]
# ==========================================================
def serialize_query(q) -> dict:
    return {
        "id": q.id,
        "studentId": q.student_id,
        "studentName": q.student_name,
        "subject": q.subject,
        "division": q.division,
        "department": q.department,
        "year": q.year,
        "message": q.message,
        "response": q.response,
        "status": q.status,
        "timestamp": iso(q.timestamp),
    }


def serialize_notification(n) -> dict:
    return {
        "id": n.id,
        "type": n.type,
        "message": n.message,
        "status": n.status,
        "timestamp": iso(n.timestamp),
    }
