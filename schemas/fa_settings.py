from typing import Optional

from schemas.common import ClassContext, iso


# ==========================================================
# [입력용 스키마]
# ==========================================================
class FASettingCreate(ClassContext):
    mode: Optional[str] = None               # FA 모드 (Online Quiz, Assignment ...)


# ==========================================================
# [출력용 직렬화]
# ==========================================================
def serialize_fa_setting(s) -> Optional[dict]:
    if s is None:
        return None
    return {
        "id": s.id,
        "subject": s.subject,
        "division": s.division,
        "department": s.department,
        "year": s.year,
        "mode": s.mode,
        "createdAt": iso(s.created_at),
    }
