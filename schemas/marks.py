from typing import Optional

from pydantic import BaseModel

from schemas.common import ClassContext


# ==========================================================
# [입력용 스키마] 성적 업로드 폼 값
# ==========================================================
class MarksUploadContext(ClassContext):
    paper: Optional[str] = None              # 시험지/평가 회차


# ==========================================================
# [출력용 스키마] 업로드 결과
# ==========================================================
class MarksUploadResult(BaseModel):
    count: int                               # 저장된 성적 행 수
