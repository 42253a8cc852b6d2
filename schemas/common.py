"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마 모음
- Pydantic v2 기준
- 포함 내용:
  1) 응답 표준: ErrorResponse, SuccessEnvelope[T]
  2) 학급 식별 튜플(과목/분반/학과/학년): ClassContext
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# =========================================================
# 1) 응답 표준
# =========================================================

class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py에서 이 스키마로 리턴
    """
    success: bool = False
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")


T = TypeVar("T")

class SuccessEnvelope(BaseModel, Generic[T]):
    """
    성공 응답 표준 래퍼
    - success: 항상 True
    - data: 실제 데이터(payload), FA 모드 조회처럼 없을 때는 None
    - message: 처리 결과 안내(선택)
    """
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


# =========================================================
# 2) 학급 식별 튜플
# =========================================================

class ClassContext(BaseModel):
    """
    과목/분반/학과/학년 4개 값으로 학급을 식별
    - 모든 필드를 Optional로 받고, 누락 여부는 missing_fields()로 판단
      (누락 시 400 + 고정 메시지를 내려주기 위함)
    """
    subject: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    year: Optional[str] = None

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    def missing_fields(self) -> List[str]:
        return [name for name, value in self.model_dump().items() if not value]

    def as_filter(self) -> dict:
        return {
            "subject": self.subject,
            "division": self.division,
            "department": self.department,
            "year": self.year,
        }


def iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
