from pydantic import BaseModel


# ==========================================================
# [출력용 스키마] 학급 통계
# ==========================================================
class ClassStats(BaseModel):
    avgMarks: int                 # 평균 점수 (반올림, 대상 없으면 0)
    totalStudents: int            # 학과/학년/분반 기준 학생 수
    submissionsReceived: int      # 업로드된 성적 행 수
    pendingQueries: int           # 미해결 문의 수
    faModeSet: bool               # FA 모드 설정 여부
