from sqlalchemy import create_engine               # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import declarative_base         # 모델의 Base 클래스
from sqlalchemy.orm import sessionmaker            # 세션 팩토리 함수

from config.settings import settings               # ✅ 환경변수 설정 파일 불러오기

# ✅ SQLite는 요청 스레드가 바뀌므로 같은 스레드 검사 해제
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성 (프로세스 전역에서 한 번만)
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


def init_db():
    """모델 모듈을 모두 로드한 뒤 누락된 테이블 생성"""
    from models import students, marks, queries, notifications, fa_settings  # noqa: F401

    Base.metadata.create_all(bind=engine)
