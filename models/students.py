from sqlalchemy import Column, Integer, String
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블 (등록은 외부 절차, API에서는 읽기 전용)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)  # 내부 고유 ID (Primary Key)
    student_id = Column(String(50), nullable=False, index=True)             # 학번 (자연 키)
    name = Column(String(100), nullable=False)                              # 학생 이름
    department = Column(String(100), nullable=False)                        # 학과
    year = Column(String(20), nullable=False)                               # 학년 (예: FY, SY, 2)
    division = Column(String(20), nullable=False)                           # 분반 (예: A, B)
