# foodlink/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `security.py`: 비밀번호 해싱, 레코드 비밀번호/마스터 패스워드 검증.
- `exceptions.py`: 서비스 계층의 공통 예외 분류.
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `pagination.py`: 페이지네이션 메타데이터와 응답 스키마.
- `dependencies.py`: FastAPI 의존성 주입에 사용되는 공통 함수들.
"""

__title__ = "FoodLink Core"
__description__ = "Core components for FoodLink FastAPI application."
__version__ = "0.1.0"
__all__ = []
