# foodlink/__init__.py

"""
FoodLink 파트너 디렉터리 FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 비밀번호 검증 유틸리티를 담는 core 서브패키지,
그리고 각 비즈니스 도메인(파트너사, 배너, 콘텐츠, 문의)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "FoodLink API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "FoodLink partner directory API backend."
__license__ = "MIT"
__all__ = []
