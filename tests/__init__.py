# tests/__init__.py

"""
FoodLink API의 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite 세션, 테스트 클라이언트, 알림/파일 저장소 대역 등 공용 픽스처.
- `test_main.py`: 루트, 헬스 체크, 공용(shared) 엔드포인트 테스트.
- `test_core.py`: 비밀번호 정책, 검증 유틸리티, 페이지네이션 등 핵심 모듈 단위 테스트.
- `domains/`: 각 비즈니스 도메인(company, banner, content, inquiry)별 통합 테스트.
"""

__title__ = "FoodLink API Tests"
__version__ = "0.1.0"
__all__ = []
