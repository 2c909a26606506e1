# tests/domains/__init__.py

"""
FoodLink API의 도메인별 테스트 스위트 패키지입니다.

- `test_company.py`: 파트너사 등록, 마스킹, 카테고리 필터, 승인 상태 전이.
- `test_banner.py`: 홈 배너 관리 (마스터 전용 쓰기).
- `test_content.py`: 콘텐츠 게시판 (고정 글 정렬, 미리보기, 조회수).
- `test_inquiry.py`: 1:1 문의 등록, 메일 알림, 관리자 기능.
"""

__title__ = "FoodLink Domain Tests"
__version__ = "0.1.0"
__all__ = []
