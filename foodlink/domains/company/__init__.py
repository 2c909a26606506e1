# foodlink/domains/company/__init__.py

"""
'company' 도메인 (파트너사) 패키지입니다.

파트너사 등록, 공개 목록(승인 상태에 따른 마스킹), 비밀번호 기반 수정/삭제,
그리고 관리자(마스터 패스워드) 승인 흐름을 담당합니다.

주요 서브모듈:
- `models.py`: t_companies, t_company_categories, t_company_details 테이블 모델.
- `schemas.py`: 요청/응답 스키마.
- `crud.py`: 카테고리/상세 정보를 포함한 비동기 CRUD.
- `services.py`: 마스킹, 승인 상태 전이, 권한 확인을 포함한 비즈니스 로직.
- `routers.py`: API 엔드포인트.
"""
