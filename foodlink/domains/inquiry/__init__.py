# foodlink/domains/inquiry/__init__.py

"""
'inquiry' 도메인 (1:1 문의) 패키지입니다.

문의 등록 시 작성자 IP/User-Agent를 기록하고 관리자에게 메일 알림을 보냅니다.
알림 실패는 이미 저장된 문의에 영향을 주지 않습니다.
"""
