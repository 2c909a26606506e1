# foodlink/services/__init__.py

"""
여러 도메인에서 공통으로 사용하는 외부 연동 서비스(메일 알림 등)를 모아둔 패키지입니다.
"""
