# foodlink/domains/shared/__init__.py

"""
여러 도메인이 함께 사용하는 공용 API (마스터 패스워드 확인, 파일 업로드) 패키지입니다.
"""
