# foodlink/domains/banner/__init__.py

"""
'banner' 도메인 (홈 화면 배너) 패키지입니다.
레코드별 비밀번호가 없으며, 모든 쓰기 작업은 마스터 패스워드로만 가능합니다.
"""
