# foodlink/domains/__init__.py

"""
FoodLink API의 도메인 패키지입니다.

각 하위 패키지는 하나의 업무 영역(파트너사, 배너, 콘텐츠, 문의)을 담당하며
models / schemas / crud / services / routers 구조를 따릅니다.
"""
