# foodlink/domains/content/__init__.py

"""
'content' 도메인 (공지/콘텐츠 게시판) 패키지입니다.

작성은 마스터 패스워드로만 가능하며, 작성 시 게시글 비밀번호를 함께 지정하면
작성자가 해당 비밀번호로 이후 수정/삭제할 수 있습니다.
"""
