# tests/test_manage.py

"""
운영용 CLI (scripts/manage.py)에 대한 테스트입니다.
"""

from typer.testing import CliRunner

from scripts.manage import cli

runner = CliRunner()


def test_create_tables_command():
    result = runner.invoke(cli, ["create-tables"])

    assert result.exit_code == 0, result.output
    assert "테이블 생성이 완료되었습니다." in result.output


def test_set_status_rejects_wrong_master_password():
    """마스터 패스워드가 틀리면 DB에 접근하기 전에 오류 코드와 함께 종료합니다."""
    result = runner.invoke(cli, ["set-status", "1", "approved", "--master-password", "guess"])

    assert result.exit_code == 1
    assert "INVALID_PASSWORD" in result.output


def test_set_status_rejects_unknown_status():
    result = runner.invoke(cli, ["set-status", "1", "published", "-m", "master-secret"])

    assert result.exit_code != 0
