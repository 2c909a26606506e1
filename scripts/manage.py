# scripts/manage.py

"""
FoodLink 운영용 CLI.

    python scripts/manage.py create-tables
    python scripts/manage.py set-status 12 approved
"""

import asyncio

import typer

from foodlink.core.database import create_db_and_tables, engine, get_async_session_context
from foodlink.core.exceptions import AppError
from foodlink.core.security import build_credential_verifier
from foodlink.domains.company import services as company_services
from foodlink.domains.company.models import ApprovalStatus

cli = typer.Typer(help="FoodLink 관리 명령")


@cli.command("create-tables")
def create_tables():
    """
    모든 테이블을 생성합니다 (이미 있는 테이블은 건드리지 않습니다).
    """
    async def run():
        try:
            await create_db_and_tables()
        finally:
            await engine.dispose()

    asyncio.run(run())
    typer.echo("테이블 생성이 완료되었습니다.")


@cli.command("set-status")
def set_status(
    company_id: int = typer.Argument(..., help="파트너사 ID"),
    status: ApprovalStatus = typer.Argument(..., help="변경할 승인 상태 (pending/approved/rejected)"),
    master_password: str = typer.Option(
        ..., "--master-password", "-m",
        prompt="마스터 패스워드를 입력하세요",
        hide_input=True,
        help="서버에 설정된 MASTER_PASSWORD",
    ),
):
    """
    파트너사의 승인 상태를 변경합니다. 현재와 같은 상태면 아무것도 바꾸지 않습니다.
    """
    verifier = build_credential_verifier()

    async def run():
        try:
            async with get_async_session_context() as db:
                return await company_services.update_approval_status(
                    db,
                    company_id=company_id,
                    new_status=status,
                    verifier=verifier,
                    master_password=master_password,
                )
        finally:
            await engine.dispose()

    try:
        company = asyncio.run(run())
    except AppError as e:
        typer.echo(f"오류 [{e.code}]: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"파트너사 #{company.id} 승인 상태: {company.approval_status.value}")


if __name__ == "__main__":
    cli()
