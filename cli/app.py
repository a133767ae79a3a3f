"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    lh --version                    # 버전 표시
    lh lakehouse-usage [옵션]       # 어제 테이블 사용량을 Slack에 게시
    lh regions [--json]             # 등록된 클러스터 리전 목록

    예시:
    lh lakehouse-usage --region eu-west-1 --env prod --cloud aws --password ***
    SLACK_TOKEN=xoxb-... lh lakehouse-usage --region us-east-1 --env staging --cloud aws

Usage:
    # 명령줄에서 직접 실행
    $ lh lakehouse-usage --region eu-west-1 --env prod

    # 모듈로 실행
    $ python -m cli.app
"""

import logging
import os

import click
from click import Context
from rich.console import Console
from rich.markup import escape

from core.config import LogConfig, get_env_bool, get_version, settings
from core.exceptions import InvalidRegionError, LHError, format_error_for_user, is_auth_failure

logger = logging.getLogger(__name__)

VERSION = get_version()

err_console = Console(stderr=True)


@click.group()
@click.version_option(VERSION, prog_name="lh")
@click.option("--debug", is_flag=True, help="DEBUG 로그 출력 (또는 LH_DEBUG=1)")
@click.pass_context
def cli(ctx: Context, debug: bool) -> None:
    """LH - Lakehouse CLI"""
    debug = debug or get_env_bool("LH_DEBUG")
    LogConfig.from_env().apply(debug=debug)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@cli.command("lakehouse-usage")
@click.option("--url", default="", help="URL of the ClickHouse cluster (예약, 현재 미사용)")
@click.option(
    "--user",
    default=settings.DEFAULT_CLUSTER_USER,
    show_default=True,
    help="User to connect to the ClickHouse cluster",
)
@click.option("--password", default="", help="Password to connect to the ClickHouse cluster")
@click.option("--region", default="", help="Region of the ClickHouse cluster")
@click.option("--env", default="", help="Environment of the ClickHouse cluster")
@click.option("--cloud", default="", help="cloud provider of the Clickhouse cluster")
@click.option(
    "--slack-token",
    default=lambda: os.environ.get("SLACK_TOKEN", ""),
    show_default="$SLACK_TOKEN",
    help="token to publish stats on Slack",
)
@click.option(
    "--slack-channel",
    default=None,
    help="Slack 채널 (기본: $SLACK_CHANNEL 또는 설정값)",
)
@click.option("--timeout", type=int, default=settings.HTTP_TIMEOUT, show_default=True, help="HTTP 타임아웃 (초)")
@click.pass_context
def lakehouse_usage_command(
    ctx: Context,
    url: str,
    user: str,
    password: str,
    region: str,
    env: str,
    cloud: str,
    slack_token: str,
    slack_channel: str | None,
    timeout: int,
) -> None:
    """어제 사용된/사용되지 않은 Lakehouse 테이블을 Slack에 게시

    \b
    Examples:
        lh lakehouse-usage --region eu-west-1 --env prod --cloud aws
        lh lakehouse-usage --region us-east-1 --env staging --slack-channel '#data-ops'
    """
    from core.usage import UsageReportConfig, run_usage_report

    config = UsageReportConfig(
        region=region,
        env=env,
        cloud=cloud,
        user=user,
        password=password,
        slack_token=slack_token,
        slack_channel=slack_channel,
        url=url,
        timeout=timeout,
    )

    try:
        report = run_usage_report(config)
    except LHError as e:
        logger.debug("lakehouse-usage 실패: %s", e.to_dict())
        err_console.print(f"[red]{escape(format_error_for_user(e))}[/red]", highlight=False)
        _print_error_hint(e)
        if ctx.obj.get("debug"):
            import traceback

            traceback.print_exc()
        raise SystemExit(1) from e

    logger.info("게시 완료: 사용 %d / 미사용 %d", report.used_count, report.unused_count)


def _print_error_hint(error: LHError) -> None:
    """오류 유형별 안내 출력"""
    if isinstance(error, InvalidRegionError):
        from core.providers import list_regions

        try:
            regions = list_regions(error.provider or settings.DEFAULT_PROVIDER)
        except LHError:
            return
        if regions:
            err_console.print(f"[dim]사용 가능한 리전: {escape(', '.join(regions))}[/dim]", highlight=False)
    elif is_auth_failure(error):
        err_console.print("[dim]--user / --password 값을 확인하세요[/dim]", highlight=False)


@cli.command("regions")
@click.option("--provider", default=settings.DEFAULT_PROVIDER, show_default=True, help="클러스터 종류")
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def regions_command(provider: str, as_json: bool) -> None:
    """등록된 ClickHouse 클러스터 리전 목록

    \b
    Examples:
        lh regions
        lh regions --json
    """
    import json as json_module

    from rich.table import Table

    from core.providers import get_cluster_registry

    try:
        registry = get_cluster_registry()
    except LHError as e:
        err_console.print(f"[red]{escape(format_error_for_user(e))}[/red]", highlight=False)
        raise SystemExit(1) from e

    regions = sorted(registry.regions(provider))
    if not regions:
        click.echo(f"등록된 리전 없음: {provider}", err=True)
        raise SystemExit(1)

    if as_json:
        output_data = [{"provider": provider, "region": r, "url_template": registry.get(provider, r)} for r in regions]
        click.echo(json_module.dumps(output_data, ensure_ascii=False, indent=2))
        return

    console = Console()
    table = Table(title=f"{provider} 클러스터", show_header=True)
    table.add_column("Region", style="cyan", no_wrap=True)
    table.add_column("URL Template", style="white")
    for r in regions:
        table.add_row(r, registry.get(provider, r) or "")
    console.print(table)


if __name__ == "__main__":
    cli()
