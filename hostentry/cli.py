"""
命令行入口：get / test / set
"""

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import typer
from rich.console import Console

from hostentry.config import Config
from hostentry.errors import InvalidArgumentError
from hostentry.models import DesiredState, Ensure
from hostentry.resource import HostEntryResource

app = typer.Typer(
    help="声明式管理 hosts 文件中的单个主机名映射",
    add_completion=False,
    no_args_is_help=True
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(config: Config) -> logging.Logger:
    """
    配置日志系统

    标准输出用于 JSON 结果，日志写到标准错误。

    返回:
        配置好的日志记录器实例
    """
    logger = logging.getLogger('hostentry')
    logger.setLevel(config.log_level)

    # 避免重复的处理器
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)

    # 格式: 时间戳 - 名称 - 级别 - 消息
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


def _run(action: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
    """执行操作，把异常转换为退出码"""
    try:
        return action()
    except InvalidArgumentError as e:
        err_console.print(f"[bold red]参数无效:[/bold red] {e}")
        raise typer.Exit(code=2)
    except OSError as e:
        err_console.print(f"[bold red]访问 hosts 文件失败:[/bold red] {e}")
        raise typer.Exit(code=1)


def _desired(
    hostname: str,
    ip: Optional[str],
    comment: Optional[str],
    ensure: str
) -> DesiredState:
    return DesiredState(
        host_name=hostname,
        ip_address=ip,
        comment=comment,
        ensure=Ensure.parse(ensure)
    )


@app.callback()
def main(
        ctx: typer.Context,
        hosts_file: Optional[Path] = typer.Option(
            None, "--hosts-file", "-f",
            help="hosts 文件路径（默认取 HOSTS_FILE 环境变量或 /etc/hosts）",
            dir_okay=False
        ),
        log_level: Optional[str] = typer.Option(
            None, "--log-level",
            help="日志级别（默认取 LOG_LEVEL 环境变量或 WARNING）"
        )
):
    """
    hostentry 命令行。
    所有命令共用的入口。
    """
    config = Config.from_env()
    if hosts_file is not None:
        config.hosts_file_path = str(hosts_file)
    if log_level is not None:
        config.log_level = log_level.upper()

    try:
        config.validate()
    except ValueError as e:
        err_console.print(f"[bold red]配置无效:[/bold red] {e}")
        raise typer.Exit(code=2)

    logger = setup_logging(config)
    ctx.obj = HostEntryResource(config.hosts_file_path, logger)


@app.command()
def get(
        ctx: typer.Context,
        hostname: str = typer.Option(..., "--hostname", "-n", help="要查找的主机名")
):
    """
    输出主机名的当前状态。
    """
    resource: HostEntryResource = ctx.obj
    payload = _run(lambda: resource.get(hostname).to_dict())
    console.print_json(data=payload, ensure_ascii=True)


@app.command()
def test(
        ctx: typer.Context,
        hostname: str = typer.Option(..., "--hostname", "-n", help="主机名"),
        ip: Optional[str] = typer.Option(None, "--ip", "-i", help="期望的 IP 地址"),
        ensure: str = typer.Option("Present", "--ensure", "-e", help="Present 或 Absent")
):
    """
    判断是否处于期望状态；一致时退出码为 0，否则为 1。
    """
    resource: HostEntryResource = ctx.obj

    def action() -> Dict[str, Any]:
        desired = _desired(hostname, ip, None, ensure)
        in_desired_state = resource.test(desired)
        return {"inDesiredState": in_desired_state, **resource.get(hostname).to_dict()}

    payload = _run(action)
    console.print_json(data=payload, ensure_ascii=True)
    if not payload["inDesiredState"]:
        raise typer.Exit(code=1)


@app.command(name="set")
def set_entry(
        ctx: typer.Context,
        hostname: str = typer.Option(..., "--hostname", "-n", help="主机名"),
        ip: Optional[str] = typer.Option(None, "--ip", "-i", help="目标 IP 地址"),
        comment: Optional[str] = typer.Option(None, "--comment", "-c", help="新增条目时写入的注释"),
        ensure: str = typer.Option("Present", "--ensure", "-e", help="Present 或 Absent")
):
    """
    [幂等] 把 hosts 文件收敛到期望状态。
    """
    resource: HostEntryResource = ctx.obj

    def action() -> Dict[str, Any]:
        changed = resource.set(_desired(hostname, ip, comment, ensure))
        return {"changed": changed, **resource.get(hostname).to_dict()}

    console.print_json(data=_run(action), ensure_ascii=True)


if __name__ == "__main__":
    app()
