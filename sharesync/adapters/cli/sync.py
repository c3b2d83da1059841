"""
Sync CLI commands
"""
import typer
from datetime import datetime
from pathlib import Path
from typing import Optional, List, Dict, Any

from rich.markup import escape
from rich.table import Table

from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.exceptions import SyncError, ConfigError
from ...core.constants import EXIT_DECLINED, EXIT_ERROR, EXIT_PARTIAL, RECORD_TIME_FORMAT
from ...core.interfaces import ShareFileSystem
from ...domain.sync import (
    SyncOrchestrator,
    SyncPlan,
    SyncReport,
    SyncResult,
    SourceFile,
    Conflict,
    RunStatus,
    resolve_scope,
)
from ...infrastructure.fs.share_fs import NativeShareFileSystem, MountedShareFileSystem
from ...infrastructure.state.result_log import ResultLogWriter
from ...adapters.cli.prompts import RichPromptProvider
from ...adapters.config.loader import ConfigLoader
from ...adapters.config.sync_parser import SyncSettings, parse_sync_settings

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()
prompt_provider = RichPromptProvider()


def register_sync_commands(app: typer.Typer) -> None:
    """Register push and hosts commands directly on the main app"""
    app.command(name="push")(push_run)
    app.command(name="hosts")(hosts_run)


# ============================================================
# Shared Options
# ============================================================

TargetOption = typer.Option(None, "--target", "-t", help="Target host (repeatable)")
TargetsFileOption = typer.Option(None, "--targets-file", help="File with one target host per line")
SshHostsOption = typer.Option(
    False, "--ssh-hosts", help="Use Host entries from ~/.ssh/config when no targets are given"
)
LocalHostOption = typer.Option(
    None, "--local-host", help="Name of this machine, excluded from targets (default: hostname)"
)
ConfigOption = typer.Option(None, "--config", "-c", help="Configuration file path (TOML)")


def _load_settings(config: Optional[Path], overrides: Dict[str, Any]) -> SyncSettings:
    """Merge TOML, environment and CLI options into settings"""
    loader = ConfigLoader()
    path = config.expanduser() if config else None
    cfg = loader.load(toml_path=path, cli_overrides=overrides)
    return parse_sync_settings(cfg, config_file_path=path)


def _build_filesystem(settings: SyncSettings) -> ShareFileSystem:
    if settings.mount_root:
        return MountedShareFileSystem(settings.mount_root)
    return NativeShareFileSystem()


# ============================================================
# Console Rendering
# ============================================================

def _fmt(ts: datetime) -> str:
    return ts.strftime(RECORD_TIME_FORMAT)


def show_plan(plan: SyncPlan) -> None:
    """Display pending files and target scope"""
    table = Table(title="Files to copy")
    table.add_column("Modified", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Directory")
    for f in plan.files:
        table.add_row(_fmt(f.mtime), escape(f.name), escape(f.directory))
    stdout_console.print(table)
    stdout_console.print(
        f"{len(plan.files)} file(s) to {len(plan.targets)} target(s): "
        f"{escape(', '.join(plan.targets))}"
    )


def _on_conflict(local_host: str):
    def callback(conflict: Conflict) -> None:
        source = conflict.source
        prompt_provider.warning(
            f"{escape(source.name)} on {escape(conflict.host)} ({_fmt(conflict.destination_mtime)}) "
            f"is newer than on {escape(local_host)} ({_fmt(source.mtime)})"
        )
    return callback


def _on_missing_destination(source: SourceFile, host: str, directory: str) -> None:
    prompt_provider.error(
        f"Destination not found: {escape(directory)} on {escape(host)}, {escape(source.name)} not copied"
    )


def _on_result(result: SyncResult) -> None:
    if result.ok:
        prompt_provider.success(f"{escape(result.source)} → {escape(result.destination)}")
    else:
        prompt_provider.error(
            f"{escape(result.source)} → {escape(result.destination)}: {escape(str(result.error))}"
        )


def _write_result_log(settings: SyncSettings, report: SyncReport) -> None:
    """Append the records of every copy attempt made so far"""
    if not settings.result_log:
        return
    written = ResultLogWriter(settings.result_log).write(report.results)
    logger.info(f"{written} record(s) appended to {settings.result_log}")


def _summarize(report: SyncReport) -> None:
    total = len(report.results)
    failed = len(report.failed)
    missing = report.missing_destinations
    message = f"Copied {total - failed} of {total} file(s)"
    if failed:
        message += f", {failed} failed"
    if missing:
        message += f", {missing} destination(s) not found"
    if failed or missing:
        prompt_provider.warning(message)
    else:
        prompt_provider.success(message)


# ============================================================
# Commands
# ============================================================

def push_run(
    sources: Optional[List[str]] = typer.Argument(
        None, help="Source file patterns (wildcards allowed)"
    ),
    target: Optional[List[str]] = TargetOption,
    targets_file: Optional[Path] = TargetsFileOption,
    ssh_hosts: bool = SshHostsOption,
    local_host: Optional[str] = LocalHostOption,
    mount_root: Optional[Path] = typer.Option(
        None, "--mount-root", help="Directory where remote shares are mounted as <root>/<host>/<share>"
    ),
    result_log: Optional[Path] = typer.Option(
        None, "--result-log", help="Append one record per copy attempt to this file"
    ),
    config: Optional[Path] = ConfigOption,
):
    """
    Copy files to the same path on remote hosts

    Examples:
        sharesync push 'C:\\Tools\\*.cfg' -t web01 -t web02
        sharesync push '\\\\fs01\\deploy\\app.ini' --targets-file hosts.txt
        sharesync push -c deploy.toml --result-log sync.log
    """
    try:
        settings = _load_settings(config, {
            "sources": sources or None,
            "targets": target or None,
            "targets_file": str(targets_file) if targets_file else None,
            "ssh_hosts": ssh_hosts or None,
            "local_host": local_host,
            "mount_root": str(mount_root) if mount_root else None,
            "result_log": str(result_log) if result_log else None,
        })

        orchestrator = SyncOrchestrator(
            filesystem=_build_filesystem(settings),
            prompt=prompt_provider,
            local_host=settings.local_host,
            on_plan=show_plan,
            on_conflict=_on_conflict(settings.local_host),
            on_missing_destination=_on_missing_destination,
            on_result=_on_result,
        )
        report = orchestrator.run(settings.sources, settings.targets)
        _write_result_log(settings, report)

    except SyncError as e:
        if e.report is not None:
            _write_result_log(settings, e.report)
        stderr_console.print(f"[red]Sync Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)
    except ConfigError as e:
        stderr_console.print(f"[red]Config Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)
    except Exception as e:
        logger.exception("Failed to sync")
        stderr_console.print(f"[red]Error:[/red] Failed to sync: {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)

    if report.status is RunStatus.DECLINED:
        prompt_provider.warning("Sync aborted by operator")
        raise typer.Exit(EXIT_DECLINED)

    _summarize(report)
    if report.failed or report.missing_destinations:
        raise typer.Exit(EXIT_PARTIAL)


def hosts_run(
    target: Optional[List[str]] = TargetOption,
    targets_file: Optional[Path] = TargetsFileOption,
    ssh_hosts: bool = SshHostsOption,
    local_host: Optional[str] = LocalHostOption,
    config: Optional[Path] = ConfigOption,
):
    """
    Show the target hosts a push would copy to

    Examples:
        sharesync hosts --ssh-hosts
        sharesync hosts -t web01 -t WEB01 --local-host web02
    """
    try:
        settings = _load_settings(config, {
            "targets": target or None,
            "targets_file": str(targets_file) if targets_file else None,
            "ssh_hosts": ssh_hosts or None,
            "local_host": local_host,
        })
    except ConfigError as e:
        stderr_console.print(f"[red]Config Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)

    scope = resolve_scope(settings.targets, settings.local_host)
    if not scope:
        stderr_console.print(
            f"[red]Error:[/red] No target hosts in scope (local host '{escape(settings.local_host)}' excluded)"
        )
        raise typer.Exit(EXIT_ERROR)

    for host in scope:
        stdout_console.print(escape(host))
