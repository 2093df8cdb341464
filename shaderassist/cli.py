"""CLI entry point for ShaderAssist."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax

from shaderassist.compiler import CompileResult, SubprocessInvoker, build_command
from shaderassist.config import (
    DEFAULT_CONFIG_NAME,
    ConfigError,
    ShaderAssistConfig,
    load_config,
)
from shaderassist.config.loader import DEFAULT_CONFIG_TEMPLATE
from shaderassist.watch import (
    POLL_INTERVAL_SECONDS,
    CommandChannel,
    ScanCycle,
    Scheduler,
    WatchContext,
)

app = typer.Typer(
    name="shaderassist",
    help="Watch GLSL shader sources and recompile them to SPIR-V on change.",
)

config_app = typer.Typer(help="Manage ShaderAssist configuration.")
app.add_typer(config_app, name="config")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config_path: str | None = None


def _get_config() -> ShaderAssistConfig:
    try:
        return load_config(_config_path)
    except ConfigError as e:
        # pydantic messages contain [type=...] which rich would read as markup
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.callback()
def main(
    config: Annotated[
        str | None,
        typer.Option("--config", "-c", help=f"Path to {DEFAULT_CONFIG_NAME}"),
    ] = None,
) -> None:
    """Global options."""
    global _config_path
    _config_path = config


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=_LOG_LEVELS[level], format="%(message)s", force=True)


def _ensure_output_dir(cfg: ShaderAssistConfig) -> Path:
    output = cfg.output_path
    output.mkdir(parents=True, exist_ok=True)
    return output


def _report_failure(result: CompileResult) -> None:
    if result.ok:
        return
    detail = result.error or f"exit code {result.returncode}"
    rprint(f"[red]Compile {result.status.value}:[/red] {result.source} ({detail})")


@app.command()
def watch(
    report_failures: Annotated[
        bool,
        typer.Option("--report-failures", help="Print shaders that fail to compile"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="debug | info | warn | error (overrides config)"),
    ] = None,
) -> None:
    """Watch the shader directory and compile changed files until you quit."""
    cfg = _get_config()
    level = log_level or cfg.log_level
    if level not in _LOG_LEVELS:
        rprint(f"[red]Error:[/red] Invalid log level '{level}'. Choose debug, info, warn, or error.")
        raise typer.Exit(1)
    _configure_logging(level)

    watch_path = cfg.watch_path
    if not watch_path.is_dir():
        rprint(
            "[yellow]Warning:[/yellow] shader source directory not found: "
            f"{escape(str(watch_path))}, "
            f"retrying every {POLL_INTERVAL_SECONDS:.0f}s"
        )
    try:
        _ensure_output_dir(cfg)
    except OSError as e:
        rprint(f"[red]Error:[/red] could not create output directory: {e}")
        raise typer.Exit(1)

    rprint("ShaderAssist")
    rprint("Enter -h for the list of commands.")

    context = WatchContext()
    cycle = ScanCycle(
        cfg,
        context.state,
        SubprocessInvoker(cfg, working_dir=watch_path),
        on_result=_report_failure if report_failures else None,
        watch_path=watch_path,
    )
    scheduler = Scheduler(context, cycle)
    scheduler.start()
    try:
        CommandChannel(context).run()
    except KeyboardInterrupt:
        rprint("\n[dim]Interrupted.[/dim]")
    finally:
        scheduler.stop()


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    data = cfg.model_dump(mode="json")
    data["watch_path"] = str(cfg.watch_path)
    data["output_path"] = str(cfg.output_path)
    data["recognized_extensions"] = sorted(cfg.recognized_extensions)
    data["command_template"] = " ".join(build_command(cfg, "<name>", "<ext>"))
    rprint(Syntax(yaml.dump(data, default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default shaderassist.ini in current directory."""
    target = Path(DEFAULT_CONFIG_NAME)
    if target.exists() and not force:
        rprint(f"[yellow]{DEFAULT_CONFIG_NAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
