"""Main CLI entry point for the notion-unfurl command.

This module provides the Typer application used to preview how a shared
Notion link would unfurl and to replay saved Slack Events API payloads
through the same handlers the service runs.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from src.cli.config import ConfigLoader
from src.cli.errors import CLIError
from src.cli.models import AppConfig, ExitCode
from src.cli.output import OutputHandler
from src.notion_api.api_wrapper import NotionAPIWrapper
from src.notion_api.auth import Authenticator
from src.notion_api.errors import (
    APIUnreachableError,
    InvalidCredentialsError,
    SyncError,
)
from src.page_preview.page_resolver import PageResolver
from src.page_preview.url_resolver import get_page_id_from_url
from src.page_preview.visibility_checker import VisibilityChecker
from src.slack_integration.errors import SlackUnreachableError
from src.slack_integration.event_dispatcher import EventDispatcher
from src.slack_integration.guardian import SlackGuardian
from src.slack_integration.slack_client import SlackClient
from src.slack_integration.unfurl_handler import LinkSharedHandler

app = typer.Typer(
    name="notion-unfurl",
    help="""Slack link previews for Notion pages.

EXAMPLES:
  notion-unfurl preview https://www.notion.so/team/Plan-571bb99b29e040eb8a46c2f9b7d138af
  notion-unfurl preview <url> --json
  notion-unfurl handle-event saved_event.json""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"notion-unfurl_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _exit_code_for(error: Exception) -> ExitCode:
    if isinstance(error, InvalidCredentialsError):
        return ExitCode.AUTH_ERROR
    if isinstance(error, (APIUnreachableError, SlackUnreachableError)):
        return ExitCode.NETWORK_ERROR
    return ExitCode.GENERAL_ERROR


def _build_resolver(config: AppConfig, auth: Authenticator, api: NotionAPIWrapper) -> PageResolver:
    checker = VisibilityChecker(
        cookie_token=auth.get_notion_cookie_token(),
        space_id=config.space_id,
    )
    return PageResolver(api, checker, options=config.preview)


def _build_dispatcher(config: AppConfig, auth: Authenticator) -> EventDispatcher:
    api = NotionAPIWrapper(auth)
    slack = SlackClient(token=auth.get_slack_bot_token())
    guardian = None
    if config.guardian.enabled:
        guardian = SlackGuardian(api, slack, config.guardian)
    return EventDispatcher(
        LinkSharedHandler(_build_resolver(config, auth, api), slack),
        guardian=guardian,
    )


def _read_payload(event_file: str) -> Dict[str, Any]:
    """Read a JSON payload from a file path, or stdin for '-'."""
    try:
        if event_file == '-':
            content = sys.stdin.read()
        else:
            content = Path(event_file).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise CLIError(f"Cannot read event file {event_file}: {e}") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise CLIError(f"Event file {event_file} is not valid JSON: {e}") from e


@app.command("preview")
def preview_command(
    url: str = typer.Argument(..., help="Shared Notion URL"),
    block_count: Optional[int] = typer.Option(
        None,
        "--block-count",
        min=0,
        help="Maximum blocks rendered per nesting level (default 20)",
    ),
    body_depth: Optional[int] = typer.Option(
        None,
        "--body-depth",
        min=0,
        help="Maximum nested levels expanded in the body (default 3)",
    ),
    breadcrumbs_depth: Optional[int] = typer.Option(
        None,
        "--breadcrumbs-depth",
        min=0,
        help="Maximum levels in the breadcrumb trail (default 2)",
    ),
    skip_visibility_check: bool = typer.Option(
        False,
        "--skip-visibility-check",
        help="Render the page even if it is not shared with the workspace",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the unfurl attachment as JSON",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to config.yaml (default .notion-unfurl/config.yaml)",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Resolve a shared Notion URL and show its link preview."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        config = ConfigLoader.load(config_path)
        if block_count is not None:
            config.preview.block_count = block_count
        if body_depth is not None:
            config.preview.body_depth = body_depth
        if breadcrumbs_depth is not None:
            config.preview.breadcrumbs_depth = breadcrumbs_depth

        auth = Authenticator()
        api = NotionAPIWrapper(auth)

        with output.spinner("Resolving page..."):
            if skip_visibility_check:
                page_id = get_page_id_from_url(url)
                resolver = PageResolver(api, visibility_checker=None, options=config.preview)
                payload = resolver.build_preview(page_id, url) if page_id else None
            else:
                payload = _build_resolver(config, auth, api).resolve(url)

    except (SyncError, ValueError) as e:
        logger.error(f"Preview failed: {e}")
        output.error(f"Preview failed: {e}")
        raise typer.Exit(_exit_code_for(e))

    if payload is None:
        output.warning(f"No preview: page id not found or page is not public ({url})")
        raise typer.Exit(ExitCode.NOT_PREVIEWABLE)

    if as_json:
        output.print_json(payload.to_attachment())
    else:
        output.success(f"Preview resolved: {payload.title or '(untitled)'}")
        output.info(f"Breadcrumbs: {payload.footer}")
        output.debug(
            f"Budgets: block_count={config.preview.block_count}, "
            f"body_depth={config.preview.body_depth}, "
            f"breadcrumbs_depth={config.preview.breadcrumbs_depth}"
        )
        output.print_preview(payload)
    raise typer.Exit(ExitCode.SUCCESS)


@app.command("handle-event")
def handle_event_command(
    event_file: str = typer.Argument(
        ...,
        help="Path to a saved Events API JSON body, or '-' for stdin",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to config.yaml (default .notion-unfurl/config.yaml)",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Dispatch a Slack Events API payload (unfurls and guardian replies)."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        config = ConfigLoader.load(config_path)
        payload = _read_payload(event_file)
        dispatcher = _build_dispatcher(config, Authenticator())
        result = dispatcher.dispatch(payload)
    except SyncError as e:
        logger.error(f"Event handling failed: {e}")
        output.error(f"Event handling failed: {e}")
        raise typer.Exit(_exit_code_for(e))

    output.print_json(result)
    raise typer.Exit(ExitCode.SUCCESS)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
