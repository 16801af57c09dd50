"""Helpers shared by CLI commands."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

import typer

from lr_client.client import LuraphClient
from lr_common.errors import ConfigurationError, LRError
from lr_ui.flows.api_key import ensure_api_key
from lr_ui.flows.errors import UIFlowError
from lr_ui.wiring.dependencies import UIContext


@contextmanager
def exit_on_errors(ctx: UIContext) -> Iterator[None]:
    """Print typed failures with the presenter and exit non-zero."""
    try:
        yield
    except UIFlowError as exc:
        ctx.ui.present.error(str(exc))
        raise typer.Exit(exc.exit_code)
    except ConfigurationError as exc:
        ctx.ui.present.error(f"Configuration error: {exc}")
        raise typer.Exit(1)
    except LRError as exc:
        ctx.ui.present.error(str(exc))
        raise typer.Exit(1)


def require_tty(ctx: UIContext) -> None:
    if ctx.headless:
        return
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise UIFlowError("Interactive option selection requires a TTY (or use --headless).")


def client_or_exit(ctx: UIContext) -> LuraphClient:
    """Build an API client, asking for a key first when none is configured."""
    settings = ctx.load_settings()
    api_key = ensure_api_key(ctx.ui, ctx.settings_store, settings)
    if not api_key:
        raise typer.Exit(1)
    return ctx.build_client(settings, api_key)
