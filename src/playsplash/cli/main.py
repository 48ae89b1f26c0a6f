"""
Main CLI application using Typer.

Running ``playsplash`` with no subcommand performs the launch. This module is
the only place that turns a PlaySplashError into a process exit status.
"""

from __future__ import annotations

import json
import os

import typer

from ..infra.exceptions import LogFileError, PlaySplashError
from ..infra.logging import open_log_file
from ..infra.settings import load_settings
from ..runtime.launcher import target_app_path
from ..usecases.dependency_check import find_player
from ..usecases.splash_launch import launch_splash
from ..usecases.user_context import current_user

app = typer.Typer(help="Play a splash video while starting Playnite")


@app.command("run")
def run(
    log_file: str = typer.Option(None, "--log-file", help="Append log output to this file"),
):
    """
    Play the splash video through VLC and launch Playnite.

    Examples:
        playsplash run
        playsplash run --log-file C:/temp/splash.log
    """
    settings = load_settings(log_file=log_file)
    try:
        with open_log_file(settings.log_file, level=settings.log_level, env=settings.env) as logger:
            try:
                launch_splash(settings, logger)
            except PlaySplashError as e:
                logger.error(f"Error: {e}")
                typer.echo(f"Error: {e}", err=True)
                raise typer.Exit(1)
    except LogFileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("check")
def check(
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """
    Report whether VLC and Playnite can be found, without launching anything.

    Examples:
        playsplash check
        playsplash check --json
    """
    settings = load_settings()
    report: dict[str, object] = {"player_binary": settings.player_binary}

    try:
        report["player"] = os.fspath(find_player(settings.player_binary))
    except PlaySplashError as e:
        report["player"] = None
        report["player_error"] = str(e)

    try:
        user = current_user()
    except PlaySplashError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    target = target_app_path(user.home_dir, settings.target_app)
    report.update(
        {
            "user": user.username,
            "home": os.fspath(user.home_dir),
            "target_app": os.fspath(target),
            "target_app_exists": target.is_file(),
        }
    )

    if json_output:
        typer.echo(json.dumps(report, indent=2))
    else:
        typer.echo(f"Player:     {report['player'] or 'NOT FOUND'}")
        typer.echo(f"User:       {report['user']} ({report['home']})")
        status = "found" if report["target_app_exists"] else "missing"
        typer.echo(f"Target app: {report['target_app']} ({status})")
        if report["player"] is None:
            typer.echo(f"Error: {report['player_error']}", err=True)

    if report["player"] is None:
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """playsplash - splash video launcher for Playnite."""
    if ctx.invoked_subcommand is None:
        run(log_file=None)


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
