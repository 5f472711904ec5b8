"""CLI interface for lintignore"""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import click

from lintignore.application.ignore_service import IgnoreService
from lintignore.domain.exceptions import LintIgnoreError
from lintignore.infrastructure.config.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _create_ignore_service(
    ctx: click.Context,
    cwd: Optional[Path],
    dot: bool,
    ignore_patterns: Tuple[str, ...],
    ignore_path: Optional[Path],
    no_ignore_file: bool,
) -> IgnoreService:
    """Create ignore service from CLI options and config

    Args:
        ctx: Click context holding the global options
        cwd: Working directory override
        dot: Whether dotfiles should be linted
        ignore_patterns: Extra patterns from --ignore-pattern
        ignore_path: Explicit ignore file
        no_ignore_file: Skip the configured ignore file

    Returns:
        IgnoreService instance
    """
    work_dir = cwd or Path.cwd()
    env = None
    if no_ignore_file:
        env = {**os.environ, "LINTIGNORE_NO_IGNORE_FILE": "1"}
    config_manager = ConfigManager(config_path=ctx.obj.get("config_path"), cwd=work_dir, env=env)
    return IgnoreService(
        config_manager=config_manager,
        cwd=work_dir,
        extra_patterns=ignore_patterns,
        ignore_path=None if no_ignore_file else ignore_path,
        dot=True if dot else None,
    )


def _ignore_options(func):
    """Options shared by all commands that build an ignore predicate"""
    options = [
        click.option(
            "--cwd",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
            help="Working directory (default: current directory)",
        ),
        click.option("--dot", is_flag=True, help="Do not ignore dotfiles by default"),
        click.option(
            "--ignore-pattern",
            "ignore_patterns",
            multiple=True,
            help="Additional pattern; rooted patterns are relative to the working directory",
        ),
        click.option(
            "--ignore-path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Ignore file to use instead of .lintignore",
        ),
        click.option("--no-ignore-file", is_flag=True, help="Do not read any ignore file"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .lintignore.yml config file (disables config discovery)",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """lintignore - decide which paths a linter should skip"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@_ignore_options
@click.option("--fail-on-ignored", is_flag=True, help="Exit with status 1 if any path is ignored")
@click.pass_context
def check(
    ctx,
    paths: Tuple[str, ...],
    cwd: Optional[Path],
    dot: bool,
    ignore_patterns: Tuple[str, ...],
    ignore_path: Optional[Path],
    no_ignore_file: bool,
    fail_on_ignored: bool,
):
    """Report whether each path is ignored.

    PATHS: Files or directories (a trailing slash marks a directory)
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        service = _create_ignore_service(ctx, cwd, dot, ignore_patterns, ignore_path, no_ignore_file)
        _, ignored = service.filter_paths(paths)
    except LintIgnoreError as e:
        _die(str(e), verbose=verbose, exc=e)

    ignored_set = set(ignored)
    for path in paths:
        status = "ignored" if path in ignored_set else "ok"
        click.echo(f"{status}: {path}")

    if fail_on_ignored and ignored:
        ctx.exit(1)


@cli.command()
@_ignore_options
@click.pass_context
def patterns(
    ctx,
    cwd: Optional[Path],
    dot: bool,
    ignore_patterns: Tuple[str, ...],
    ignore_path: Optional[Path],
    no_ignore_file: bool,
):
    """Print the ignore root and every pattern in precedence order."""
    verbose = ctx.obj.get("verbose", False)

    try:
        service = _create_ignore_service(ctx, cwd, dot, ignore_patterns, ignore_path, no_ignore_file)
        predicate = service.build_predicate()
    except LintIgnoreError as e:
        _die(str(e), verbose=verbose, exc=e)

    click.echo(f"Ignore root: {predicate.base_path}")
    for pattern in predicate.patterns:
        click.echo(pattern)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
