# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for localcfg."""

from __future__ import annotations

from pathlib import Path

import rich_click as click

from localcfg.__about__ import __version__
from localcfg.cli.commands import values
from localcfg.logging import init_cli_logging, logger
from localcfg.store.paths import ENV_OVERRIDE, resolve_config_path


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]}, invoke_without_command=True
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file to use (default: ${ENV_OVERRIDE} or ~/.localcfg/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="localcfg")
@click.pass_context
def localcfg(ctx: click.Context, config_path: Path | None, *, verbose: bool) -> None:
    """localcfg - Inspect and edit a persistent key/value config file."""
    init_cli_logging(verbose=verbose)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or resolve_config_path()

    if ctx.invoked_subcommand is None:
        logger.info("localcfg - persistent key/value config store")
        logger.info("Run 'localcfg --help' for available commands.")


# Register subcommands
localcfg.add_command(values.get_cmd, name="get")
localcfg.add_command(values.set_cmd, name="set")
localcfg.add_command(values.list_cmd, name="list")
localcfg.add_command(values.path_cmd, name="path")
