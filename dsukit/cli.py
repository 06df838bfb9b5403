# -----------------------------------------------------------------------------
# dsukit - Dual Licensed Software
# Copyright (c) 2025 Adem Can
#
# This file is part of dsukit.
#
# dsukit is available under a dual-license:
#   1. AGPLv3 (Affero General Public License v3)
#      - See LICENSE.txt and LICENSE-AGPL.txt
#      - Online: https://www.gnu.org/licenses/agpl-3.0.html
#
#   2. Commercial License
#      - For proprietary or revenue-generating use,
#        including SaaS, embedding in closed-source software,
#        or avoiding AGPL obligations.
#      - See LICENSE.txt and COMMERCIAL-LICENSE.txt
#      - Contact: ademfcan@gmail.com
#
# By using this file, you agree to the terms of one of the two licenses above.
# -----------------------------------------------------------------------------


from pathlib import Path

import typer
from dotenv import load_dotenv
from loguru import logger

from dsukit.commands import components, config, cycle, isolate, mst
from dsukit.constants import (
    APP_NAME,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
    LOG_DIR,
)
from dsukit.context import GlobalConfig, GlobalContext
from dsukit.core.config.config_loader import ConfigLoader
from dsukit.core.exceptions import handle_dsu_exception
from dsukit.core.logging.logging import setup_logger
from dsukit.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    version_callback,
)

# create app
app = typer.Typer(
    help=f"{APP_NAME}: disjoint-set tools for graph connectivity",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# attach commands
app.command(name="components")(components.main)
app.command(name="mst")(mst.main)
app.command(name="cycle")(cycle.main)
app.command(name="isolate")(isolate.main)
app.command(name="config")(config.main)

# the config command must work even when the stored config is broken
config_command = "config"


def setup_config_args(**kwargs):
    config_args = {}

    for key, item in kwargs.items():
        if item is not None:
            config_args[key] = item

    return config_args


@app.callback(invoke_without_command=True)
@handle_dsu_exception
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        "-LD",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for dsukit live) and exit",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        "-s",
        help="Do not log to the console. Results are still printed.",
    ),
    index_base: int | None = typer.Option(
        None,
        "--index-base",
        help="Label of the first element in edge-list input (0 or 1).",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        help="Output format: table or json.",
    ),
) -> None:
    """
    Global setup callback. Initialize shared objects here.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    # initial setup of logger, will be updated once the config is known
    setup_logger(
        ctx.invoked_subcommand,
        debug=verbose or False,
        silent=silent or False,
        log_dir=LOG_DIR,
    )

    config_args = setup_config_args(
        verbose=verbose,
        silent=silent,
        index_base=index_base,
        output_format=output_format,
    )
    custom_config_path = Path(custom_config) if custom_config else None

    ctx.meta["config_args"] = config_args
    ctx.meta["custom_config_path"] = custom_config_path

    if ctx.invoked_subcommand == config_command:
        return

    global_config, used_configs, used_defaults = ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        custom_config_path,
    )

    setup_logger(
        ctx.invoked_subcommand,
        debug=global_config.verbose,
        silent=global_config.silent,
        log_dir=LOG_DIR,
    )

    if used_defaults:
        logger.debug("Some configuration keys were not set. Using default values.")

    logger.debug(f"Used {used_configs} to build global context.")
    ctx.obj = GlobalContext.from_global_config(global_config)


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8 as it can be weird with typers console.print sometimes
    ensure_utf8_output()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # launch cli
    app(prog_name="dsu")


if __name__ == "__main__":
    run_app()
