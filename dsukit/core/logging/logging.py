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


"""
Logging configuration for the dsukit CLI.

The library itself only emits debug records through loguru; this module
installs the sinks when running as an application: a rich console sink on
stderr and a rotating file sink in the user log directory.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from dsukit.constants import LOG_DIR


def setup_logger(
    command_name: str,
    debug: bool = False,
    silent: bool = False,
    log_dir: Path = LOG_DIR,
) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Show debug records on the console
        silent: Do not log to the console at all

    Returns:
        Path to the log file
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = log_dir / f"{command_name}_{timestamp}.log"

    # Clear existing sinks so we don't double-log across runs
    logger.remove()

    if not silent:
        console = Console(stderr=True)

        def console_sink(message):
            console.print(message.record["message"].rstrip("\n"), highlight=False)

        logger.add(
            console_sink,
            level="DEBUG" if debug else "INFO",
            format="{message}",
            catch=True,
        )

    logger.add(
        logfile,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
        rotation="5 MB",
        retention="7 days",
        catch=True,
    )

    logger.debug(f"Initialized logger for {command_name} -> {logfile}")
    return logfile
