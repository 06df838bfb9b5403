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
from rich.console import Console
from rich.table import Table

from dsukit.constants import (
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from dsukit.context import GlobalConfig
from dsukit.core.config.config_loader import ConfigLoader
from dsukit.core.exceptions import ConfigurationError, handle_dsu_exception

CONFIG_SCOPES = ("local", "global")


def _check_key_exists(key: str) -> None:
    if key not in GlobalConfig.model_fields:
        available = ", ".join(sorted(GlobalConfig.model_fields))
        raise ConfigurationError(
            f"Unknown configuration key '{key}'",
            f"Available keys: {available}",
        )


def _convert_value(key: str, value: str):
    # Let pydantic coerce the CLI string into the field's type
    try:
        model = GlobalConfig.model_validate({key: value})
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid value for '{key}': {value!r}",
            str(e),
        ) from e
    return getattr(model, key)


def _toml_value(value) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return f'"{value}"'


def _set_config(key: str, value: str, scope: str) -> Path:
    """Set a configuration value in the specified scope."""
    _check_key_exists(key)
    final_value = _convert_value(key, value)

    if scope == "global":
        config_path = GLOBAL_CONFIG_FILE
        config_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        config_path = LOCAL_CONFIG_FILE

    config_data = ConfigLoader.load_toml(config_path)
    config_data[key] = final_value

    # Simple TOML serialization: the config is a flat table of scalars
    with open(config_path, "w", encoding="utf-8") as f:
        for k, v in config_data.items():
            f.write(f"{k} = {_toml_value(v)}\n")

    console = Console()
    console.print(f"[green]Set {key} = {final_value} ({scope})[/green]")
    console.print(f"Config file: {config_path.absolute()}")
    return config_path


def _show_config(ctx: typer.Context, key: str | None) -> None:
    if key is not None:
        _check_key_exists(key)

    custom_config_path = ctx.meta.get("custom_config_path")
    config, used_sources, _ = ConfigLoader.get_full_config(
        GlobalConfig,
        ctx.meta.get("config_args", {}),
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        custom_config_path,
    )

    descriptions = GlobalConfig.descriptions()
    keys = [key] if key is not None else sorted(GlobalConfig.model_fields)

    table = Table(title="Effective configuration")
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Description")
    for name in keys:
        table.add_row(name, str(getattr(config, name)), descriptions[name])

    console = Console()
    console.print(table)
    console.print(f"Sources: {', '.join(used_sources) if used_sources else 'defaults only'}")


@handle_dsu_exception
def main(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Configuration key to get or set."),
    value: str | None = typer.Argument(
        None, help="Value to set (omit to get current value)."
    ),
    scope: str = typer.Option(
        "local",
        "--scope",
        help="Which config file to modify when setting a value.",
    ),
) -> None:
    """
    Show or change dsukit configuration.

    Priority order: program arguments > custom config > local config > environment variables > global config

    Examples:
        # Show all configuration
        dsu config

        # Read edge lists as 1-based by default in this directory
        dsu config index_base 1

        # Print JSON everywhere
        dsu config output_format json --scope global
    """
    if scope not in CONFIG_SCOPES:
        raise ConfigurationError(
            f"Invalid scope '{scope}'",
            f"Choose one of: {', '.join(CONFIG_SCOPES)}",
        )

    if value is not None:
        _set_config(key, value, scope)
    else:
        _show_config(ctx, key)
