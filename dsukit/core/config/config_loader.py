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


import os
from pathlib import Path

import tomllib
from loguru import logger
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from dsukit.core.exceptions import ConfigurationError


class ConfigLoader:
    """Builds a config model from layered sources; earlier sources win key by key."""

    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        local_config_path: Path,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ):
        """
        Merge every configuration source into one validated model.

        Priority: input args > custom config > local config > environment
        variables > global config > model defaults.

        Returns:
            (model, names of the sources that contributed, whether any
            field fell back to its default)

        Raises:
            ConfigurationError: If the custom config file is missing or a
                merged value does not validate
        """
        layers = [
            ("Input Args", input_args),
            ("Local Config", ConfigLoader.load_toml(local_config_path)),
            ("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
            ("Global Config", ConfigLoader.load_toml(global_config_path)),
        ]

        if custom_config_path is not None:
            if not custom_config_path.exists():
                raise ConfigurationError(
                    f"Custom config file not found: {custom_config_path}",
                    "Check the path passed to --custom-config",
                )
            layers.insert(
                1, ("Custom Config", ConfigLoader.load_toml(custom_config_path))
            )

        for name, source in layers:
            logger.debug(f"{name=} {source=}")

        model, used_indices, used_defaults = ConfigLoader.build(
            config_model, TypeAdapter(config_model), [source for _, source in layers]
        )
        used_names = [layers[i][0] for i in sorted(used_indices)]

        return model, used_names, used_defaults

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Read a TOML config file; a missing or unparsable file counts as empty."""
        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Ignoring unparsable config file {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Collect PREFIX_KEY=value environment variables as {key: value} with lowercase keys."""
        prefix = app_prefix.lower()
        return {
            name[len(app_prefix) :].lower(): value
            for name, value in os.environ.items()
            if name.lower().startswith(prefix)
        }

    @staticmethod
    def build(
        config_model: type[BaseModel],
        type_adapter: TypeAdapter,
        sources: list[dict],
    ):
        """Take each field from the first source that defines it, then validate."""
        remaining_keys = set(config_model.model_fields)
        merged = {}
        used_indices = set()

        for i, source in enumerate(sources):
            if not remaining_keys:
                break

            contributions = source.keys() & remaining_keys
            if not contributions:
                continue

            used_indices.add(i)
            merged.update({key: source[key] for key in contributions})
            remaining_keys -= contributions

        try:
            model = type_adapter.validate_python(merged)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration values", str(e)) from e

        return model, used_indices, bool(remaining_keys)
