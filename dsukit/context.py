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


from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class GlobalConfig(BaseModel):
    verbose: bool = Field(False, description="Enable debug logging on the console")
    silent: bool = Field(
        False, description="Do not log anything to the console (results still print)"
    )
    index_base: Literal[0, 1] = Field(
        0, description="Label of the first element in edge-list input"
    )
    output_format: Literal["table", "json"] = Field(
        "table", description="How command results are printed"
    )

    @field_validator("index_base", mode="before")
    @classmethod
    def _parse_index_base(cls, value):
        # Environment variables and `dsu config` hand the value over as text
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                return value
        return value

    @classmethod
    def descriptions(cls) -> dict[str, str]:
        return {
            name: field.description or "No description available"
            for name, field in cls.model_fields.items()
        }


@dataclass(frozen=True)
class GlobalContext:
    verbose: bool
    silent: bool
    index_base: Literal[0, 1]
    output_format: Literal["table", "json"]

    @classmethod
    def from_global_config(cls, config: GlobalConfig):
        return GlobalContext(
            config.verbose,
            config.silent,
            config.index_base,
            config.output_format,
        )
