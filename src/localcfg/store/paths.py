# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Default location of the localcfg config file.

The default path is ~/.localcfg/config.yaml; the LOCALCFG_CONFIG environment
variable overrides it.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_RELATIVE = Path(".localcfg/config.yaml")
ENV_OVERRIDE = "LOCALCFG_CONFIG"


def resolve_config_path() -> Path:
    """Resolve the config file path honoring the environment override."""
    env_path = os.getenv(ENV_OVERRIDE)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / DEFAULT_CONFIG_RELATIVE
