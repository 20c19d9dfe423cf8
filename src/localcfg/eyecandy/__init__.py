# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Eyecandy UI abstractions for localcfg CLI.

Rich-based progress steps and table rendering.
"""

from localcfg.eyecandy.stepper import Step
from localcfg.eyecandy.table_renderer import TableRenderer

__all__ = ["Step", "TableRenderer"]
