# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Main entry point for localcfg CLI."""

import sys

if __name__ == "__main__":
    from localcfg.cli import localcfg

    sys.exit(localcfg())
