# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from .cli import main

if __name__ == "__main__":
    main()
