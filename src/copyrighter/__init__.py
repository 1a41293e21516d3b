# Copyrighter - single-line copyright notice stamping for source trees
# Copyright (C) 2024-2026 Copyrighter Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

__version__ = "0.1.0"
