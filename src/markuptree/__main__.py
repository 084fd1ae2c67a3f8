# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Run the demos with ``python -m markuptree``."""

import sys

from .cli import main

sys.exit(main())
