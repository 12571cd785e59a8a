# Copyright (c) 2026 Alphacontrast
# SPDX-License-Identifier: MIT

from alphacontrast.cli import main

raise SystemExit(main())
