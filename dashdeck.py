#!/usr/bin/env python3
"""Thin loader delegating CLI/TUI logic to the interface layer."""

import sys

from core.desktop.dashboard.interface import dashboard_app as _dashboard_app

if __name__ != "__main__":
    # When imported, expose the full interface implementation directly.
    sys.modules[__name__] = _dashboard_app
else:
    sys.exit(_dashboard_app.main())
