from __future__ import annotations

from pubsync.ui.cli import run

run()
