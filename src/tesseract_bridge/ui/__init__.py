"""Terminal UI helpers for tesseract-bridge."""

from tesseract_bridge.ui.theme import BRIDGE_THEME, STATUS_ICONS

__all__ = ["BRIDGE_THEME", "STATUS_ICONS"]
