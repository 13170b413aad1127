"""
HitCraft Frontends
Renderers for the windowed mode.

Any object with render_frame(game), handle_input() -> dict and cleanup()
can drive hitcraft.main - no shared base class needed.
"""

# Note: Don't import renderers here to avoid importing pygame
# when it might not be needed. Import directly in main.py instead.
