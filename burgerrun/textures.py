"""Frame-based texture animation."""

from __future__ import annotations

FRAME_INTERVAL = 0.1


def change_texture(item, item_type: str) -> bool:
    """Show the item's next animation frame once enough time has passed.

    Returns True when a frame was shown, in which case the caller's
    accumulated duration should be reset as well.
    """
    if item.duration <= FRAME_INTERVAL:
        return False
    item.reset_duration()
    item.sprite.set_texture(item_type, item.texture_index)
    if item.texture_index >= item.texture_count - 1:
        item.texture_index = 0
    else:
        item.texture_index += 1
    return True