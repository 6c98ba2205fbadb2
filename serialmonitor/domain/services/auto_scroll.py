"""Auto-scroll policy for the output view."""


class AutoScrollPolicy:
    """Decides once per render pass whether to reveal the newest line.

    Only the instruction is issued; the scroll position is never locked,
    so a user scrolling back between updates is left alone.
    """

    def __init__(self) -> None:
        self._dirty = False

    @property
    def has_pending_update(self) -> bool:
        return self._dirty

    def mark_dirty(self) -> None:
        """Record a store mutation since the last render pass."""
        self._dirty = True

    def should_scroll(self, enabled: bool) -> bool:
        """Consume the pending update for this render pass.

        Args:
            enabled: Current auto-scroll setting.

        Returns:
            True if the renderer should bring the newest line into view.
        """
        dirty = self._dirty
        self._dirty = False
        return enabled and dirty
