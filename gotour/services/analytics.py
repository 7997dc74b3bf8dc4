"""Page-view beacon. Does nothing when the host provides no tracker."""

from typing import Callable, Optional


class Analytics:
    """Forward page views to a host tracking callable, if any."""

    def __init__(self, track: Optional[Callable[..., object]] = None):
        self._track = track

    def track_view(self, *args, **kwargs):
        """Forward a page view to the tracker; the result is ignored."""
        if self._track is not None:
            self._track(*args, **kwargs)
