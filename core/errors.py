class GlobeError(Exception):
    """Base class for globe viewer errors."""


class InvalidSelectorError(GlobeError):
    """Raised when the mount selector is malformed or matches no widget."""

    def __init__(self, selector):
        self.selector = selector
        super().__init__(f"Use valid selector! Got {selector!r}")
