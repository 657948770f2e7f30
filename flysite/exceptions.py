# flysite/exceptions.py
"""
Error types raised by the site model and the rule-evaluation boundary.
Degenerate direction ranges are valid values and never raise.
"""

class SiteModelError(Exception):
    """Base class for all flysite errors"""
    pass

class IndexOutOfRange(SiteModelError, IndexError):
    """Raised when a positional edit targets a stale or invalid index."""
    def __init__(self, collection: str, index: int, size: int):
        self.collection = collection
        self.index = index
        self.size = size
        super().__init__(f"{collection} index {index} out of range (size {size})")

class StaleHandleError(SiteModelError, KeyError):
    """Raised when an editor handle no longer refers to a record."""
    def __init__(self, collection: str, handle: str):
        self.collection = collection
        self.handle = handle
        super().__init__(f"No {collection} with handle {handle}")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]

class InvalidSiteDataError(SiteModelError, ValueError):
    """Raised when a site record dictionary cannot be decoded."""
    pass

class RuleEngineError(SiteModelError):
    """Raised when the external rule engine cannot be reached or answers garbage."""
    def __init__(self, message="Rule engine failure", status_code=None):
        self.status_code = status_code
        super().__init__(f"{message} [HTTP {status_code}]" if status_code else message)
