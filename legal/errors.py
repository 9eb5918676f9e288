"""Error types raised while building legal description values."""

# ============================================================
# Error Types
# ============================================================
class LegalError(ValueError):
    """Base class for every invalid-input failure in this package."""

class InvalidDirection(LegalError):
    """Raised when a token does not name one of the eight compass directions."""

class InvalidBearingComponent(LegalError):
    """Raised for a bearing quadrant or degree/minute/second out of range."""

InvalidBearing = InvalidBearingComponent

class InvalidBearingString(LegalError):
    """Raised when bearing text does not match the DMS pattern."""

class InvalidSegmentDescription(LegalError):
    """Raised for a malformed segment line in a metes and bounds report."""
