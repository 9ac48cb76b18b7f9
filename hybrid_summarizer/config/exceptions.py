class ConfigurationError(Exception):
    """Raised for programmer or deployment errors detected at startup."""
