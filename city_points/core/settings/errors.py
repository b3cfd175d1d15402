# ========================
# file: city_points/core/settings/errors.py
# ========================
class SettingsError(Exception):
    """Base error for generation settings."""


class ValidationError(SettingsError):
    """Raised when settings fail validation."""


class NotFoundError(SettingsError):
    """Raised when a settings file cannot be resolved."""
