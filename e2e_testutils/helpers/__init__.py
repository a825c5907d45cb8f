"""Output and configuration helpers."""

from e2e_testutils.helpers.helpers_logging import wrap_warn, wrap_warn_output
from e2e_testutils.helpers.settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
    "wrap_warn",
    "wrap_warn_output",
]
