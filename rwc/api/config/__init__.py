"""Config API module."""

from .get_package_version import get_package_version
from .RwcConfig import RwcConfig

__all__ = ["RwcConfig", "get_package_version"]
