"""npm-scripts core package.

Detects the scripts a project declares in its package.json and runs them, or
installs dependencies, by shelling out to the package manager.
"""

from .core import PackageScriptRunner
from .discovery import discover_projects
from .errors import (
    ConfigError,
    DescriptorNotFoundError,
    DescriptorParseError,
    DescriptorReadError,
    ExternalToolError,
    ExternalToolFailedError,
    NotAvailableError,
    PackageScriptError,
    ScriptNotFoundError,
)
from .models import PackageDescriptor
from .parsers.package_json import load_descriptor
from .settings import RunnerSettings, load_settings

__all__ = [
    # Runner
    "PackageScriptRunner",
    "PackageDescriptor",
    "discover_projects",
    "load_descriptor",
    # Configuration
    "RunnerSettings",
    "load_settings",
    # Errors
    "ConfigError",
    "DescriptorNotFoundError",
    "DescriptorParseError",
    "DescriptorReadError",
    "ExternalToolError",
    "ExternalToolFailedError",
    "NotAvailableError",
    "PackageScriptError",
    "ScriptNotFoundError",
]
