"""Runner configuration.

Each setting is resolved from, in order: an explicit argument, an environment
variable, the built-in default.

- ``NPM_SCRIPTS_TOOL``: package manager executable (default ``npm``)
- ``NPM_SCRIPTS_REQUIRE_SCRIPT``: refuse to run undeclared scripts (default true)
- ``NPM_SCRIPTS_CHECK_EXIT``: treat a nonzero exit status as an error (default false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigError


DEFAULT_TOOL = "npm"
TOOL_ENV_VAR = "NPM_SCRIPTS_TOOL"
REQUIRE_SCRIPT_ENV_VAR = "NPM_SCRIPTS_REQUIRE_SCRIPT"
CHECK_EXIT_ENV_VAR = "NPM_SCRIPTS_CHECK_EXIT"

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"0", "false", "no", "n"}


@dataclass(slots=True, frozen=True)
class RunnerSettings:
    """Settings shared by every operation of a runner."""

    tool: str = DEFAULT_TOOL
    require_script: bool = True
    check_exit: bool = False

    def __post_init__(self) -> None:
        if not self.tool or not self.tool.strip():
            raise ConfigError("Package manager tool must be a non-empty string")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {raw!r}")


def load_settings(
    tool: str | None = None,
    require_script: bool | None = None,
    check_exit: bool | None = None,
) -> RunnerSettings:
    """Resolve runner settings.

    Raises:
        ConfigError: If an environment override is malformed or the tool name
            is empty.
    """
    if tool is None:
        tool = os.environ.get(TOOL_ENV_VAR, "").strip() or DEFAULT_TOOL
    if require_script is None:
        require_script = _env_bool(REQUIRE_SCRIPT_ENV_VAR, True)
    if check_exit is None:
        check_exit = _env_bool(CHECK_EXIT_ENV_VAR, False)

    return RunnerSettings(tool=tool, require_script=require_script, check_exit=check_exit)
