"""Configuration lookup from the environment and a local ``.env`` file."""

import functools
import os
import pathlib
from typing import Any

from dotenv import dotenv_values
from lfp_logging import logs

from reggie_case import cases, parsers
from reggie_case.renderers import Style
from reggie_case.validators import Policy

LOG = logs.logger()

STYLE_NAME = "REGGIE_CASE_STYLE"
POLICY_NAME = "REGGIE_CASE_POLICY"
DOTS_NAME = "REGGIE_CASE_DOTS"


def value(name: str, default: Any = None) -> Any:
    """Return ``name`` from ``os.environ``, then ``.env`` in the working directory."""
    if (env_value := os.environ.get(name)) is not None:
        return env_value
    env_data = _env_data(pathlib.Path.cwd())
    if (env_value := env_data.get(name)) is not None:
        return env_value
    return default


def style() -> Style:
    return parsers.to_enum(Style, value(STYLE_NAME), Style.CAMEL)


def policy(style_value: Style | None = None) -> Policy:
    """Configured policy, else the default for ``style_value``."""
    if style_value is None:
        style_value = style()
    return parsers.to_enum(
        Policy, value(POLICY_NAME), cases.default_policy(style_value)
    )


def dots() -> bool:
    return parsers.to_bool(value(DOTS_NAME), True)


@functools.cache
def _env_data(root_dir: pathlib.Path) -> dict[str, Any]:
    env_file = root_dir / ".env"
    if env_file.is_file():
        LOG.debug(f"Loading env file - path:{env_file}")
        return dict(dotenv_values(env_file))
    return {}
