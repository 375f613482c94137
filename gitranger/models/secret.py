"""Secret references in the manifest.

A value of the form ``${NAME}`` is read from the environment variable
``NAME`` at resolve time. Anything else is taken literally.
"""

from __future__ import annotations

import os
import re
from typing import Mapping

from gitranger.errors import SecretResolutionError

_ENV_REF = re.compile(r"^\$\{([^}]+)\}$")


def env_var_name(value: str) -> str | None:
    """Return the referenced variable name, or None for literal values."""
    match = _ENV_REF.match(value)
    return match.group(1) if match else None


def resolve_secret(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve a secret reference to its literal value.

    Raises:
        SecretResolutionError: if the referenced variable is not set.
    """
    env = os.environ if environ is None else environ
    var_name = env_var_name(value)
    if var_name is None:
        return value
    if var_name not in env:
        raise SecretResolutionError(var_name)
    return env[var_name]
