"""Environment variable safety for extension processes.

Extensions may ask for environment variables to be set when they are
launched. Some variables change how executables, shared libraries or
interpreters are located, and letting an extension override them would
allow code injection into the launched process. Those names are kept in a
fixed denylist and are matched ASCII case-insensitively.

Two paths exist:
- Constructing an :class:`Envs` silently drops denylisted entries (with a
  warning), which keeps stale or third-party configuration loadable.
- :meth:`Envs.validate` raises on the first denylisted entry, for callers
  that must not have data discarded behind their back.
"""

from __future__ import annotations

import logging
import string

from pydantic import Field, RootModel, field_validator

from extkit.extensions.errors import InvalidEnvVarError

logger = logging.getLogger(__name__)


DISALLOWED_ENV_KEYS: frozenset[str] = frozenset(
    {
        # Executable lookup
        "PATH",
        "PATHEXT",
        "SystemRoot",
        "windir",
        # Dynamic linker (Linux)
        "LD_LIBRARY_PATH",
        "LD_PRELOAD",
        "LD_AUDIT",
        "LD_DEBUG",
        "LD_BIND_NOW",
        "LD_ASSUME_KERNEL",
        # Dynamic linker (macOS)
        "DYLD_LIBRARY_PATH",
        "DYLD_INSERT_LIBRARIES",
        "DYLD_FRAMEWORK_PATH",
        # Interpreters and runtimes
        "PYTHONPATH",
        "PYTHONHOME",
        "NODE_OPTIONS",
        "RUBYOPT",
        "GEM_PATH",
        "GEM_HOME",
        "CLASSPATH",
        "GO111MODULE",
        "GOROOT",
        # Windows session and profile
        "APPINIT_DLLS",
        "SESSIONNAME",
        "ComSpec",
        "TEMP",
        "TMP",
        "LOCALAPPDATA",
        "USERPROFILE",
        "HOMEDRIVE",
        "HOMEPATH",
    }
)

# str.lower() folds non-ASCII characters too (e.g. KELVIN SIGN -> "k")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_DISALLOWED_FOLDED: frozenset[str] = frozenset(
    key.translate(_ASCII_LOWER) for key in DISALLOWED_ENV_KEYS
)


def is_disallowed(name: str) -> bool:
    """Check whether an environment variable name may not be overridden.

    Args:
        name: Variable name, in any casing

    Returns:
        True if the name matches the denylist ignoring ASCII case
    """
    return name.translate(_ASCII_LOWER) in _DISALLOWED_FOLDED


class Envs(RootModel[dict[str, str]]):
    """Environment variables to set for an extension, e.g. API_KEY -> secret.

    Serializes as a plain key/value object.
    """

    root: dict[str, str] = Field(default_factory=dict)

    @field_validator("root")
    @classmethod
    def _drop_disallowed(cls, value: dict[str, str]) -> dict[str, str]:
        validated: dict[str, str] = {}
        for key, val in value.items():
            if is_disallowed(key):
                logger.warning("Skipping disallowed env var: %s", key)
                continue
            validated[key] = val
        return validated

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the environment variables."""
        return dict(self.root)

    def validate(self) -> None:  # type: ignore[override]
        """Fail if any denylisted variable is present.

        Checks the current contents, so entries added after construction
        (by mutating ``root`` or via ``model_construct``) are caught too.

        Raises:
            InvalidEnvVarError: Naming the first disallowed key found
        """
        for key in self.root:
            if is_disallowed(key):
                raise InvalidEnvVarError(key)

    def __len__(self) -> int:
        return len(self.root)
