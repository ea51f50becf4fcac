"""
Configuration lookup used by the hashing helpers.

Keys are dotted paths such as ``Security.pepper``. Lookups are
case-insensitive per segment, and secret values are unwrapped before they
are returned.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, SecretStr

from .settings import Settings, get_settings

PEPPER_KEY = "Security.pepper"


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that can resolve a dotted configuration key"""

    def read(self, key: str, default: Any = None) -> Any:
        ...


def _unwrap(value: Any) -> Any:
    if isinstance(value, SecretStr):
        return value.get_secret_value()
    return value


class SettingsConfigProvider:
    """Resolve dotted keys against a :class:`Settings` instance.

    When no settings object is given, the process-wide singleton is looked up
    on every read so that ``reload_settings()`` is honoured.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    @property
    def settings(self) -> Settings:
        return self._settings if self._settings is not None else get_settings()

    def read(self, key: str, default: Any = None) -> Any:
        node: Any = self.settings
        for segment in key.split("."):
            name = segment.lower()
            if not isinstance(node, BaseModel) or name not in type(node).model_fields:
                return default
            node = getattr(node, name)
        if node is None:
            return default
        return _unwrap(node)


class DictConfigProvider:
    """Resolve dotted keys against a plain mapping.

    Both flat (``{"Security.pepper": "x"}``) and nested
    (``{"security": {"pepper": "x"}}``) layouts are accepted.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values = dict(values or {})

    def read(self, key: str, default: Any = None) -> Any:
        flat = {k.lower(): v for k, v in self._values.items()}
        if key.lower() in flat:
            return _unwrap(flat[key.lower()])

        node: Any = self._values
        for segment in key.split("."):
            if not isinstance(node, Mapping):
                return default
            lowered = {str(k).lower(): v for k, v in node.items()}
            if segment.lower() not in lowered:
                return default
            node = lowered[segment.lower()]
        if node is None:
            return default
        return _unwrap(node)
