"""Error taxonomy for plugin loading and registry lookups.

Nothing inside the package catches these. They propagate to whoever called
``Teleport.use`` (or one of the ``use_*`` methods), which decides whether to
abort or carry on.
"""

from __future__ import annotations


class TeleportError(Exception):
    """Base class for every error raised by teleport."""


# --- Plugin sourcing ---


class PluginEnvironmentError(TeleportError, RuntimeError):
    """File loading was attempted in a runtime without a filesystem."""


class PluginNotFoundError(TeleportError, FileNotFoundError):
    """A plugin path does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"path `{path}` does not exist")


class PluginParseError(TeleportError, ValueError):
    """A plugin file could not be decoded as JSON or YAML."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not parse plugin file {path}: {reason}")


class PluginFetchError(TeleportError):
    """A plugin URL could not be downloaded or decoded."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Could not download {url}: {reason}")


# --- Registration ---


class UnrecognizedPluginTypeError(TeleportError, ValueError):
    """A payload's ``type`` is not one of the known plugin kinds."""

    def __init__(self, payload: object):
        self.payload = payload
        super().__init__(f"unrecognised plugin type: {payload!r}")


class LibraryNotLoadedError(TeleportError, LookupError):
    """A library was looked up before it was registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Library {name} has not been loaded")


class TargetAlreadyRegisteredError(TeleportError, ValueError):
    """``use_target`` was called twice with the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Target {name} is already registered")


class NoSuchTargetError(TeleportError, LookupError):
    """A target was looked up before any mapping or generator created it."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"No target named '{name}' exists. "
            "Did you register a mapping or a generator for this target?"
        )


class InvalidPluginError(TeleportError, ValueError):
    """A payload of a known type is missing a field it needs."""

    def __init__(self, payload: object, field_name: str):
        self.payload = payload
        self.field_name = field_name
        super().__init__(f"plugin is missing required field '{field_name}': {payload!r}")


class PluginConfigError(TeleportError, ValueError):
    """An environment setting for plugin loading has an unusable value."""

    def __init__(self, variable: str, value: str, reason: str):
        self.variable = variable
        self.value = value
        super().__init__(f"{variable}={value!r}: {reason}")
