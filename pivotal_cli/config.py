"""Configuration store for pivotal-cli.

This module provides:
- ConfigStore, a lazily loaded key/value view of the JSON settings file
- Dirty tracking, so saving an unchanged store never touches the file
- Crash-safe saves (temp file in the target directory, then atomic replace)
- A process-wide store via get_config_store()/reset_config_store()

The settings file is a flat JSON object. Known settings get named
properties; any other key is kept as-is and written back on save.
"""

import contextlib
import json
import os
import tempfile
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from loguru import logger

from .core.exceptions import ConfigLoadError, ConfigSaveError, NotLoadedError
from .core.settings import PivotalCliSettings

SETTING_NAMES: Tuple[str, ...] = ("token", "current_project", "api_url")

PathLike = Union[str, Path]


class ConfigStore:
    """Key/value settings mirrored from a single JSON file.

    The current state is an immutable snapshot. Every ``set`` swaps in a new
    snapshot built from the old one, so mappings handed out earlier never
    change underneath their holders.

    With ``autoload=True`` (the default) the first read loads the file at
    ``path``. With ``autoload=False`` reads before ``load()`` raise
    ``NotLoadedError``.
    """

    setting_names = SETTING_NAMES

    def __init__(self, path: Optional[PathLike] = None, autoload: bool = True):
        """Initialize the store without touching the disk.

        Args:
            path: Settings file (defaults to PivotalCliSettings().config_file)
            autoload: Load lazily on first access instead of raising
        """
        if path is None:
            path = PivotalCliSettings().config_file
        self._default_path = Path(path).expanduser()
        self._path = self._default_path
        self.autoload = autoload

        self._snapshot: Optional[Mapping[str, Any]] = None
        self._dirty = False
        self._empty = False

    def __repr__(self) -> str:
        return (
            f"ConfigStore(path={str(self._path)!r}, loaded={self.loaded}, "
            f"dirty={self._dirty})"
        )

    # Lifecycle -----------------------------------------------------------

    @property
    def path(self) -> Path:
        """File that ``save()`` writes to."""
        return self._path

    @property
    def loaded(self) -> bool:
        """Whether a load has succeeded since the last reset."""
        return self._snapshot is not None

    @property
    def dirty(self) -> bool:
        """Whether the snapshot changed since the last load or save."""
        return self._dirty

    @property
    def empty(self) -> bool:
        """Whether the file was missing or empty at load time and nothing was set since."""
        self._state()
        return self._empty

    def load(self, path: Optional[PathLike] = None) -> bool:
        """Read the settings file, discarding any in-memory state.

        Args:
            path: File to read instead of the store's default path. It also
                becomes the target of later saves.

        Returns:
            True if the loaded settings are non-empty

        Raises:
            ConfigLoadError: The file exists but cannot be read or is not a
                JSON object. The store is left unloaded.
        """
        target = Path(path).expanduser() if path is not None else self._default_path

        self._snapshot = None
        self._dirty = False
        self._empty = False

        if target.exists():
            try:
                raw = target.read_text(encoding="utf-8")
                data = json.loads(raw) if raw.strip() else {}
            except (OSError, ValueError) as e:
                raise ConfigLoadError(target, str(e), cause=e) from e

            if not isinstance(data, dict):
                raise ConfigLoadError(
                    target, f"expected a JSON object, found {type(data).__name__}"
                )
            logger.debug(f"Loaded {len(data)} settings from {target}")
        else:
            data = {}
            logger.debug(f"Config file {target} not found, starting empty")

        self._path = target
        self._snapshot = MappingProxyType(data)
        self._empty = not data
        return bool(data)

    def _state(self) -> Mapping[str, Any]:
        if self._snapshot is None:
            if not self.autoload:
                raise NotLoadedError(self._path, "call load() before accessing settings")
            self.load(self._path)
        return self._snapshot

    # Access --------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Return the value of a setting, or None when it is unset."""
        return self._state().get(name)

    def set(self, name: str, value: Any) -> None:
        """Override one setting, replacing the whole snapshot."""
        if not isinstance(name, str):
            raise TypeError(f"setting names must be strings, not {type(name).__name__}")

        state = self._state()
        self._snapshot = MappingProxyType({**state, name: value})
        self._dirty = True
        self._empty = False

    def snapshot(self) -> Dict[str, Any]:
        """Return a copy of every stored setting."""
        return dict(self._state())

    @property
    def token(self) -> Optional[str]:
        return self.get("token")

    @token.setter
    def token(self, value: Optional[str]) -> None:
        self.set("token", value)

    @property
    def current_project(self) -> Optional[int]:
        return self.get("current_project")

    @current_project.setter
    def current_project(self, value: Optional[int]) -> None:
        self.set("current_project", value)

    @property
    def api_url(self) -> Optional[str]:
        return self.get("api_url")

    @api_url.setter
    def api_url(self, value: Optional[str]) -> None:
        self.set("api_url", value)

    # Persistence ---------------------------------------------------------

    def save(self) -> None:
        """Write the snapshot to disk if it changed.

        Raises:
            ConfigSaveError: Writing or replacing the file failed. The store
                stays dirty so the save can be retried.
        """
        if not self._dirty:
            logger.debug(f"Config {self._path} unchanged, nothing to save")
            return

        try:
            payload = json.dumps(
                dict(self._snapshot), separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise ConfigSaveError(self._path, str(e), cause=e) from e

        self._write_atomic(self._path, payload)
        self._dirty = False
        logger.debug(f"Saved {len(self._snapshot)} settings to {self._path}")

    def _write_atomic(self, target: Path, payload: str) -> None:
        """Write payload next to target, then rename it over target.

        A symlinked target is written through, so the link survives.
        """
        target = target.resolve()
        tmp_path: Optional[Path] = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())

            if target.exists():
                _copy_file_metadata(target, tmp_path)

            os.replace(tmp_path, target)
        except OSError as e:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    tmp_path.unlink(missing_ok=True)
            raise ConfigSaveError(target, str(e), cause=e) from e


def _copy_file_metadata(source: Path, dest: Path) -> None:
    """Give dest the permission bits and, where allowed, the owner of source."""
    st = source.stat()
    os.chmod(dest, st.st_mode & 0o7777)

    if not hasattr(os, "chown"):
        return
    dest_st = dest.stat()
    if (dest_st.st_uid, dest_st.st_gid) == (st.st_uid, st.st_gid):
        return
    try:
        os.chown(dest, st.st_uid, st.st_gid)
    except PermissionError as e:
        logger.warning(f"Could not preserve ownership of {source}: {e}")


# Process-wide store
_config_store: Optional[ConfigStore] = None


def get_config_store(path: Optional[PathLike] = None) -> ConfigStore:
    """Get or create the process-wide config store.

    Args:
        path: Settings file (for initialization only)

    Returns:
        Global ConfigStore instance, not yet loaded on first call
    """
    global _config_store

    if _config_store is None:
        _config_store = ConfigStore(path)

    return _config_store


def reset_config_store() -> None:
    """Reset the process-wide config store (for testing)."""
    global _config_store
    _config_store = None
