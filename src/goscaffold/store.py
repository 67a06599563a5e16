"""Read-only stores of the assets deployed into a new project."""

from __future__ import annotations

from abc import ABC, abstractmethod
from importlib import resources
from importlib.resources.abc import Traversable
from types import MappingProxyType
from typing import Iterator, Mapping

from .errors import AssetMissingError

__all__ = [
    "TEMPLATE_SUFFIX",
    "AssetStore",
    "BundledAssetStore",
    "MappingAssetStore",
    "is_template",
    "output_name",
]


TEMPLATE_SUFFIX = ".template"

_IGNORED_NAMES = {"__init__.py", "__pycache__"}


def is_template(name: str) -> bool:
    """Return ``True`` when ``name`` refers to a template asset."""

    return name.endswith(TEMPLATE_SUFFIX)


def output_name(name: str) -> str:
    """Return the destination path of the template asset ``name``."""

    if not is_template(name):
        raise ValueError(f"'{name}' is not a template asset; expected a '{TEMPLATE_SUFFIX}' suffix")
    return name[: -len(TEMPLATE_SUFFIX)]


class AssetStore(ABC):
    """Provider of named byte payloads addressed by logical POSIX paths."""

    @abstractmethod
    def get(self, name: str) -> bytes:
        """Return the payload stored under ``name``.

        Raises :class:`AssetMissingError` when no such asset exists.
        """

    @abstractmethod
    def names(self) -> tuple[str, ...]:
        """Return every asset name in a stable enumeration order."""

    def template_names(self) -> tuple[str, ...]:
        """Return the template assets, preserving enumeration order."""

        return tuple(name for name in self.names() if is_template(name))


class MappingAssetStore(AssetStore):
    """Asset store backed by an in-memory mapping."""

    def __init__(self, assets: Mapping[str, bytes | str]) -> None:
        payloads: dict[str, bytes] = {}
        for name, payload in assets.items():
            payloads[name] = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
        self._assets = MappingProxyType(payloads)

    def get(self, name: str) -> bytes:
        try:
            return self._assets[name]
        except KeyError as exc:
            raise AssetMissingError(name) from exc

    def names(self) -> tuple[str, ...]:
        return tuple(self._assets)


def _walk(directory: Traversable, prefix: str = "") -> Iterator[tuple[str, Traversable]]:
    for entry in sorted(directory.iterdir(), key=lambda item: item.name):
        if entry.name in _IGNORED_NAMES:
            continue
        name = f"{prefix}{entry.name}"
        if entry.is_dir():
            yield from _walk(entry, f"{name}/")
        else:
            yield name, entry


class BundledAssetStore(AssetStore):
    """Assets shipped as package data under ``goscaffold/bundle``."""

    def __init__(self, package: str = __package__ or "goscaffold", directory: str = "bundle") -> None:
        self._root = resources.files(package).joinpath(directory)
        self._entries = dict(_walk(self._root))

    def get(self, name: str) -> bytes:
        try:
            entry = self._entries[name]
        except KeyError as exc:
            raise AssetMissingError(name) from exc
        return entry.read_bytes()

    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)
