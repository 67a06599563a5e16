"""Naming policy for target coordinates.

Repository, namespace and project names end up both as directory names under
the workspace and as components of the Docker image name built by the
generated ``Makefile``, so they are restricted to the characters Docker
accepts in repository names.
"""

from __future__ import annotations

import re

from .config import Target
from .errors import InvalidNameError

__all__ = ["ALLOWED_CHARACTERS", "NAME_PATTERN", "is_valid_name", "validate_name", "validate_target"]


ALLOWED_CHARACTERS = "[a-z0-9-_.]"
NAME_PATTERN = re.compile(r"[a-z0-9\-_.]+")

_TARGET_FIELDS = ("repository", "namespace", "project")


def is_valid_name(value: str) -> bool:
    """Return ``True`` when ``value`` is a non-empty, policy compliant name."""

    return NAME_PATTERN.fullmatch(value) is not None


def validate_name(field: str, value: str) -> None:
    """Raise :class:`InvalidNameError` unless ``value`` is a valid name."""

    if not is_valid_name(value):
        raise InvalidNameError(field, value, ALLOWED_CHARACTERS)


def validate_target(target: Target) -> None:
    """Validate every coordinate of ``target``.

    Fields are checked in ``repository``, ``namespace``, ``project`` order and
    the first offending one is reported.
    """

    for field in _TARGET_FIELDS:
        validate_name(field, getattr(target, field))
