#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/shared/errors.py

from .sanitizer import _sanitize_for_log


def describe_kind(value) -> str:
    """Human label for the kind of a value, used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "list"
    if isinstance(value, dict):
        return "map"
    return type(value).__name__


class InvalidHarmonyError(ValueError):
    """Raised when a harmony input does not resolve to a Color."""

    def __init__(self, value, kind: str = None):
        self.value = value
        self.kind = kind if kind is not None else describe_kind(value)
        super().__init__(
            f"value `{_sanitize_for_log(str(value))}` of kind {self.kind} "
            f"is not a valid color for harmonizing"
        )
