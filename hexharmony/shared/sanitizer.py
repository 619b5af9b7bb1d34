#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/shared/sanitizer.py

import re


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes hex strings into a standard 6-character uppercase hex.
    Handles shorthand formats ('F', 'FF', 'FFF') by repeating characters.
    Returns an empty string when the input holds no usable hex digits.
    """
    if value is None:
        return ""
    s = str(value).strip().lstrip("#").upper()

    if not re.fullmatch(r"[0-9A-F]+", s):
        return ""

    L = len(s)
    if L == 6:
        return s
    if L == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        return "".join([ch * 2 for ch in s])
    if L == 1:
        return s * 6
    if L == 2:
        return s * 3

    return ""
