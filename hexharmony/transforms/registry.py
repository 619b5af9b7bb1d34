#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/transforms/registry.py

from typing import Callable, Dict, Optional

from hexharmony.core.color import Color
from hexharmony.shared.logger import log
from .builtin import complement, invert, grayscale

ColorTransform = Callable[[Color], Color]

TRANSFORMS: Dict[str, ColorTransform] = {
    'complement': complement,
    'invert': invert,
    'grayscale': grayscale,
}


def get_transform(name) -> Optional[ColorTransform]:
    """Exact-match lookup; anything that is not a registered name gives None."""
    if not isinstance(name, str):
        return None
    return TRANSFORMS.get(name)


def register_transform(name: str, transform: ColorTransform) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError(f"transform name must be a non-empty string, got {name!r}")
    if not callable(transform):
        raise TypeError(f"transform '{name}' is not callable")

    if name in TRANSFORMS and TRANSFORMS[name] is not transform:
        log("warning", f"replacing registered transform '{name}'")
    TRANSFORMS[name] = transform
