#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/shared/logger.py

import sys

from hexharmony.core import config as c


def log(level: str, message: str) -> None:
    """
    Print a tagged message, e.g. `[warning] replacing registered transform`.

    info and success go to stdout; warning, error and unknown levels go to
    stderr so library diagnostics stay out of piped output.
    """
    tag = str(level).lower()
    stream = sys.stdout if tag in ("info", "success") else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(tag, c.RESET)
    msg_color = c.MSG_COLORS.get(tag, c.RESET)
    print(f"{tag_color}[{tag}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)
