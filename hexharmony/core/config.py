#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexharmony/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Perceived Brightness Coefficients (Source: W3C AERT / YIQ luma)
YIQ_R = 299                        # Red component contribution to perceived brightness
YIQ_G = 587                        # Green component contribution to perceived brightness
YIQ_B = 114                        # Blue component contribution to perceived brightness
YIQ_DIVISOR = 1000.0               # Sum of the YIQ coefficients

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half turn, used for the complement
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
HSL_HUE_OFFSET_B = 4.0             # Hue sector offset when blue is the max channel
PERCENT_MAX = 100.0                # Upper bound of a percentage
PERCENT_MIN = 0.0                  # Lower bound of a percentage
ALPHA_OPAQUE = 1.0                 # Fully opaque alpha

# Reference white used as the brightness normalizer
WHITE_HEX = "FFFFFF"

# ==========================================
# Harmony Defaults & Constraints
# ==========================================

DEFAULT_HARMONY = "complement"     # Transform applied to the base color when no harmony is given
DEFAULT_MEDIAN = 16.0              # Mix weight (%) for two colors of equal brightness
DEFAULT_MARGIN = 8.0               # Max weight shift (%) per unit of brightness difference
DEFAULT_MIX_WEIGHT = 50.0          # Weight (%) of the first color in a plain mix

MIX_WEIGHT_MIN = 0.0               # Lowest harmony share (%) returned by the weight calculator
MIX_WEIGHT_MAX = 50.0              # Highest harmony share (%), the base is never fully replaced

# ==========================================
# Terminal Styling
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
