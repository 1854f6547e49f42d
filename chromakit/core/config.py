#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromakit/core/config.py

from types import MappingProxyType

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_TO_LINEAR_TH = 0.03928        # WCAG 2.x linearization threshold (kept distinct from sRGB)

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HSL_HUE_MOD = 6.0                  # Hue sector count for HSL
PERCENT = 100.0                    # Fraction to percent scale
OKLCH_DECIMALS = 2                 # Rounding precision of OKLCH components

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# XYZ to LMS matrix, M1 (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.8189330101, 0.3618667424, -0.1288597137),   # Long-wavelength (L) response
    (0.0329845436, 0.9293118715, 0.0361456387),    # Medium-wavelength (M) response
    (0.0482003018, 0.2643662691, 0.6338517070),    # Short-wavelength (S) response
)

# LMS' to Lab matrix, M2 (Perceptual lightness and opponency)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),   # Lightness (L)
    (1.9779984951, -2.4285922050, 0.4505937099),   # 'a' (green-red)
    (0.0259040371, 0.7827717662, -0.8086757660),   # 'b' (blue-yellow)
)

# Color Vision Deficiency Matrices, 4x5 (R, G, B, A, bias)
# Source: Machado, Oliveira & Fernandes (2009), severity 1.0, LINEAR RGB.
# Monochromacy rows use Rec. 601 luma weights.
CVD_MATRICES = MappingProxyType({
    # Dichromacy (complete absence of one cone type)
    "protanopia": (
        (0.152286, 1.052583, -0.204868, 0, 0),
        (0.114503, 0.786281, 0.099216, 0, 0),
        (-0.003882, -0.048116, 1.051998, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    "deuteranopia": (
        (0.367322, 0.860646, -0.227968, 0, 0),
        (0.280085, 0.672501, 0.047413, 0, 0),
        (-0.011820, 0.042940, 0.968881, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    "tritanopia": (
        (1.255528, -0.076749, -0.178779, 0, 0),
        (-0.078411, 0.930809, 0.147602, 0, 0),
        (0.004733, 0.691367, 0.303900, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    # Anomalous trichromacy (reduced sensitivity)
    "protanomaly": (
        (0.458064, 0.679578, -0.137642, 0, 0),
        (0.092785, 0.846313, 0.060902, 0, 0),
        (-0.007494, -0.016807, 1.024301, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    "deuteranomaly": (
        (0.547494, 0.607765, -0.155259, 0, 0),
        (0.181692, 0.781742, 0.036566, 0, 0),
        (-0.010410, 0.027275, 0.983136, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    "tritanomaly": (
        (1.017277, 0.027029, -0.044306, 0, 0),
        (-0.006113, 0.958479, 0.047634, 0, 0),
        (0.006379, 0.248708, 0.744913, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    # Monochromacy
    "achromatopsia": (
        (0.299, 0.587, 0.114, 0, 0),
        (0.299, 0.587, 0.114, 0, 0),
        (0.299, 0.587, 0.114, 0, 0),
        (0, 0, 0, 1, 0),
    ),
    "achromatomaly": (
        (0.618, 0.320, 0.062, 0, 0),
        (0.163, 0.775, 0.062, 0, 0),
        (0.163, 0.320, 0.516, 0, 0),
        (0, 0, 0, 1, 0),
    ),
})

# Human readable simulation labels
SIMULATION_LABELS = {
    "normal": "Normal",
    "protanopia": "Protanopia",
    "deuteranopia": "Deuteranopia",
    "tritanopia": "Tritanopia",
    "protanomaly": "Protanomaly",
    "deuteranomaly": "Deuteranomaly",
    "tritanomaly": "Tritanomaly",
    "achromatopsia": "Achromatopsia",
    "achromatomaly": "Achromatomaly",
}

# ==========================================
# Application Defaults
# ==========================================

DEFAULT_COLOR_FORMAT = "hex"       # Format used when copying a color
COLOR_FORMATS = ("hex", "rgb", "hsl", "oklch")
DEFAULT_HISTORY_LIMIT = 10         # Picked colors kept in history
MAX_HISTORY_LIMIT = 100            # Upper bound accepted for the history limit
DEFAULT_FILTER_ID = "chromakit-cvd-filter"

# Keys used to extract and format technical color data
TECH_INFO_KEYS = [
    'rgb',
    'hsl',
    'oklch',
    'luminance',
    'contrast',
]

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
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
    "dim": "\033[2;37m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
