"""
padcalc settings
"""
import os


def _flag(name):
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no", "off")


DEBUG = _flag("DEBUG")

# Fractional digits of fixed-point results
PRECISION = int(os.getenv("PADCALC_PRECISION", 12))

# Quiet period before a live preview is recomputed
DEBOUNCE_S = float(os.getenv("PADCALC_DEBOUNCE_MS", 140)) / 1000

# Result placeholders
NO_VALUE = "—"
ERROR_TEXT = "Error"

# Scientific notation is used outside [SCI_LOWER, SCI_UPPER]
SCI_UPPER = 1e12
SCI_LOWER = 1e-6
SCI_DIGITS = 6
