"""Theme colors and color utilities for the UI."""


class BoardColors:
    """Dark stage palette for a shared projector display."""

    BG_TOP = "#1a237e"
    BG_BOTTOM = "#0d1240"

    CELL = "#283593"
    CELL_BORDER = "#5c6bc0"
    CELL_SELECTED = "#ffb300"
    CELL_TEXT = "#ffffff"
    ORDER_BADGE = "#e65100"

    TARGET = "#ffd54f"
    TIMER = "#e8eaf6"
    TIMER_LOW = "#ff7043"

    CORRECT = "#66bb6a"
    INCORRECT = "#ef5350"

    PANEL_BG = "rgba(255, 255, 255, 0.08)"
    TEXT_PRIMARY = "#ffffff"
    TEXT_MUTED = "#9fa8da"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a
