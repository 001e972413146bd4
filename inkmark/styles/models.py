from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a theme."""
    # Backgrounds: window, controls, area behind the page
    window_bg: str
    control_bg: str
    backdrop_bg: str

    # Text
    text: str
    text_muted: str

    # Accent for focused and checked controls
    accent: str
    accent_hover: str

    border: str
