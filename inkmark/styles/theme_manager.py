"""
Theme management and styling for the application.
"""
from PyQt5.QtWidgets import QWidget

from .models import ThemeColors


class ThemeManager:
    """Builds and applies the dark and light stylesheets."""

    DARK_THEME = ThemeColors(
        window_bg="#2e2e2e",
        control_bg="#3e3e3e",
        backdrop_bg="#1f1f1f",
        text="#f0f0f0",
        text_muted="#8899AA",
        accent="#4a9eff",
        accent_hover="#3a8eef",
        border="#555555",
    )

    LIGHT_THEME = ThemeColors(
        window_bg="#f0f0f0",
        control_bg="#ffffff",
        backdrop_bg="#d8d8d8",
        text="#2e2e2e",
        text_muted="#7A899C",
        accent="#4a9eff",
        accent_hover="#3a8eef",
        border="#cccccc",
    )

    @classmethod
    def get_theme_colors(cls, dark_mode: bool) -> ThemeColors:
        return cls.DARK_THEME if dark_mode else cls.LIGHT_THEME

    @classmethod
    def apply_theme(cls, widget: QWidget, dark_mode: bool) -> None:
        """
        Apply theme to a widget and its children.

        Args:
            widget: Widget to style
            dark_mode: Whether to use dark theme
        """
        widget.setStyleSheet(cls.generate_stylesheet(cls.get_theme_colors(dark_mode)))

    @classmethod
    def generate_stylesheet(cls, theme: ThemeColors) -> str:
        """
        Generate a complete stylesheet from theme colors.

        Args:
            theme: Theme colors to use

        Returns:
            Qt stylesheet string
        """
        return f"""
            QMainWindow, QWidget {{
                background-color: {theme.window_bg};
                color: {theme.text};
            }}

            QPushButton {{
                background-color: {theme.control_bg};
                color: {theme.text};
                border: none;
                border-radius: 6px;
                padding: 8px 16px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {theme.accent_hover};
                color: white;
            }}
            QPushButton:disabled {{
                color: {theme.text_muted};
            }}

            QToolButton {{
                color: {theme.text};
                border: none;
                border-radius: 4px;
                padding: 4px 8px;
            }}

            QComboBox, QLineEdit {{
                background-color: {theme.control_bg};
                border: 1px solid {theme.border};
                border-radius: 6px;
                padding: 5px 10px;
                color: {theme.text};
            }}
            QComboBox:focus, QLineEdit:focus {{
                border: 1px solid {theme.accent};
            }}

            QLabel {{
                background-color: transparent;
            }}
            QLabel[objectName="PageStatus"] {{
                color: {theme.text_muted};
            }}

            QScrollArea, #PageBackdrop {{
                background-color: {theme.backdrop_bg};
                border: none;
            }}

            #TopFrame, #NavigationBar {{
                border-bottom: 1px solid {theme.border};
            }}
            #AnnotationToolbar {{
                border: 1px solid {theme.border};
                border-radius: 8px;
            }}
        """
