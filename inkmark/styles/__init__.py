"""
Application styling and themes.
"""
from .theme_manager import ThemeColors, ThemeManager

__all__ = ['ThemeColors', 'ThemeManager']
