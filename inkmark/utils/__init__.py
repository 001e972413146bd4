"""
Utility functions and helpers.
"""
from .resource_loader import get_config_dir, get_settings_path
from .warning_manager import ConfirmationPrompts, PromptKind, confirmation_prompts

__all__ = [
    'get_config_dir',
    'get_settings_path',
    'ConfirmationPrompts',
    'PromptKind',
    'confirmation_prompts',
]
