"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and static word data
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ConfigurationError, DICTIONARY, TARGET_LIST, LETTER_POINTS, WORD_LENGTH, MAX_GUESSES,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ConfigurationError', 'DICTIONARY', 'TARGET_LIST', 'LETTER_POINTS', 'WORD_LENGTH',
    'MAX_GUESSES', 'validate_word_list_integrity', 'get_word_statistics'
]
