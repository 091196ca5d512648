"""Theme tokens for the huewheel picker."""

from .theme import DEFAULT_TOKENS, ThemeTokens, validate_theme_tokens

__all__ = ["DEFAULT_TOKENS", "ThemeTokens", "validate_theme_tokens"]
