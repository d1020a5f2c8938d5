# -----------------------------------------------------------------------------
# INFRASTRUCTURE LAYER
# -----------------------------------------------------------------------------
# Contains the input side of the counter:
# - console_tokens: Interactive prompt, one token per line
# - line_tokens: Tokens from a file or any list of lines
# -----------------------------------------------------------------------------

from .token_source import console_tokens, line_tokens

__all__ = ["console_tokens", "line_tokens"]
