"""ParserConfig — lexical settings shared by the reader, lexer and parser."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Lexical conventions for RS274NGC-style G-code."""

    # --- Numbers ---
    max_number_length: int = 32  # chars in one numeric literal

    # --- Whitespace (skipped everywhere, including inside numbers) ---
    whitespace: tuple[str, ...] = (" ", "\t")

    # --- Comments ---
    line_comment: str = ";"  # runs to end of line
    comment_open: str = "("
    comment_close: str = ")"  # first close ends the comment, no nesting


# Singleton default config
DEFAULT_CONFIG = ParserConfig()
