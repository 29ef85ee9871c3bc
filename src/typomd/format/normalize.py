"""Character hygiene applied to model output before parsing."""

# Look-alikes that models (and some keyboard layouts) emit in place of
# the ASCII markdown delimiters.
CURLY_BACKTICK = "\u2018"  # ‘
ACUTE_ACCENT = "\u00b4"  # ´
RIGHT_SINGLE_QUOTE = "\u2019"  # ’
FULLWIDTH_HASH = "\uff03"  # ＃
MUSICAL_SHARP = "\u266f"  # ♯

INLINE_BACKTICK_ALIASES = (CURLY_BACKTICK, ACUTE_ACCENT)
BACKTICK_ALIASES = INLINE_BACKTICK_ALIASES + (RIGHT_SINGLE_QUOTE,)
HASH_ALIASES = (FULLWIDTH_HASH, MUSICAL_SHARP)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_inline(text: str) -> str:
    """Map backtick look-alikes to `` ` ``; the smart quote is left alone."""
    for alias in INLINE_BACKTICK_ALIASES:
        text = text.replace(alias, "`")
    return text


def normalize(raw: str, smart_quotes: bool = True) -> str:
    """Canonicalize line endings and delimiter look-alikes.

    Args:
        raw: Text as received from the model or the user
        smart_quotes: Also treat ``’`` as a code delimiter

    Returns:
        Text with no ``\\r`` and only ASCII backticks and hashes.
        Idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    result = normalize_newlines(raw)

    result = normalize_inline(result)
    if smart_quotes:
        result = result.replace(RIGHT_SINGLE_QUOTE, "`")

    for alias in HASH_ALIASES:
        result = result.replace(alias, "#")

    return result
