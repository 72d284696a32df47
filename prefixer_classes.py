# prefixer_classes.py – per-token prefix policy for Tailwind class lists

from enum import Enum


class TokenKind(Enum):
    ARBITRARY_VALUE = "arbitrary-value"  # [mask-type:luminance]
    CUSTOM_PROPERTY = "custom-property"  # --my-var
    ALREADY_PREFIXED = "already-prefixed"
    PLAIN = "plain"


def classify_token(token: str, prefix: str) -> TokenKind:
    # first matching rule wins
    if token.startswith("[") and token.endswith("]"):
        return TokenKind.ARBITRARY_VALUE
    if token.startswith("--"):
        return TokenKind.CUSTOM_PROPERTY
    if token.startswith(prefix):
        return TokenKind.ALREADY_PREFIXED
    return TokenKind.PLAIN


def prefix_token(token: str, prefix: str) -> str:
    if classify_token(token, prefix) is TokenKind.PLAIN:
        return prefix + token
    return token


def prefix_classes(class_string: str, prefix: str) -> str:
    """Prefix every class in a whitespace-separated class list.

    Tokens are re-joined with single spaces; order and duplicates are kept.
    The prefix is prepended verbatim, so it must carry its own separator
    (``"foo:"``, ``"tw-"``).
    """
    return " ".join(prefix_token(cls, prefix) for cls in class_string.split())
