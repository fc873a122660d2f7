"""Per-component design-token registry construction."""

from .lib import DEFAULT_ID_PREFIX, TokenBundle, build_tokens, make_token_id

__all__ = [
    "DEFAULT_ID_PREFIX",
    "TokenBundle",
    "make_token_id",
    "build_tokens",
]
