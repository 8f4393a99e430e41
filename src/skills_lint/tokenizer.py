"""BPE token counting backed by tiktoken."""

from __future__ import annotations

import functools

import tiktoken

from skills_lint.constants.models import SUPPORTED_ENCODINGS
from skills_lint.exceptions import TokenizerError, UnknownEncodingError


@functools.lru_cache(maxsize=None)
def get_encoding(name: str) -> tiktoken.Encoding:
    """Return the tiktoken encoding called *name*.

    Only the encodings listed in ``SUPPORTED_ENCODINGS`` are accepted.  BPE
    ranks are fetched (and cached) by tiktoken on first use, so a failure here
    usually means the ranks could not be downloaded.
    """
    if name not in SUPPORTED_ENCODINGS:
        raise UnknownEncodingError(name)
    try:
        return tiktoken.get_encoding(name)
    except (OSError, ValueError) as exc:
        raise TokenizerError(f"tokenizer error: failed to load encoding {name!r}: {exc}") from exc


def count_tokens(text: str, encoding_name: str) -> int:
    """Count tokens in *text*, treating special-token literals as special tokens."""
    encoding = get_encoding(encoding_name)
    return len(encoding.encode(text, allowed_special="all"))
