"""Tokenised strings: values joined by a single separator character."""


def _split(s: str, sep: str) -> list[str]:
    return s.split(sep) if s else []


def _checked_index(tokens: list[str], i: int) -> int:
    if not 0 <= i < len(tokens):
        raise IndexError(f"token index {i} out of range for {len(tokens)} tokens")
    return i


def token_count(s: str, sep: str) -> int:
    """Return how many tokens ``s`` holds; an empty string holds none."""
    return s.count(sep) + 1 if s else 0


def add_token(s: str, sep: str, token: str) -> str:
    """Return ``s`` with ``token`` appended as its last token."""
    return s + sep + token if s else s + token


def get_token_at(s: str, sep: str, i: int) -> str:
    """Return the token at index ``i``."""
    tokens = _split(s, sep)
    return tokens[_checked_index(tokens, i)]


def remove_token_at(s: str, sep: str, i: int) -> str:
    """Return ``s`` without the token at index ``i`` and its separator."""
    tokens = _split(s, sep)
    del tokens[_checked_index(tokens, i)]
    return sep.join(tokens)


def set_token_at(s: str, sep: str, token: str, i: int) -> str:
    """Return ``s`` with the token at index ``i`` replaced by ``token``."""
    tokens = _split(s, sep)
    tokens[_checked_index(tokens, i)] = token
    return sep.join(tokens)


def find_token(s: str, sep: str, token: str) -> int:
    """Return the index of the first token equal to ``token``, or -1."""
    try:
        return s.split(sep).index(token)
    except ValueError:
        return -1


def empty_tstring(count: int, sep: str) -> str:
    """Return a tokenised string of ``count`` tokens, each a single space."""
    return sep.join(" " for _ in range(count))