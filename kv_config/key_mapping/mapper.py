"""Prefix normalization and key mapping for delimiter-separated KV keys."""

from __future__ import annotations


def normalize_prefix(prefix: str | None, delimiter: str = "/") -> str:
    """Return ``prefix`` terminated by ``delimiter``, or ``""`` when it is empty."""
    if not prefix:
        return ""
    if prefix.endswith(delimiter):
        return prefix
    return prefix + delimiter


class KeyMapper:
    """Map between backend KV keys and logical nested paths under a prefix."""

    def __init__(self, prefix: str | None = None, delimiter: str = "/") -> None:
        super().__init__()
        if not delimiter:
            msg = "delimiter must not be empty"
            raise ValueError(msg)

        self.delimiter = delimiter
        self.prefix = normalize_prefix(prefix, delimiter)

    def is_directory_marker(self, kv_key: str) -> bool:
        """Return True for keys that only mark a directory and carry no leaf."""
        return kv_key.endswith(self.delimiter)

    def relative_parts(self, kv_key: str) -> tuple[str, ...]:
        """Strip the prefix length from a backend key and split the remainder.

        The strip is positional, so keys are expected to come from a listing
        under :attr:`prefix`. An empty remainder yields a single empty part.
        """
        return tuple(kv_key[len(self.prefix) :].split(self.delimiter))

    def full_key(self, *parts: str) -> str:
        """Build a backend key from one or more logical path parts."""
        if not parts:
            msg = "at least one key part is required"
            raise ValueError(msg)
        return self.prefix + self.delimiter.join(parts)
