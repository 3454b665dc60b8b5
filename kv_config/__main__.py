"""Interface for ``python -m kv_config``."""

from __future__ import annotations

import asyncio
import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError
from typing import TYPE_CHECKING, Any

from ._version import version
from .stores import available_store_types, create_store


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


__all__ = ["main"]


def _boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in {"true", "1", "yes"}:
        return True
    if lowered in {"false", "0", "no"}:
        return False
    msg = f"expected a boolean, got {value!r}"
    raise ValueError(msg)


# Backend options that are not strings; everything else is passed through as text.
_OPTION_TYPES: dict[str, Callable[[str], Any]] = {
    "create_bucket": _boolean,
    "port": int,
    "ssl": _boolean,
    "timeout": float,
}


def _option(text: str) -> tuple[str, Any]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        msg = f"expected KEY=VALUE, got {text!r}"
        raise ArgumentTypeError(msg)
    convert = _OPTION_TYPES.get(key)
    if convert is None:
        return key, value
    try:
        return key, convert(value)
    except ValueError as error:
        msg = f"invalid value for {key}: {error}"
        raise ArgumentTypeError(msg) from error


async def _fetch(store_type: str, configuration: dict[str, Any]) -> bytes:
    async with create_store(store_type, configuration) as store:
        return await store.get()


def main(args: Sequence[str] | None = None) -> None:
    """Fetch a configuration document once and print it as JSON."""
    parser = ArgumentParser(prog="kv_config")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--type", default="consul", choices=available_store_types(), help="backend store type")
    _ = parser.add_argument("--prefix", default="", help="key prefix to read")
    _ = parser.add_argument("--delimiter", default="/", help="key path delimiter")
    _ = parser.add_argument(
        "-o",
        "--option",
        action="append",
        default=[],
        type=_option,
        metavar="KEY=VALUE",
        help="backend connection option, may be repeated",
    )
    _ = parser.add_argument("--debug", action="store_true", help="enable debug logging")
    namespace = parser.parse_args(args)

    if namespace.debug:
        logging.basicConfig(level=logging.DEBUG)

    configuration: dict[str, Any] = dict(namespace.option)
    configuration.update(prefix=namespace.prefix, delimiter=namespace.delimiter)
    _ = sys.stdout.write(asyncio.run(_fetch(namespace.type, configuration)).decode() + "\n")


if __name__ == "__main__":
    main()
