"""Decorators that gate tests on the state of the node under test."""

from __future__ import annotations

import functools
import inspect
import logging
import re
import unittest
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from nodecheck.config import (
    DEFAULT_CONFIG_PATH,
    U64_MAX,
    RpcData,
    extract_expr_to_str,
    extract_expr_to_u64,
    get_rpc_data,
)

F = TypeVar("F", bound=Callable[..., Any])

SKIP_REASON = "Deoxys node does not meet required specs to run this test"

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_PATH = re.compile(r"(?:::)?[A-Za-z_][A-Za-z0-9_]*(?:::[A-Za-z_][A-Za-z0-9_]*)+")


def _split_arguments(text: str) -> list[str]:
    """Split ``text`` on commas that lie outside strings and brackets."""
    items: list[str] = []
    current: list[str] = []
    depth = 0
    in_string = False
    escaped = False
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in "([{":
            depth += 1
        elif char in ")]}":
            depth -= 1
        elif char == "," and depth == 0:
            items.append("".join(current))
            current = []
            continue
        current.append(char)
    if in_string:
        raise ValueError("unterminated string literal in arguments")
    tail = "".join(current)
    if tail.strip():
        items.append(tail)
    if any(not item.strip() for item in items):
        raise ValueError("empty argument in list")
    return items


@dataclass(frozen=True)
class Requirement:
    """Block range and spec version a node must satisfy for a test to run."""

    block_min: int = 0
    block_max: int = U64_MAX
    spec_version: str | None = None
    unknown_key: str | None = None

    @classmethod
    def parse(cls, args: str, rpc_data: RpcData | None = None) -> "Requirement":
        """Parse ``name = literal`` pairs separated by commas."""
        block_min = 0
        block_max = U64_MAX
        spec_version: str | None = None
        unknown_key: str | None = None

        for item in _split_arguments(args):
            name, sep, value = item.partition("=")
            name = name.strip()
            if not sep or not value.strip():
                raise ValueError(f"expected `name = value`, got {item.strip()!r}")
            if _PATH.fullmatch(name):
                raise ValueError(f"argument name must be a single identifier: {name!r}")
            if not _IDENT.fullmatch(name):
                raise ValueError(f"invalid argument name: {name!r}")

            if name == "block_min":
                try:
                    text = extract_expr_to_str(value)
                except ValueError:
                    block_min = _u64_or(value, 0)
                else:
                    if text == "latest":
                        data = rpc_data if rpc_data is not None else get_rpc_data(DEFAULT_CONFIG_PATH)
                        block_min = data.latest_chain_block
                    else:
                        block_min = 0
            elif name == "block_max":
                block_max = _u64_or(value, U64_MAX)
            elif name == "spec_version":
                try:
                    spec_version = extract_expr_to_str(value)
                except ValueError:
                    spec_version = None
            else:
                unknown_key = name

        return cls(block_min, block_max, spec_version, unknown_key)

    def should_run(self, data: RpcData) -> bool:
        """Whether a node in state ``data`` meets this requirement."""
        return (
            self.block_min <= data.block_number <= self.block_max
            and data.spec_version == (self.spec_version or "")
        )


def _u64_or(expr: str, default: int) -> int:
    try:
        return extract_expr_to_u64(expr)
    except ValueError:
        return default


def require(args: str, rpc_data: RpcData | None = None) -> Callable[[F], F]:
    """Mark a test as skipped unless the node meets the requirement in ``args``.

    The node state is read when the decorator is applied; without ``rpc_data``
    it is fetched from the nodes named in the default configuration file.
    """
    data = rpc_data if rpc_data is not None else get_rpc_data(DEFAULT_CONFIG_PATH)
    requirement = Requirement.parse(args, data)

    def decorate(func: F) -> F:
        if requirement.should_run(data):
            return func
        return unittest.skip(SKIP_REASON)(func)

    return decorate


def _init_logging() -> None:
    logging.basicConfig(level=logging.ERROR)


def with_logging(func: F) -> F:
    """Set up logging before ``func`` runs, unless it is already configured."""
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _init_logging()
            return await func(*args, **kwargs)

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _init_logging()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]