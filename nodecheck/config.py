"""Node configuration, JSON-RPC access and literal extraction helpers."""

from __future__ import annotations

import functools
import itertools
import json
import re
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any

DEFAULT_CONFIG_PATH = "./secret.json"
U64_MAX = 2**64 - 1


class RpcError(Exception):
    """An error object returned by a JSON-RPC node."""

    def __init__(self, code: int | None, message: str, data: Any = None) -> None:
        super().__init__(f"{code}: {message}" if code is not None else message)
        self.code = code
        self.message = message
        self.data = data


@dataclass(frozen=True)
class TestConfig:
    """URLs of the nodes under comparison."""

    __test__ = False

    pathfinder: str
    deoxys: str
    juno: str

    @classmethod
    def from_file(cls, path: str) -> "TestConfig":
        """Load the configuration from a JSON file."""
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
        try:
            raw = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ValueError(f"could not deserialize config at {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ValueError(f"config at {path} must be a JSON object")
        values = {}
        for name in ("pathfinder", "deoxys", "juno"):
            if name not in raw:
                raise ValueError(f"config at {path} is missing field {name!r}")
            if not isinstance(raw[name], str):
                raise ValueError(f"config field {name!r} at {path} must be a string")
            values[name] = raw[name]
        return cls(**values)


@dataclass(frozen=True)
class RpcData:
    """Chain state gathered from the nodes once per run."""

    latest_chain_block: int
    block_number: int
    spec_version: str


class JsonRpcClient:
    """Minimal JSON-RPC 2.0 client over HTTP."""

    def __init__(self, url: str, timeout: float = 30.0) -> None:
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"invalid node url: {url!r}")
        self.url = url
        self.timeout = timeout
        self._ids = itertools.count(1)

    def request(self, method: str, params: Any = None) -> Any:
        """Call ``method`` with ``params`` and return the ``result`` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params if isinstance(params, dict) else list(params or []),
        }
        req = urllib.request.Request(
            self.url,
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        with urllib.request.urlopen(req, timeout=self.timeout) as response:
            reply = json.loads(response.read())
        if "error" in reply:
            error = reply["error"] or {}
            raise RpcError(error.get("code"), error.get("message", ""), error.get("data"))
        if "result" not in reply:
            raise RpcError(None, "response holds neither result nor error")
        return reply["result"]

    def block_number(self) -> int:
        """Return the number of the node's latest block."""
        return int(self.request("starknet_blockNumber", []))

    def spec_version(self) -> str:
        """Return the RPC specification version the node implements."""
        return str(self.request("starknet_specVersion", []))


def _client(url: str, node: str) -> JsonRpcClient:
    try:
        return JsonRpcClient(url)
    except ValueError as exc:
        raise ValueError(f"Error parsing {node} node url: {url!r}") from exc


def fetch_rpc_data(config: TestConfig) -> RpcData:
    """Query the nodes named by ``config`` for the current chain state."""
    deoxys = _client(config.deoxys, "Deoxys")
    pathfinder = _client(config.pathfinder, "Pathfinder")
    return RpcData(
        latest_chain_block=pathfinder.block_number(),
        block_number=deoxys.block_number(),
        spec_version=deoxys.spec_version(),
    )


@functools.lru_cache(maxsize=None)
def get_rpc_data(path: str = DEFAULT_CONFIG_PATH) -> RpcData:
    """Load the config at ``path`` and fetch chain state, once per path."""
    return fetch_rpc_data(TestConfig.from_file(path))


_INT_LITERAL = re.compile(
    r"(?P<body>0x[0-9a-fA-F_]+|0o[0-7_]+|0b[01_]+|[0-9][0-9_]*)"
    r"(?P<suffix>[iu](?:8|16|32|64|128|size))?"
)
_STR_LITERAL = re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL)
_RAW_STR_LITERAL = re.compile(r'r(#*)"(.*)"\1', re.DOTALL)
_OTHER_LITERAL = re.compile(
    r"true|false"
    r"|b?'(?:[^'\\]|\\.[^']*)'"
    r'|b"(?:[^"\\]|\\.)*"'
    r"|br(#*)\".*\"\1"
    r"|[0-9][0-9_]*\.[0-9][0-9_]*(?:[eE][+-]?[0-9_]+)?(?:f32|f64)?"
    r"|[0-9][0-9_]*(?:\.[0-9][0-9_]*)?[eE][+-]?[0-9_]+(?:f32|f64)?"
    r"|[0-9][0-9_]*(?:f32|f64)"
    r"|[0-9][0-9_]*\.",
    re.DOTALL,
)
_ESCAPE = re.compile(r"\\(?:u\{([0-9a-fA-F_]{1,6})\}|x([0-7][0-9a-fA-F])|\n\s*|(.))", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\", "0": "\0", "'": "'", '"': '"'}


def _unescape(body: str) -> str:
    def replace(match: re.Match[str]) -> str:
        unicode_digits, hex_digits, simple = match.groups()
        if unicode_digits is not None:
            return chr(int(unicode_digits.replace("_", ""), 16))
        if hex_digits is not None:
            return chr(int(hex_digits, 16))
        if simple is None:
            return ""
        if simple not in _SIMPLE_ESCAPES:
            raise ValueError(f"invalid escape sequence: \\{simple}")
        return _SIMPLE_ESCAPES[simple]

    return _ESCAPE.sub(replace, body)


def _string_value(text: str) -> str | None:
    match = _STR_LITERAL.fullmatch(text)
    if match:
        return _unescape(match.group(1))
    match = _RAW_STR_LITERAL.fullmatch(text)
    if match:
        return match.group(2)
    return None


def extract_expr_to_str(expr: str) -> str:
    """Return the value of a string literal expression."""
    text = expr.strip()
    value = _string_value(text)
    if value is not None:
        return value
    if _INT_LITERAL.fullmatch(text) or _OTHER_LITERAL.fullmatch(text):
        raise ValueError("Not a string literal")
    raise ValueError("Not a literal expression")


def extract_expr_to_u64(expr: str) -> int:
    """Return the value of an integer literal expression as an unsigned 64-bit int."""
    text = expr.strip()
    match = _INT_LITERAL.fullmatch(text)
    if match is None:
        if _string_value(text) is not None or _OTHER_LITERAL.fullmatch(text):
            raise ValueError("Not an integer literal")
        raise ValueError("Not a literal expression")
    body = match.group("body").lower()
    base = {"0x": 16, "0o": 8, "0b": 2}.get(body[:2], 10)
    digits = (body[2:] if base != 10 else body).replace("_", "")
    if not digits:
        raise ValueError("Not a literal expression")
    value = int(digits, base)
    if value > U64_MAX:
        raise ValueError("Failed to convert literal")
    return value