import io
import json
from unittest.mock import patch

import pytest

from nodecheck.config import (
    U64_MAX,
    JsonRpcClient,
    RpcData,
    RpcError,
    TestConfig,
    extract_expr_to_str,
    extract_expr_to_u64,
    fetch_rpc_data,
    get_rpc_data,
)

PATHFINDER_URL = "http://pathfinder.example.com/rpc"
DEOXYS_URL = "http://deoxys.example.com/rpc"
JUNO_URL = "http://juno.example.com/rpc"


def _write_config(tmp_path, **overrides):
    data = {"pathfinder": PATHFINDER_URL, "deoxys": DEOXYS_URL, "juno": JUNO_URL}
    data.update(overrides)
    path = tmp_path / "secret.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class _FakeNodes:
    def __init__(self, answers):
        self.answers = answers
        self.calls = []

    def __call__(self, req, timeout=None):
        payload = json.loads(req.data)
        self.calls.append((req.full_url, payload))
        answer = self.answers[(req.full_url, payload["method"])]
        reply = {"jsonrpc": "2.0", "id": payload["id"]}
        reply.update(answer)
        return io.BytesIO(json.dumps(reply).encode("utf-8"))


def _chain_nodes():
    return _FakeNodes(
        {
            (PATHFINDER_URL, "starknet_blockNumber"): {"result": 700},
            (DEOXYS_URL, "starknet_blockNumber"): {"result": 650},
            (DEOXYS_URL, "starknet_specVersion"): {"result": "0.7.1"},
        }
    )


def test_config_from_file(tmp_path):
    config = TestConfig.from_file(_write_config(tmp_path))
    assert config == TestConfig(pathfinder=PATHFINDER_URL, deoxys=DEOXYS_URL, juno=JUNO_URL)


def test_config_ignores_extra_fields(tmp_path):
    config = TestConfig.from_file(_write_config(tmp_path, extra="ignored"))
    assert config.juno == JUNO_URL


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TestConfig.from_file(str(tmp_path / "absent.json"))


def test_config_invalid_json(tmp_path):
    path = tmp_path / "secret.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        TestConfig.from_file(str(path))


def test_config_missing_field(tmp_path):
    path = tmp_path / "secret.json"
    path.write_text(json.dumps({"pathfinder": PATHFINDER_URL}), encoding="utf-8")
    with pytest.raises(ValueError, match="deoxys"):
        TestConfig.from_file(str(path))


def test_client_rejects_bad_url():
    with pytest.raises(ValueError):
        JsonRpcClient("not a url")


def test_client_block_number_and_payload():
    nodes = _chain_nodes()
    with patch("urllib.request.urlopen", nodes):
        client = JsonRpcClient(DEOXYS_URL)
        assert client.block_number() == 650
        assert client.spec_version() == "0.7.1"
    url, payload = nodes.calls[0]
    assert url == DEOXYS_URL
    assert payload["method"] == "starknet_blockNumber"
    assert payload["jsonrpc"] == "2.0"
    assert nodes.calls[1][1]["id"] > payload["id"]


def test_client_error_response():
    nodes = _FakeNodes(
        {(DEOXYS_URL, "starknet_call"): {"error": {"code": -32602, "message": "Invalid params"}}}
    )
    with patch("urllib.request.urlopen", nodes):
        with pytest.raises(RpcError) as info:
            JsonRpcClient(DEOXYS_URL).request("starknet_call", [])
    assert info.value.code == -32602
    assert info.value.message == "Invalid params"


def test_fetch_rpc_data():
    config = TestConfig(pathfinder=PATHFINDER_URL, deoxys=DEOXYS_URL, juno=JUNO_URL)
    with patch("urllib.request.urlopen", _chain_nodes()):
        data = fetch_rpc_data(config)
    assert data == RpcData(latest_chain_block=700, block_number=650, spec_version="0.7.1")


def test_fetch_rpc_data_bad_url():
    config = TestConfig(pathfinder=PATHFINDER_URL, deoxys="nonsense", juno=JUNO_URL)
    with pytest.raises(ValueError, match="Deoxys"):
        fetch_rpc_data(config)


def test_get_rpc_data_is_cached(tmp_path):
    path = _write_config(tmp_path)
    nodes = _chain_nodes()
    with patch("urllib.request.urlopen", nodes):
        first = get_rpc_data(path)
        calls = len(nodes.calls)
        second = get_rpc_data(path)
    assert first == second
    assert len(nodes.calls) == calls == 3


def test_extract_str():
    assert extract_expr_to_str('"latest"') == "latest"
    assert extract_expr_to_str(' "a\\nb" ') == "a\nb"
    assert extract_expr_to_str('r#"raw \\n"#') == "raw \\n"


def test_extract_str_errors():
    with pytest.raises(ValueError, match="Not a string literal"):
        extract_expr_to_str("42")
    with pytest.raises(ValueError, match="Not a string literal"):
        extract_expr_to_str("true")
    with pytest.raises(ValueError, match="Not a literal expression"):
        extract_expr_to_str("latest")


def test_extract_u64():
    assert extract_expr_to_u64("1_000u64") == 1000
    assert extract_expr_to_u64("0x10") == 16
    assert extract_expr_to_u64(str(U64_MAX)) == U64_MAX


def test_extract_u64_errors():
    with pytest.raises(ValueError, match="Failed to convert literal"):
        extract_expr_to_u64(str(U64_MAX + 1))
    with pytest.raises(ValueError, match="Not an integer literal"):
        extract_expr_to_u64('"12"')
    with pytest.raises(ValueError, match="Not a literal expression"):
        extract_expr_to_u64("x + 1")
    with pytest.raises(ValueError, match="Not a literal expression"):
        extract_expr_to_u64("-5")