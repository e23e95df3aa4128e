# nodecheck

Helpers for writing conformance tests against Starknet JSON-RPC nodes.

A test suite compares the answers of several nodes (`deoxys`, `pathfinder`
and `juno`) and skips tests that the node under test cannot meet yet: it is
outside a given block range, or it speaks a different spec version.

## Install

```
pip install nodecheck
pip install "nodecheck[test]"   # with pytest for running the tests
```

The package has no dependencies beyond the standard library.

## Configuration

Node URLs are read from a JSON object with the string fields `pathfinder`,
`deoxys` and `juno`; the default path is `./secret.json`:

```json
{
  "pathfinder": "http://localhost:9545",
  "deoxys": "http://localhost:9944",
  "juno": "http://localhost:6060"
}
```

```python
from nodecheck.config import TestConfig, fetch_rpc_data, get_rpc_data

config = TestConfig.from_file("./secret.json")   # ValueError if malformed
data = fetch_rpc_data(config)
data = get_rpc_data("./secret.json")             # same, cached per path
print(data.block_number, data.latest_chain_block, data.spec_version)
```

`RpcData.block_number` and `RpcData.spec_version` come from the deoxys node,
`RpcData.latest_chain_block` from the pathfinder node.

`JsonRpcClient(url, timeout=30.0)` sends JSON-RPC 2.0 requests over HTTP
POST. `request(method, params)` returns the `result` member of the reply and
raises `RpcError` (with `code`, `message` and `data`) when the node returns an
error. `block_number()` and `spec_version()` wrap `starknet_blockNumber` and
`starknet_specVersion`. A URL that is not `http` or `https` is rejected with
`ValueError`.

## Gating tests on node state

`require(args, rpc_data=None)` takes a string of comma-separated
`name = literal` pairs and returns a decorator. Recognised names are
`block_min`, `block_max` and `spec_version`. When the node does not meet the
requirement, the test is wrapped with `unittest.skip` and the reason
"Deoxys node does not meet required specs to run this test".

```python
from nodecheck.requirement import require, with_logging

@require('block_min = 3800, block_max = 5000, spec_version = "0.7.1"')
def test_block_with_version():
    ...

@require('block_min = "latest", spec_version = "0.7.1"')
def test_latest():
    ...

@with_logging
def test_something_verbose():
    ...
```

Rules of the check:

- `block_min` defaults to 0 and `block_max` to 2**64 - 1; a value that is not
  an unsigned 64-bit integer literal falls back to that default.
- `block_min = "latest"` uses the latest chain block; any other string gives 0.
- The node's spec version must equal `spec_version`; when none is given it
  must equal the empty string.
- An unknown name is recorded in `Requirement.unknown_key` and otherwise
  ignored; a malformed pair raises `ValueError`.

Without `rpc_data`, node state is fetched through `get_rpc_data()` from the
default configuration file when the decorator is applied.
`Requirement.parse(args, rpc_data)` and `Requirement.should_run(data)` give
direct access to the same check.

`with_logging` wraps a plain or async function so that `logging.basicConfig`
is called before it runs.

`extract_expr_to_str(expr)` and `extract_expr_to_u64(expr)` read the value of
a string or integer literal (with `_` separators, `0x`/`0o`/`0b` prefixes and
integer suffixes), raising `ValueError` otherwise.

## Known chain data

`nodecheck.constants` holds the mainnet block numbers where each Starknet
version took effect (`BLOCK_0` … `BLOCK_0_13_1`), the node names
(`Network`), the versions (`StarknetVersion`, with `first_block`), and
well-known mainnet contract addresses and transaction hashes.
`block_for_version(version)` accepts a `StarknetVersion` or its string value
such as `"0.12.1"`; `version_at_block(block_number)` returns the version in
force at a block and rejects negative numbers.

## What is not included

The package provides the configuration, node access and test gating pieces
only. It does not ship a ready-made conformance suite comparing nodes method
by method, nor typed wrappers for RPC methods other than
`starknet_blockNumber` and `starknet_specVersion`; other calls go through
`JsonRpcClient.request`. There is no command-line tool.