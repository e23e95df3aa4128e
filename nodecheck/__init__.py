"""Node configuration, JSON-RPC access, test gating and mainnet constants for Starknet node tests."""

__version__ = "0.1.0"
__all__ = ["config", "constants", "requirement"]