"""Catalogue of the externally published artifacts the installer provisions."""

from __future__ import annotations

from dataclasses import dataclass

RELEASE_BASE = "https://github.com/paritytech/polkadot-sdk/releases/download/polkadot-stable2412"
MACOS_RELEASE_BASE = "https://github.com/ArneilPaulPolican/dot/releases/download/v0.0.1-binary"

SDK_SCRIPT_URL = (
    "https://raw.githubusercontent.com/paritytech/polkadot-sdk/refs/heads/master/scripts/getting-started.sh"
)

CHAIN_SPEC_BUILDER = "chain-spec-builder"
OMNI_NODE = "polkadot-omni-node"
ETH_RPC = "eth-rpc"
RUNTIME_WASM = "asset_hub_westend_runtime.compact.compressed.wasm"
CHAIN_SPEC_FILE = "chain_spec.json"


@dataclass(frozen=True)
class BinarySource:
    """Where to fetch a binary from: one URL for macOS, one for everything else."""

    name: str
    macos_url: str
    default_url: str


DEFAULT_BINARY_SOURCES = {
    "chain_spec_builder": BinarySource(
        name=CHAIN_SPEC_BUILDER,
        macos_url=f"{MACOS_RELEASE_BASE}/{CHAIN_SPEC_BUILDER}",
        default_url=f"{RELEASE_BASE}/{CHAIN_SPEC_BUILDER}",
    ),
    "omni_node": BinarySource(
        name=OMNI_NODE,
        macos_url=f"{MACOS_RELEASE_BASE}/{OMNI_NODE}",
        default_url=f"{RELEASE_BASE}/{OMNI_NODE}",
    ),
    # Only one published eth-rpc build is known; both branches point at it
    # until a per-platform release exists. Override via urls.eth_rpc.
    "eth_rpc": BinarySource(
        name=ETH_RPC,
        macos_url=f"{MACOS_RELEASE_BASE}/{ETH_RPC}",
        default_url=f"{MACOS_RELEASE_BASE}/{ETH_RPC}",
    ),
}

DEFAULT_RUNTIME_WASM_URL = f"{RELEASE_BASE}/{RUNTIME_WASM}"
