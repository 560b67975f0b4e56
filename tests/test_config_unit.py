from __future__ import annotations

from pathlib import Path

import pytest

from polkadot_launcher.artifacts import DEFAULT_BINARY_SOURCES
from polkadot_launcher.launcher_config import LauncherConfig, load_launcher_config


def test_defaults_match_canonical_layout() -> None:
    cfg = load_launcher_config(None)

    assert cfg.binaries_dir == Path("binaries")
    assert cfg.nodes_dir == Path("nodes")
    assert cfg.chain_spec_path == Path("chain-specs") / "chain_spec.json"
    assert cfg.chain_spec_builder_path == Path("binaries") / "chain-spec-builder"
    assert cfg.runtime_wasm_path == Path("nodes") / "asset_hub_westend_runtime.compact.compressed.wasm"
    assert cfg.relay_chain == "westend"
    assert cfg.para_id == 1000
    assert cfg.preset == "development"
    assert cfg.search_dirs == [Path("."), Path("..")]
    assert cfg.sidecar_env == {"RUST_LOG": "debug"}
    assert cfg.node_args == ["--chain", str(Path("chain-specs") / "chain_spec.json")]
    assert cfg.binary_source("omni_node") == DEFAULT_BINARY_SOURCES["omni_node"]


def test_yaml_overrides(tmp_path) -> None:
    p = tmp_path / "launcher.yaml"
    p.write_text(
        "\n".join(
            [
                "paths:",
                f"  work_dir: {tmp_path}",
                "  binaries_dir: bin",
                "urls:",
                "  omni_node:",
                "    default: https://mirror.example/omni",
                "  eth_rpc: https://mirror.example/eth-rpc",
                "chain_spec:",
                "  para_id: 2000",
                "serve:",
                "  sidecar_env: {RUST_LOG: info}",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_launcher_config(str(p))

    assert cfg.omni_node_path == tmp_path / "bin" / "polkadot-omni-node"
    assert cfg.para_id == 2000
    assert cfg.sidecar_env == {"RUST_LOG": "info"}
    src = cfg.binary_source("omni_node")
    assert src.default_url == "https://mirror.example/omni"
    assert src.macos_url == DEFAULT_BINARY_SOURCES["omni_node"].macos_url
    eth = cfg.binary_source("eth_rpc")
    assert eth.macos_url == eth.default_url == "https://mirror.example/eth-rpc"


def test_missing_config_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_launcher_config(str(tmp_path / "nope.yaml"))


def test_non_yaml_config_rejected(tmp_path) -> None:
    p = tmp_path / "launcher.json"
    p.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_launcher_config(str(p))


def test_non_mapping_config_rejected(tmp_path) -> None:
    p = tmp_path / "launcher.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_launcher_config(str(p))


def test_empty_sidecar_env_is_respected() -> None:
    assert LauncherConfig(raw={"serve": {"sidecar_env": {}}}).sidecar_env == {}


def test_explicit_zero_para_id_is_kept() -> None:
    assert LauncherConfig(raw={"chain_spec": {"para_id": 0}}).para_id == 0
