from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .artifacts import (
    CHAIN_SPEC_BUILDER,
    CHAIN_SPEC_FILE,
    DEFAULT_BINARY_SOURCES,
    DEFAULT_RUNTIME_WASM_URL,
    ETH_RPC,
    OMNI_NODE,
    RUNTIME_WASM,
    SDK_SCRIPT_URL,
    BinarySource,
)


@dataclass(frozen=True)
class LauncherConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    # paths

    @property
    def work_dir(self) -> Path:
        return Path(str(self._section("paths").get("work_dir") or "."))

    def _under_work_dir(self, key: str, default: str) -> Path:
        return self.work_dir / str(self._section("paths").get(key) or default)

    @property
    def binaries_dir(self) -> Path:
        return self._under_work_dir("binaries_dir", "binaries")

    @property
    def nodes_dir(self) -> Path:
        return self._under_work_dir("nodes_dir", "nodes")

    @property
    def chain_specs_dir(self) -> Path:
        return self._under_work_dir("chain_specs_dir", "chain-specs")

    @property
    def templates_dir(self) -> Path:
        return self._under_work_dir("templates_dir", "templates")

    @property
    def chain_spec_builder_path(self) -> Path:
        return self.binaries_dir / CHAIN_SPEC_BUILDER

    @property
    def omni_node_path(self) -> Path:
        return self.binaries_dir / OMNI_NODE

    @property
    def eth_rpc_path(self) -> Path:
        return self.binaries_dir / ETH_RPC

    @property
    def runtime_wasm_path(self) -> Path:
        return self.nodes_dir / RUNTIME_WASM

    @property
    def chain_spec_path(self) -> Path:
        return self.chain_specs_dir / CHAIN_SPEC_FILE

    @property
    def report_path(self) -> Path:
        return self._under_work_dir("report", "install-report.json")

    # urls

    @property
    def sdk_script_url(self) -> str:
        return str(self._section("urls").get("sdk_script") or SDK_SCRIPT_URL)

    @property
    def runtime_wasm_url(self) -> str:
        return str(self._section("urls").get("runtime_wasm") or DEFAULT_RUNTIME_WASM_URL)

    def binary_source(self, key: str) -> BinarySource:
        """Default source for ``key`` with any urls.<key>.{macos,default} overrides applied."""

        base = DEFAULT_BINARY_SOURCES[key]
        override = self._section("urls").get(key) or {}
        if isinstance(override, str):
            return BinarySource(name=base.name, macos_url=override, default_url=override)
        return BinarySource(
            name=base.name,
            macos_url=str(override.get("macos") or base.macos_url),
            default_url=str(override.get("default") or base.default_url),
        )

    # chain spec

    @property
    def relay_chain(self) -> str:
        return str(self._section("chain_spec").get("relay_chain") or "westend")

    @property
    def para_id(self) -> int:
        para_id = self._section("chain_spec").get("para_id")
        return 1000 if para_id is None else int(para_id)

    @property
    def preset(self) -> str:
        return str(self._section("chain_spec").get("preset") or "development")

    @property
    def search_dirs(self) -> List[Path]:
        dirs = self._section("chain_spec").get("search_dirs") or [".", ".."]
        return [self.work_dir / str(d) for d in dirs]

    # serve

    @property
    def sidecar_env(self) -> Dict[str, str]:
        env = self._section("serve").get("sidecar_env")
        if env is None:
            env = {"RUST_LOG": "debug"}
        return {str(k): str(v) for k, v in env.items()}

    @property
    def node_args(self) -> List[str]:
        args = self._section("serve").get("node_args")
        if args:
            return [str(a) for a in args]
        return ["--chain", str(self.chain_spec_path)]


def load_launcher_config(path: Optional[str]) -> LauncherConfig:
    if path is None:
        return LauncherConfig(raw={})

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("launcher config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the launcher config") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("launcher config must contain a mapping/object")

    return LauncherConfig(raw=raw)
