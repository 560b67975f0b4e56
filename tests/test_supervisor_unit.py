from __future__ import annotations

import logging
import threading
import time
from pathlib import Path

from conftest import FakeRunner
from polkadot_launcher.errors import ExecutionFailed
from polkadot_launcher.lib.supervisor import ManagedProcess, build_serve_processes, launch, serve


NODE = ManagedProcess(name="omni-node", executable=Path("binaries/polkadot-omni-node"), args=["--chain", "spec.json"])
SIDECAR = ManagedProcess(name="eth-rpc", executable=Path("binaries/eth-rpc"), env={"RUST_LOG": "debug"})


def test_serve_waits_for_slow_node_after_sidecar_fails(caplog) -> None:
    finished = {}

    def handler(argv, kw):
        if argv[0].endswith("polkadot-omni-node"):
            time.sleep(0.05)
            finished["node"] = time.monotonic()
            return 0
        finished["sidecar"] = time.monotonic()
        raise ExecutionFailed("Failed to execute binaries/eth-rpc: not found")

    caplog.set_level(logging.INFO)
    start = time.monotonic()
    node_out, sidecar_out = serve([NODE, SIDECAR], runner=FakeRunner(handler))
    elapsed = time.monotonic() - start

    assert elapsed >= 0.05
    assert set(finished) == {"node", "sidecar"}
    assert finished["sidecar"] < finished["node"]

    assert node_out.ok and node_out.returncode == 0
    assert not sidecar_out.ok
    assert "not found" in sidecar_out.error

    sidecar_errors = [
        r for r in caplog.records if r.name.endswith("supervisor.eth-rpc") and r.levelno == logging.ERROR
    ]
    assert sidecar_errors
    node_errors = [r for r in caplog.records if r.name.endswith("supervisor.omni-node") and r.levelno >= logging.ERROR]
    assert node_errors == []


def test_processes_run_concurrently() -> None:
    barrier = threading.Barrier(2, timeout=2)

    def handler(argv, kw):
        # Both launches must be in flight at once for the barrier to release.
        barrier.wait()
        return 0

    outcomes = serve([NODE, SIDECAR], runner=FakeRunner(handler))
    assert [o.ok for o in outcomes] == [True, True]


def test_nonzero_exit_is_reported_without_touching_sibling() -> None:
    def handler(argv, kw):
        return 1 if argv[0].endswith("polkadot-omni-node") else 0

    node_out, sidecar_out = serve([NODE, SIDECAR], runner=FakeRunner(handler))

    assert node_out.returncode == 1 and not node_out.ok
    assert sidecar_out.ok


def test_launch_passes_env_and_streams_output() -> None:
    runner = FakeRunner()
    launch(SIDECAR, runner=runner)

    assert runner.calls == [["binaries/eth-rpc"]]
    assert runner.kwargs[0]["env"] == {"RUST_LOG": "debug"}
    assert runner.kwargs[0]["capture"] is False
    assert runner.kwargs[0]["check"] is False


def test_unexpected_error_stays_inside_its_thread() -> None:
    def handler(argv, kw):
        if argv[0].endswith("eth-rpc"):
            raise ValueError("bad")
        return 0

    node_out, sidecar_out = serve([NODE, SIDECAR], runner=FakeRunner(handler))
    assert node_out.ok
    assert sidecar_out.error == "bad"


def test_build_serve_processes_defaults(tmp_path) -> None:
    node, sidecar = build_serve_processes(
        node_path=tmp_path / "polkadot-omni-node",
        sidecar_path=tmp_path / "eth-rpc",
        node_args=["--chain", "x.json"],
        sidecar_env={"RUST_LOG": "debug"},
    )
    assert node.argv == [str(tmp_path / "polkadot-omni-node"), "--chain", "x.json"]
    assert node.env == {}
    assert sidecar.args == []
    assert sidecar.env == {"RUST_LOG": "debug"}
