"""Polkadot launcher: install and serve an omni-node (Python-first).

Core design goals:
- Every install step runs, failures are reported not propagated
- Idempotent artifact fetches
- A single seam for external commands
- Centralized logging
"""

__all__ = []
