"""
helm_nexus_push.helm.command — Run the helm binary.

Helm exports HELM_BIN to plugins; outside of a plugin context
the first `helm` on PATH is used.
"""

from __future__ import annotations

import os
import subprocess
from typing import Mapping

from helm_nexus_push.errors import HelmError


def helm_bin() -> str:
    return os.environ.get("HELM_BIN") or "helm"


def run_helm(
    *args: str,
    env: Mapping[str, str] | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run `helm <args>` and capture its output.

    env entries are added on top of the current environment.

    Raises:
        HelmError: helm is not installed, or it exited nonzero and
            check is set.
    """
    cmd = [helm_bin(), *args]
    run_env = None
    if env:
        run_env = {**os.environ, **env}

    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, env=run_env,
        )
    except FileNotFoundError as e:
        raise HelmError(f"helm not found: {cmd[0]}") from e

    if check and result.returncode != 0:
        detail = (result.stderr or result.stdout).strip()
        raise HelmError(f"{' '.join(cmd)} failed: {detail}")
    return result
