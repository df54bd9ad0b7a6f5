"""
helm_nexus_push.helm.package — Turn a chart argument into an archive path.

`helm package ./mychart` prints:

    Successfully packaged chart and saved it to: /work/mychart-0.1.0.tgz
"""

from __future__ import annotations

from pathlib import Path

from helm_nexus_push.errors import HelmError, PackageError
from helm_nexus_push.helm.command import run_helm
from helm_nexus_push.helm.config import HelmConfig


_SAVED_MARKER = "saved it to:"


def package_chart(chart_dir: str | Path, config: HelmConfig) -> Path:
    """Run `helm package` on a chart directory.

    Returns:
        Path of the produced .tgz
    """
    try:
        result = run_helm("package", str(chart_dir), env=config.env())
    except HelmError as e:
        raise PackageError(str(e)) from e

    path = _parse_package_output(result.stdout)
    if path is None:
        raise PackageError(
            f"helm package did not report an archive for {chart_dir}"
        )
    if not path.is_file():
        raise PackageError(f"Packaged chart not found: {path}")
    return path


def _parse_package_output(text: str) -> Path | None:
    lines = [line for line in text.splitlines() if ":" in line]
    if not lines:
        return None

    saved = [line for line in lines if _SAVED_MARKER in line]
    if saved:
        raw = saved[-1].split(_SAVED_MARKER, 1)[1]
    else:
        raw = lines[-1].split(":", 1)[1]

    raw = raw.strip()
    return Path(raw) if raw else None


def resolve_chart_package(chart: str | Path, config: HelmConfig) -> Path:
    """Archive to upload: chart itself if it is a file, else a fresh package."""
    chart = Path(chart)
    if chart.is_dir():
        return package_chart(chart, config)
    if chart.is_file():
        return chart
    raise PackageError(f"Chart not found: {chart}")
