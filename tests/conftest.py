"""
tests/conftest.py — Shared fixtures.

FakeHelm stands in for the helm binary (subprocess.run),
FakeNexus for the repository's PUT endpoint (requests.put).
"""

import os
import sys
import subprocess
from pathlib import Path

import pytest
import requests
import yaml

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


class FakeHelm:
    """Answers the helm subcommands the plugin runs."""

    def __init__(self, workdir: Path):
        self.version = "v3.14.2+gc309b6f"
        self.repos = {"nexus": "https://nexus.example.com/repository/helm-hosted"}
        self.helm2_home = workdir / "helm2-home"
        self.package_dir = workdir / "packages"
        self.package_output = None
        self.package_fails = False
        self.calls = []

    def names(self):
        return [args for args, _ in self.calls]

    def __call__(self, cmd, capture_output=True, text=True, env=None, **kwargs):
        args = list(cmd[1:])
        self.calls.append((args, env))

        if args[:1] == ["version"]:
            return self._done(cmd, stdout=f"{self.version}\n")
        if args[:1] == ["home"]:
            return self._done(cmd, stdout=f"{self.helm2_home}\n")
        if args[:2] == ["repo", "list"]:
            return self._repo_list(cmd, args)
        if args[:1] == ["package"]:
            return self._package(cmd, Path(args[1]))
        return self._done(cmd, returncode=1, stderr=f"Error: unknown command {args}\n")

    def _repo_list(self, cmd, args):
        if not self.repos:
            return self._done(cmd, returncode=1,
                              stderr="Error: no repositories to show\n")
        if "-o" in args:
            entries = [{"name": n, "url": u} for n, u in self.repos.items()]
            return self._done(cmd, stdout=yaml.safe_dump(entries))
        lines = ["NAME          \tURL"]
        lines += [f"{n:14s}\t{u}" for n, u in self.repos.items()]
        return self._done(cmd, stdout="\n".join(lines) + "\n")

    def _package(self, cmd, chart_dir):
        if self.package_fails:
            return self._done(cmd, returncode=1,
                              stderr="Error: Chart.yaml file is missing\n")
        if self.package_output is not None:
            return self._done(cmd, stdout=self.package_output)
        self.package_dir.mkdir(parents=True, exist_ok=True)
        tgz = self.package_dir / f"{chart_dir.name}-0.1.0.tgz"
        tgz.write_bytes(b"packaged " + chart_dir.name.encode())
        return self._done(
            cmd, stdout=f"Successfully packaged chart and saved it to: {tgz}\n",
        )

    @staticmethod
    def _done(cmd, returncode=0, stdout="", stderr=""):
        return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)


class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


class FakeNexus:
    """Records PUT requests and answers with a fixed status."""

    def __init__(self):
        self.status_code = 200
        self.text = ""
        self.error = None
        self.requests = []

    @property
    def last(self):
        return self.requests[-1]

    def __call__(self, url, data=None, auth=None, **kwargs):
        body = data.read() if hasattr(data, "read") else data
        self.requests.append({
            "url": url, "auth": auth, "body": body,
            "allow_redirects": kwargs.get("allow_redirects", True),
        })
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status_code, self.text)


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated $HOME."""
    user_home = tmp_path / "home"
    user_home.mkdir()
    monkeypatch.setenv("HOME", str(user_home))
    monkeypatch.delenv("HELM_BIN", raising=False)
    return user_home


@pytest.fixture
def helm(tmp_path, monkeypatch):
    fake = FakeHelm(tmp_path)
    monkeypatch.setattr("helm_nexus_push.helm.command.subprocess.run", fake)
    return fake


@pytest.fixture
def nexus(monkeypatch):
    fake = FakeNexus()
    monkeypatch.setattr("helm_nexus_push.client.requests.put", fake)
    return fake


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Connection refused")
