"""helm_nexus_push.cli.actions — What a single invocation does."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Login:
    pass


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class Push:
    chart: str


Action = Login | Logout | Push


def parse_action(token: str) -> Action:
    """`login` and `logout` are literal; anything else is a chart to push."""
    if token == "login":
        return Login()
    if token == "logout":
        return Logout()
    return Push(chart=token)
