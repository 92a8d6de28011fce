"""
MKNETWORK - System Information

Provides the facts used to compose the default user agent string.
"""

import platform
from typing import Protocol


class PlatformInfo(Protocol):
    """Protocol for user agent providers."""

    def user_agent(self) -> str:
        """Human-readable identification of the running system."""
        ...


def compose_user_agent(source: str, model: str, system_version: str, device_name: str) -> str:
    """Join the parts as '<source> <model> <system version> <device name>'."""
    return " ".join(part for part in (source, model, system_version, device_name) if part)


class SystemPlatformInfo:
    """Platform information read from the running interpreter and OS."""

    def __init__(self, source: str = "MKNetwork"):
        self._source = source

    def user_agent(self) -> str:
        system_version = f"{platform.system()} {platform.release()}".strip()
        return compose_user_agent(
            self._source,
            platform.machine(),
            system_version,
            platform.node(),
        )


class StaticPlatformInfo:
    """Fixed platform information for testing."""

    def __init__(self, user_agent: str = "MKNetwork test-model 1.0 test-device"):
        self._user_agent = user_agent

    def user_agent(self) -> str:
        return self._user_agent
