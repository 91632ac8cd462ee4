"""Shared fixtures for the diskinfo test suite."""

from __future__ import annotations

from typing import Dict, List, Union

import pytest

from diskinfo.errors import ProviderError
from diskinfo.provider import Partition, Usage


class FakeProvider:
    """Scripted stand-in for PsutilProvider."""

    def __init__(
        self,
        partitions: List[Partition] | None = None,
        usages: Dict[str, Union[Usage, Exception]] | None = None,
        list_error: Exception | None = None,
    ) -> None:
        self.partitions = partitions or []
        self.usages = usages or {}
        self.list_error = list_error
        self.list_calls: List[bool] = []
        self.usage_calls: List[str] = []

    def list_partitions(self, include_virtual_mounts: bool = False) -> List[Partition]:
        self.list_calls.append(include_virtual_mounts)
        if self.list_error is not None:
            raise self.list_error
        return list(self.partitions)

    def usage(self, mountpoint: str) -> Usage:
        self.usage_calls.append(mountpoint)
        result = self.usages.get(mountpoint)
        if result is None:
            raise ProviderError(f"{mountpoint}: no such mountpoint")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture
def scenario_provider():
    """Two partitions on sda (the second unusable) and one on sdb."""
    return FakeProvider(
        partitions=[
            Partition("/dev/sda1", "/"),
            Partition("/dev/sda2", "/boot"),
            Partition("/dev/sdb1", "/data"),
        ],
        usages={
            "/": Usage(total_bytes=100_000_000_000, free_bytes=20_000_000_000),
            "/boot": ProviderError("/boot: permission denied"),
            "/data": Usage(total_bytes=1_000_000_000_000, free_bytes=50_000_000_000),
        },
    )
