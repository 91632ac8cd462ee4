"""OS access layer: mounted partitions and their usage, backed by psutil."""

import os
from typing import List, NamedTuple

import psutil

from .errors import ProviderError


class Partition(NamedTuple):
    device: str
    mountpoint: str
    fstype: str = ""


class Usage(NamedTuple):
    total_bytes: int
    free_bytes: int


class PsutilProvider:
    """Partition listing and usage statistics from psutil."""

    def list_partitions(self, include_virtual_mounts: bool = False) -> List[Partition]:
        """
        List mounted partitions.

        Args:
            include_virtual_mounts: Also return pseudo, memory and network
                filesystems. When False only physical devices are listed.

        Returns:
            Partitions in the order the OS reports them

        Raises:
            ProviderError: If the partition table cannot be read
        """
        try:
            raw = psutil.disk_partitions(all=include_virtual_mounts)
        except (OSError, psutil.Error) as e:
            raise ProviderError(e) from e

        partitions = []
        for part in raw:
            if os.name == "nt" and ("cdrom" in part.opts or part.fstype == ""):
                # Empty CD-ROM drives may hang or pop up a GUI error
                continue
            partitions.append(Partition(part.device, part.mountpoint, part.fstype))

        return partitions

    def usage(self, mountpoint: str) -> Usage:
        """
        Get total and free bytes for a mountpoint.

        Raises:
            ProviderError: If the mountpoint is unreachable or has no usage data
        """
        try:
            stats = psutil.disk_usage(mountpoint)
        except (OSError, psutil.Error) as e:
            raise ProviderError(f"{mountpoint}: {e}") from e

        return Usage(total_bytes=stats.total, free_bytes=stats.free)
