"""Disk usage collector."""

import logging
import platform
from typing import List, Optional, Set

from ..models import DiskUsageRecord
from ..errors import ProviderError
from ..provider import PsutilProvider

logger = logging.getLogger(__name__)

ASCII_DIGITS = "0123456789"


def normalize_device_id(device: str, system: Optional[str] = None) -> str:
    """
    Map a partition device to an id shared by all partitions of its disk.

    Windows drive letters are uppercased. Elsewhere the trailing partition
    number is stripped (/dev/sda1 -> /dev/sda). This is a naming heuristic,
    not a lookup of the real device topology.

    Args:
        device: Device as reported by the OS
        system: Platform name as returned by platform.system(), defaults to
            the running platform

    Returns:
        Normalized device id
    """
    if system is None:
        system = platform.system()

    if system == "Windows":
        return device.upper()

    return device.rstrip(ASCII_DIGITS)


def collect_disks(
    provider=None,
    include_virtual_mounts: bool = False,
    system: Optional[str] = None,
) -> List[DiskUsageRecord]:
    """
    Collect usage for each physical disk, one record per disk.

    Partitions are visited in the order the provider lists them. The first
    usable partition of a disk represents it; later partitions of the same
    disk are not queried.

    Raises:
        ProviderError: If partitions cannot be listed at all
    """
    if provider is None:
        provider = PsutilProvider()

    partitions = provider.list_partitions(include_virtual_mounts)

    disks = []
    seen: Set[str] = set()

    for partition in partitions:
        disk_id = normalize_device_id(partition.device, system)

        if disk_id in seen:
            continue

        try:
            usage = provider.usage(partition.mountpoint)
        except ProviderError as e:
            # Skip unreachable mounts, special filesystems, permission errors
            logger.debug(f"Skipping {partition.device} on {partition.mountpoint}: {e}")
            continue

        if usage.total_bytes <= 0:
            logger.debug(f"Skipping {partition.device} on {partition.mountpoint}: no capacity reported")
            continue

        disks.append(DiskUsageRecord.from_usage(
            device=disk_id,
            mountpoint=partition.mountpoint,
            total_bytes=usage.total_bytes,
            free_bytes=usage.free_bytes,
        ))
        seen.add(disk_id)

    return disks
