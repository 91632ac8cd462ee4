"""Collectors for disk usage statistics."""

from .disks import collect_disks, normalize_device_id

__all__ = [
    "collect_disks",
    "normalize_device_id",
]
