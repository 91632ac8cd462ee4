"""Disk usage record."""

from dataclasses import dataclass, asdict
from typing import Dict, Any

# Decimal gigabytes, as printed by disk vendors
BYTES_PER_GB = 1e9


@dataclass(frozen=True)
class DiskUsageRecord:
    """Usage of one physical disk."""

    device: str
    mountpoint: str
    total_gb: float
    free_gb: float
    free_pct: float

    @classmethod
    def from_usage(cls, device: str, mountpoint: str, total_bytes: int, free_bytes: int) -> "DiskUsageRecord":
        return cls(
            device=device,
            mountpoint=mountpoint,
            total_gb=total_bytes / BYTES_PER_GB,
            free_gb=free_bytes / BYTES_PER_GB,
            free_pct=free_bytes / total_bytes * 100,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
