"""Run options for diskinfo."""

import argparse
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json", "html")
DEFAULT_FORMAT = "text"


@dataclass
class ReportConfig:
    """Options for a single report run."""

    format: str = DEFAULT_FORMAT
    include_virtual_mounts: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ReportConfig":
        """Build config from parsed arguments, unknown formats become text."""
        fmt = (args.format or DEFAULT_FORMAT).lower()
        if fmt not in OUTPUT_FORMATS:
            fmt = DEFAULT_FORMAT

        return cls(
            format=fmt,
            include_virtual_mounts=args.all,
            verbose=args.verbose,
        )
