from collections import namedtuple
from unittest.mock import patch

import psutil
import pytest

from diskinfo.errors import ProviderError
from diskinfo.provider import Partition, PsutilProvider, Usage

sdiskpart = namedtuple("sdiskpart", ["device", "mountpoint", "fstype", "opts"])
sdiskusage = namedtuple("sdiskusage", ["total", "used", "free", "percent"])


class TestPsutilProvider:
    @patch("diskinfo.provider.psutil.disk_partitions")
    def test_list_partitions(self, mock_partitions):
        mock_partitions.return_value = [
            sdiskpart("/dev/sda1", "/", "ext4", "rw"),
            sdiskpart("/dev/sda2", "/boot", "vfat", "rw"),
        ]

        partitions = PsutilProvider().list_partitions()

        assert partitions == [Partition("/dev/sda1", "/", "ext4"), Partition("/dev/sda2", "/boot", "vfat")]
        mock_partitions.assert_called_once_with(all=False)

    @patch("diskinfo.provider.psutil.disk_partitions", return_value=[])
    def test_include_virtual_mounts_maps_to_all(self, mock_partitions):
        PsutilProvider().list_partitions(include_virtual_mounts=True)

        mock_partitions.assert_called_once_with(all=True)

    @patch("diskinfo.provider.os.name", "nt")
    @patch("diskinfo.provider.psutil.disk_partitions")
    def test_skips_empty_cdrom_on_windows(self, mock_partitions):
        mock_partitions.return_value = [
            sdiskpart("C:\\", "C:\\", "NTFS", "rw,fixed"),
            sdiskpart("E:\\", "E:\\", "", "cdrom"),
        ]

        partitions = PsutilProvider().list_partitions()

        assert [p.device for p in partitions] == ["C:\\"]

    @patch("diskinfo.provider.psutil.disk_partitions", side_effect=PermissionError("denied"))
    def test_list_failure_raises_provider_error(self, _mock_partitions):
        with pytest.raises(ProviderError):
            PsutilProvider().list_partitions()

    @patch("diskinfo.provider.psutil.disk_usage")
    def test_usage(self, mock_usage):
        mock_usage.return_value = sdiskusage(total=100, used=60, free=40, percent=60.0)

        assert PsutilProvider().usage("/") == Usage(total_bytes=100, free_bytes=40)
        mock_usage.assert_called_once_with("/")

    @pytest.mark.parametrize("error", [FileNotFoundError("gone"), psutil.AccessDenied()])
    def test_usage_failure_raises_provider_error(self, error):
        with patch("diskinfo.provider.psutil.disk_usage", side_effect=error):
            with pytest.raises(ProviderError, match="/mnt/stale"):
                PsutilProvider().usage("/mnt/stale")
