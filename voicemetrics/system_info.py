"""Host system descriptors shown in the performance report."""

import os
import logging
import platform
import subprocess
from pathlib import Path
from typing import Optional

from .models.analysis import SystemInfo

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

_DMI_PRODUCT_NAME = Path("/sys/devices/virtual/dmi/id/product_name")
_CPUINFO = Path("/proc/cpuinfo")


def get_system_info() -> SystemInfo:
    """Collect device model, processor name and memory size of this host."""
    return SystemInfo(
        device=get_device_model(),
        processor=get_processor_name(),
        memory=get_memory_info(),
    )


def get_device_model() -> str:
    """Hardware model name, e.g. "MacBookPro18,3" or the DMI product name."""
    try:
        if platform.system() == "Darwin":
            return _sysctl("hw.model") or UNKNOWN
        if _DMI_PRODUCT_NAME.exists():
            return _DMI_PRODUCT_NAME.read_text().strip() or UNKNOWN
        return platform.node() or UNKNOWN
    except OSError as e:
        logger.debug(f"Could not read device model: {e}")
        return UNKNOWN


def get_processor_name() -> str:
    """CPU brand string."""
    try:
        if platform.system() == "Darwin":
            name = _sysctl("machdep.cpu.brand_string")
            if name:
                return name
        if _CPUINFO.exists():
            for line in _CPUINFO.read_text().splitlines():
                if line.startswith("model name"):
                    return line.split(":", 1)[1].strip()
    except OSError as e:
        logger.debug(f"Could not read processor name: {e}")
    return platform.processor() or platform.machine() or UNKNOWN


def get_memory_info() -> str:
    """Total physical memory, formatted like "16 GB"."""
    try:
        total = os.sysconf("SC_PAGE_SIZE") * os.sysconf("SC_PHYS_PAGES")
    except (AttributeError, ValueError, OSError) as e:
        logger.debug(f"Could not read physical memory size: {e}")
        return UNKNOWN
    return format_memory(total)


def format_memory(byte_count: int) -> str:
    """Format a byte count with binary units, e.g. 17179869184 -> "16 GB"."""
    size = float(byte_count)
    for unit in ("bytes", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if size == int(size) else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.0f} TB" if size == int(size) else f"{size:.1f} TB"


def _sysctl(name: str) -> Optional[str]:
    try:
        output = subprocess.run(
            ["sysctl", "-n", name], capture_output=True, text=True, check=True, timeout=5
        ).stdout
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"sysctl {name} failed: {e}")
        return None
    return output.strip() or None
