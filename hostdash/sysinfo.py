# sysinfo.py
# Host metrics for the system dashboard, collected through psutil.
import platform
import socket
import time
from datetime import datetime

import psutil

from .logger_setup import logger
from .records import Record
from .renderer import Percentage

DISK_FIELD = "DeviceID"
GB = 1024 ** 3


def to_gb(n_bytes):
    return round(n_bytes / GB, 2)


def format_uptime(seconds):
    seconds = max(int(seconds), 0)
    days, rem = divmod(seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes = rem // 60
    return f"{days} days, {hours} hours, {minutes} minutes"


def collect_os(now=None):
    boot = psutil.boot_time()
    now = time.time() if now is None else now
    return {
        "os_name": f"{platform.system()} {platform.release()}".strip() or "Unknown",
        "host_name": socket.gethostname(),
        "boot_time": datetime.fromtimestamp(boot).strftime("%Y-%m-%d %H:%M:%S"),
        "uptime": format_uptime(now - boot),
    }


def _cpu_model(cpuinfo_path="/proc/cpuinfo"):
    name = platform.processor()
    if name and name != platform.machine():
        return name
    # platform.processor() is empty or just the arch on most Linux boxes
    try:
        with open(cpuinfo_path, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                if line.lower().startswith("model name") and ":" in line:
                    return line.split(":", 1)[1].strip()
    except OSError:
        pass
    return name or "Unknown"


def collect_cpu():
    freq = psutil.cpu_freq()
    clock = None
    if freq:
        clock = round(freq.max or freq.current)
    return {
        "model": _cpu_model(),
        "cores": psutil.cpu_count(logical=False) or 0,
        "logical": psutil.cpu_count(logical=True) or 0,
        "max_clock_mhz": clock,
    }


def collect_memory():
    vm = psutil.virtual_memory()
    used = vm.total - vm.available
    return {
        "total_gb": to_gb(vm.total),
        "used_gb": to_gb(used),
        "free_gb": to_gb(vm.available),
        "percent": round(vm.percent, 1),
    }


def _is_fixed(part):
    return bool(part.fstype) and "cdrom" not in part.opts.lower()


def collect_disks():
    """One Record per fixed volume. Unreadable volumes are logged and skipped."""
    disks = []
    for part in psutil.disk_partitions(all=False):
        if not _is_fixed(part):
            continue
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (PermissionError, OSError) as e:
            logger.warning("Disk usage unavailable", extra={"extra": {"device": part.device, "error": str(e)}})
            continue
        disks.append(Record(DISK_FIELD, part.device, {
            "VolumeName": part.mountpoint,
            "FileSystem": part.fstype,
            "SizeGB": f"{to_gb(usage.total):.2f}",
            "UsedGB": f"{to_gb(usage.used):.2f}",
            "FreeGB": f"{to_gb(usage.free):.2f}",
            "UsedPercent": f"{usage.percent:.1f}",
        }))
    return disks


def collect_snapshot():
    """Everything the system dashboard shows. psutil errors propagate."""
    snapshot = {
        "os": collect_os(),
        "cpu": collect_cpu(),
        "memory": collect_memory(),
        "disks": collect_disks(),
    }
    logger.info("System metrics collected", extra={"extra": {
        "host": snapshot["os"]["host_name"],
        "mem": snapshot["memory"]["percent"],
        "disks": len(snapshot["disks"]),
    }})
    return snapshot


def summary_metrics(snapshot):
    os_info = snapshot["os"]
    cpu = snapshot["cpu"]
    mem = snapshot["memory"]
    metrics = {
        "Operating system": os_info["os_name"],
        "Host name": os_info["host_name"],
        "Boot time": os_info["boot_time"],
        "Uptime": os_info["uptime"],
        "CPU": cpu["model"],
        "Cores / logical": f"{cpu['cores']} / {cpu['logical']}",
        "Max clock": f"{cpu['max_clock_mhz']} MHz" if cpu["max_clock_mhz"] else "N/A",
        "RAM total / used / free": f"{mem['total_gb']:.2f} / {mem['used_gb']:.2f} / {mem['free_gb']:.2f} GB",
        "RAM usage": Percentage(mem["percent"]),
    }
    for disk in snapshot["disks"]:
        metrics[f"Disk {disk.name} usage"] = Percentage(disk["UsedPercent"])
    return metrics
