import pytest
from hostdash import dns_cache, dns_report, file_handler, sysinfo, system_report
from hostdash.records import Record

DUMP = """Windows IP Configuration

    a.com
    ----------------------------------------
    Record Name . . . . . : a.com
    Record Type . . . . . : 1
    A (Host) Record . . . : 10.0.0.1

    b.net
    ----------------------------------------
    Record Name . . . . . : b.net
    Record Type . . . . . : 5
    CNAME Record  . . . . : a.com
"""


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.setenv("HOSTDASH_DNS_OUTPUT", str(tmp_path / "DNSCache.html"))
    monkeypatch.setenv("HOSTDASH_SYSTEM_OUTPUT", str(tmp_path / "SystemInfo.html"))
    monkeypatch.setenv("HOSTDASH_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("HOSTDASH_OPEN_REPORT", "0")
    monkeypatch.setattr(file_handler.webbrowser, "open", lambda uri: pytest.fail("viewer opened"))
    return tmp_path


@pytest.fixture
def snapshot():
    return {
        "os": {"os_name": "Linux 6.1", "host_name": "box", "boot_time": "2024-05-01 08:00:00",
               "uptime": "0 days, 4 hours, 30 minutes"},
        "cpu": {"model": "Test CPU", "cores": 4, "logical": 8, "max_clock_mhz": 3600},
        "memory": {"total_gb": 16.0, "used_gb": 14.72, "free_gb": 1.28, "percent": 92.0},
        "disks": [Record("DeviceID", "/dev/sda1", {"VolumeName": "/", "FileSystem": "ext4",
                                                   "SizeGB": "100.00", "UsedGB": "50.00",
                                                   "FreeGB": "50.00", "UsedPercent": "50.0"})],
    }


def test_dns_report_from_dump(env, capsys):
    dump = env / "dump.txt"
    dump.write_text(DUMP, encoding="utf-8")
    assert dns_report.main(["--input", str(dump)]) == 0
    html = (env / "DNSCache.html").read_text(encoding="utf-8")
    assert '<div class="card-header">a.com</div>' in html
    assert "<tr><th>CNAMERecord</th><td>a.com</td></tr>" in html
    assert "Dashboard saved" in capsys.readouterr().out


def test_dns_report_live_cache(env, monkeypatch):
    monkeypatch.setattr(dns_cache, "read_dns_cache", lambda: dns_cache._outdent(DUMP.splitlines()))
    assert dns_report.main([]) == 0
    html = (env / "DNSCache.html").read_text(encoding="utf-8")
    assert html.count('<div class="card" ') == 2


def test_dns_report_search(env):
    dump = env / "dump.txt"
    dump.write_text(DUMP, encoding="utf-8")
    assert dns_report.main(["--input", str(dump), "--search", "cname"]) == 0
    html = (env / "DNSCache.html").read_text(encoding="utf-8")
    assert 'value="cname"' in html


def test_dns_report_read_failure(env, capsys):
    assert dns_report.main(["--input", str(env / "missing.txt")]) == 1
    assert not (env / "DNSCache.html").exists()
    assert "Dashboard saved" not in capsys.readouterr().out


def test_system_report(env, monkeypatch, snapshot):
    monkeypatch.setattr(sysinfo, "collect_snapshot", lambda: snapshot)
    out = env / "custom" / "sys.html"
    assert system_report.main([str(out), "--no-open"]) == 0
    html = out.read_text(encoding="utf-8")
    assert "System Information: box" in html
    assert '<div class="card-header">/dev/sda1</div>' in html
    assert 'class="metric severity-high"' in html
    assert 'id="clock"' in html


def test_system_report_default_output(env, monkeypatch, snapshot):
    monkeypatch.setattr(sysinfo, "collect_snapshot", lambda: snapshot)
    assert system_report.main([]) == 0
    assert (env / "SystemInfo.html").is_file()


def test_system_report_collection_failure(env, monkeypatch):
    def boom():
        raise OSError("no /proc")

    monkeypatch.setattr(sysinfo, "collect_snapshot", boom)
    assert system_report.main([]) == 1
    assert not (env / "SystemInfo.html").exists()


def test_system_report_write_failure(env, monkeypatch, snapshot, capsys):
    monkeypatch.setattr(sysinfo, "collect_snapshot", lambda: snapshot)
    blocker = env / "blocker"
    blocker.write_text("x")
    assert system_report.main([str(blocker / "sys.html")]) == 1
    assert "Dashboard saved" not in capsys.readouterr().out
