import pytest
from hostdash.dashboard import create_app


@pytest.fixture
def reports(tmp_path):
    dns = tmp_path / "DNSCache.html"
    dns.write_text("<html>dns cards</html>", encoding="utf-8")
    return {
        "DNS_OUTPUT": str(dns),
        "SYSTEM_OUTPUT": str(tmp_path / "SystemInfo.html"),
    }


@pytest.fixture
def client(reports):
    app = create_app(reports)
    app.config['TESTING'] = True
    with app.test_client() as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_index_lists_reports(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert 'href="/reports/dns"' in body
    assert "system: not generated yet" in body


def test_serves_existing_report(client):
    resp = client.get("/reports/dns")
    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    assert b"dns cards" in resp.data
    resp.close()


def test_missing_report(client):
    resp = client.get("/reports/system")
    assert resp.status_code == 404
    assert resp.get_json()["report"] == "system"


def test_unknown_report(client):
    assert client.get("/reports/passwords").status_code == 404
    assert client.get("/nope").get_json() == {"error": "not found"}
