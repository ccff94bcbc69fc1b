import base64
import hashlib

from fastapi.testclient import TestClient
from fixlatin.config import Config
from fixlatin.main import app

client = TestClient(app)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_fix_mixed_upload():
    # UTF-8 line followed by a Latin-1 line and a CP1252 line
    raw = "Montréal\n".encode("utf-8") + "Québec\n".encode("latin-1") + "“ok”\n".encode("cp1252")

    files = {"file": ("mixed.txt", raw, "text/plain")}
    r = client.post("/fix", files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["fixed"]["encoding"] == "utf-8"
    assert data["text"] == "Montréal\nQuébec\n“ok”\n"

    out_bytes = base64.b64decode(data["fixed"]["content_b64"])
    assert out_bytes.decode("utf-8") == data["text"]
    assert data["fixed"]["sha256"] == hashlib.sha256(out_bytes).hexdigest()

    report = data["report"]
    assert report["input_bytes"] == len(raw)
    assert report["output_bytes"] == len(out_bytes)
    assert report["substituted_bytes"] == 3
    assert report["cp1252_substitutions"] == 2
    assert report["changed"] is True

def test_fix_bytes_only_omits_text():
    files = {"file": ("a.bin", b"\x80", "application/octet-stream")}
    r = client.post("/fix", params={"bytes_only": "true"}, files=files)
    assert r.status_code == 200

    data = r.json()
    assert data["text"] is None
    assert base64.b64decode(data["fixed"]["content_b64"]) == b"\xe2\x82\xac"

def test_fix_unknown_option():
    files = {"file": ("a.txt", b"abc", "text/plain")}
    r = client.post("/fix", params={"frobnicate": "1"}, files=files)
    assert r.status_code == 422
    assert "frobnicate" in r.json()["detail"]

def test_fix_upload_too_large(monkeypatch):
    monkeypatch.setattr(Config, "MAX_CONTENT_LENGTH", 4)
    files = {"file": ("a.txt", b"abcdef", "text/plain")}
    r = client.post("/fix", files=files)
    assert r.status_code == 413
