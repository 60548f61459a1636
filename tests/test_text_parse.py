from fastapi.testclient import TestClient
from cvstudio.core.pipeline import CV_PARSED
from cvstudio.core.red_flags import MISSING_NAME, NO_METRICS
from cvstudio.main import app

client = TestClient(app)

RESUME = b"""Jane Doe
jane.doe@example.com
(555) 123-4567
Skills: Python, FastAPI, SQL
Experience
Backend Engineer at Acme Corp
Education
Massachusetts Institute of Technology
B.Sc. Computer Science
"""

def test_parse_txt_extracts_profile():
    files = {"file": ("resume.txt", RESUME, "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    data = r.json()

    profile = data["profile"]
    assert profile["contact"]["full_name"] == "Jane Doe"
    assert profile["contact"]["email"] == "jane.doe@example.com"
    assert profile["contact"]["phone"] == "(555) 123-4567"
    assert profile["skills"] == ["Python", "FastAPI", "SQL"]
    assert profile["experiences"][0]["role"] == "Backend Engineer"
    assert profile["experiences"][0]["company"] == "Acme Corp"
    assert profile["education"][0]["school"] == "Massachusetts Institute of Technology"
    assert profile["education"][0]["degree"] == "B.Sc. Computer Science"

    assert data["status"] == CV_PARSED
    assert NO_METRICS in data["red_flags"]
    assert MISSING_NAME not in data["red_flags"]

def test_parse_uses_job_field():
    files = {"file": ("resume.txt", RESUME, "text/plain")}
    r = client.post("/parse", params={"job_field": "Software Engineering"}, files=files)
    assert r.status_code == 200
    assert "Software Engineering roles often expect Projects or Portfolio highlights." in r.json()["red_flags"]

def test_parse_rejects_bad_uploads():
    r = client.post("/parse", files={"file": ("resume.txt", b"", "text/plain")})
    assert r.status_code == 400

    r = client.post("/parse", files={"file": ("photo.png", b"\x89PNG", "image/png")})
    assert r.status_code == 415

    r = client.post("/parse", files={"file": ("resume.txt", b"   \n  ", "text/plain")})
    assert r.status_code == 422

    r = client.post("/parse", files={"file": ("resume.pdf", b"not really a pdf", "application/pdf")})
    assert r.status_code == 422

def test_improve_and_red_flags_without_session():
    profile = {"summary": "Engineer", "experiences": [{"role": "Dev", "bullets": ["- shipped v2"]}]}
    r = client.post("/improve", json=profile)
    assert r.status_code == 200
    improved = r.json()
    assert improved["summary"].startswith("Engineer Known for")
    assert improved["experiences"][0]["bullets"][0].endswith("shipped v2")

    r = client.post("/red-flags", json={"profile": profile, "job_field": "Academia"})
    assert r.status_code == 200
    data = r.json()
    assert data["job_field"] == "Academia"
    assert data["red_flags"][-1] == "Academia roles usually require Education details."

def test_catalog_endpoints():
    data = client.get("/job-fields").json()
    assert data["default"] == "General"
    assert len(data["fields"]) == 9
    assert data["fields"][0] == {
        "name": "General",
        "must": ["Summary", "Experience", "Skills"],
        "good": ["Projects", "Education", "Certifications"],
    }

    templates = client.get("/templates").json()
    assert [t["id"] for t in templates][:2] == ["classic", "modern"]
    assert templates[-1]["layout"] == "single"

def test_decode_failure_is_logged(caplog):
    with caplog.at_level("WARNING", logger="cvstudio.api.routes.parse"):
        r = client.post("/parse", files={"file": ("resume.pdf", b"%PDF-broken", "application/pdf")})
    assert r.status_code == 422
    record = next(rec for rec in caplog.records if rec.name == "cvstudio.api.routes.parse")
    assert "resume.pdf" in record.getMessage()
    assert record.exc_info is not None
