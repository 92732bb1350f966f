from fastapi.testclient import TestClient

from api import app

client = TestClient(app)


def test_health():
	assert client.get("/health").json() == {"status": "ok"}


def test_analyze(go_tree):
	root = go_tree({
		"a.go": """
			package a

			type T struct{}

			func (t T) M() {}
		""",
	})
	resp = client.post("/analyze", json={"root_path": str(root)})
	assert resp.status_code == 200
	doc = resp.json()
	assert {"id": "example.com/app.T", "title": "T", "entity": "struct"} in doc["components"]
	assert {"from": "example.com/app.T", "to": "example.com/app.T.M", "type": "contains"} in doc["links"]


def test_analyze_invalid_root(tmp_path):
	resp = client.post("/analyze", json={"root_path": str(tmp_path / "missing")})
	assert resp.status_code == 400


def test_analyze_unsupported_language(go_tree):
	root = go_tree({"a.go": "package a\n"})
	resp = client.post("/analyze", json={"root_path": str(root), "language": "cobol"})
	assert resp.status_code == 400


def test_analyze_parse_error(go_tree):
	root = go_tree({"a.go": "package a\n\nfunc (\n"})
	resp = client.post("/analyze", json={"root_path": str(root)})
	assert resp.status_code == 422
