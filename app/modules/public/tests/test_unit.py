def test_index_without_frontend_build(test_client):
    resp = test_client.get("/")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"


def test_unknown_path_without_frontend_build_is_not_found(test_client):
    resp = test_client.get("/some/client/route")
    assert resp.status_code == 404


def test_frontend_build_is_served_in_production_mode(test_client, tmp_path):
    (tmp_path / "index.html").write_text("<html>archive</html>")
    (tmp_path / "logo.png").write_bytes(b"not-really-a-png")

    app = test_client.application
    previous = (app.config["SERVE_FRONTEND"], app.config["FRONTEND_BUILD_DIR"])
    app.config["SERVE_FRONTEND"] = True
    app.config["FRONTEND_BUILD_DIR"] = str(tmp_path)
    try:
        resp = test_client.get("/")
        assert b"archive" in resp.data

        # Client-side routes fall back to the SPA entry point
        resp = test_client.get("/games/42")
        assert resp.status_code == 200
        assert b"archive" in resp.data

        resp = test_client.get("/logo.png")
        assert resp.data == b"not-really-a-png"

        # API routes keep precedence over the catch-all
        resp = test_client.get("/videogames")
        assert resp.is_json
    finally:
        app.config["SERVE_FRONTEND"], app.config["FRONTEND_BUILD_DIR"] = previous
