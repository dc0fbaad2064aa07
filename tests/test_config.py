from careerprobe import config


def test_load_watchlist(tmp_path, monkeypatch):
    path = tmp_path / "watchlist.yaml"
    path.write_text(
        "companies:\n"
        "  - name: Acme\n"
        "    careers_url: https://careers.acme.com\n"
        "  - just a string\n"
        "  - name: Pinned\n"
        "    careers_url: https://jobs.lever.co/pinned\n"
        "    ats_type: lever\n"
        "    board_id: pinned\n"
    )
    monkeypatch.setattr(config, "WATCHLIST_PATH", path)
    companies = config.load_watchlist()
    assert [c["name"] for c in companies] == ["Acme", "Pinned"]
    assert companies[1]["board_id"] == "pinned"


def test_load_watchlist_missing_or_empty(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "WATCHLIST_PATH", tmp_path / "missing.yaml")
    assert config.load_watchlist() == []
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    monkeypatch.setattr(config, "WATCHLIST_PATH", empty)
    assert config.load_watchlist() == []


def test_default_headers():
    headers = config.default_headers()
    assert headers["User-Agent"].startswith("Mozilla/5.0")
    assert "text/html" in headers["Accept"]
