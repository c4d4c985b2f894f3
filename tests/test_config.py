from wego_planner import config


def test_allowed_origins_parses_comma_list(monkeypatch):
    monkeypatch.setenv("WEGO_ALLOWED_ORIGINS", "http://localhost:3000, https://wego.example ,")
    assert config.allowed_origins() == ["http://localhost:3000", "https://wego.example"]


def test_allowed_origins_defaults_to_wildcard(monkeypatch):
    monkeypatch.setenv("WEGO_ALLOWED_ORIGINS", " , ")
    assert config.allowed_origins() == ["*"]
    monkeypatch.delenv("WEGO_ALLOWED_ORIGINS")
    assert config.allowed_origins() == ["*"]


def test_catalog_path_blank_means_built_in(monkeypatch):
    monkeypatch.setenv("WEGO_CATALOG_PATH", "  ")
    assert config.catalog_path() is None
    monkeypatch.setenv("WEGO_CATALOG_PATH", "/srv/offers.json")
    assert config.catalog_path() == "/srv/offers.json"
