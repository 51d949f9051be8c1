"""Tests for settings and the console report."""
from socialpath.config import DEFAULT_CORS_ORIGINS, load_settings
from socialpath.models.main import main, run


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("SOCIALPATH_DATASET", "SOCIALPATH_LOG_LEVEL", "SOCIALPATH_CORS_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        monkeypatch.setattr("socialpath.config.load_dotenv", lambda: None)
        settings = load_settings()
        assert settings.dataset_path is None
        assert settings.log_level == "INFO"
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS

    def test_from_environment(self, monkeypatch):
        monkeypatch.setattr("socialpath.config.load_dotenv", lambda: None)
        monkeypatch.setenv("SOCIALPATH_DATASET", "/data/edges.csv")
        monkeypatch.setenv("SOCIALPATH_LOG_LEVEL", "debug")
        monkeypatch.setenv("SOCIALPATH_CORS_ORIGINS", "http://a.test, http://b.test,")
        settings = load_settings()
        assert settings.dataset_path == "/data/edges.csv"
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["http://a.test", "http://b.test"]


class TestConsoleReport:
    def test_report(self, dining_edges, capsys):
        assert run(dining_edges, "Eva", "Maxine") == 0
        out = capsys.readouterr().out
        assert "graph: 26 nodes, 26 edges" in out
        assert "node Eva has degree 5" in out
        assert "most connected: Eva (5)" in out
        assert "Eva -> Maxine" in out

    def test_one_shot_edges(self, capsys):
        edges = (e for e in [("A", "B", 1), ("B", "C", 1)])
        assert run(edges, "A", "C") == 0
        out = capsys.readouterr().out
        assert "node B has degree 2" in out
        assert "most connected: B (2)" in out
        assert "A -> B -> C" in out

    def test_no_path(self, capsys):
        assert run([("A", "B", 1), ("C", "D", 1)], "A", "D") == 0
        assert "No path from A to D." in capsys.readouterr().out

    def test_unknown_label(self, dining_edges, capsys):
        assert run(dining_edges, "Nobody", "Eva") == 1
        assert "Source 'Nobody' not found" in capsys.readouterr().out

    def test_main_with_arguments(self, monkeypatch, capsys):
        monkeypatch.setattr("socialpath.config.load_dotenv", lambda: None)
        monkeypatch.delenv("SOCIALPATH_DATASET", raising=False)
        assert main(["Maxine", "Eva"]) == 0
        assert "Maxine -> Adele -> Frances -> Eva" in capsys.readouterr().out
