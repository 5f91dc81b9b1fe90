import pytest

from media_organizer import cli
from media_organizer.core.config.settings import settings
from media_organizer.features.catalog.data.repository import SqlCatalogStore


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("MEDIA_ORGANIZER_DATABASE_URL", raising=False)
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path / "data")
    return tmp_path / "data"


def test_scan_command(media_tree, isolated_data_dir, capsys):
    assert cli.main(["scan", str(media_tree)]) == 0

    out = capsys.readouterr().out
    assert "Added 3 new items" in out
    assert (isolated_data_dir / "media.db").exists()


def test_scan_command_missing_root(tmp_path, capsys):
    assert cli.main(["scan", str(tmp_path / "missing")]) == 1
    assert "Scan failed" in capsys.readouterr().err


def test_stats_command(media_tree, capsys):
    cli.main(["scan", str(media_tree)])
    capsys.readouterr()

    assert cli.main(["stats"]) == 0
    assert capsys.readouterr().out.strip() == "total=3 video=1 image=2"


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


@pytest.fixture
def closed_stores(monkeypatch):
    """Records every catalog store the CLI closes."""
    closed = []
    original_close = SqlCatalogStore.close

    def tracking_close(self):
        closed.append(self)
        original_close(self)

    monkeypatch.setattr(SqlCatalogStore, "close", tracking_close)
    return closed


@pytest.mark.parametrize("argv", [["stats"], ["scan", "{root}"], ["scan", "{root}/missing"]])
def test_commands_release_the_database(argv, media_tree, closed_stores):
    cli.main([arg.format(root=media_tree) for arg in argv])

    assert len(closed_stores) == 1
