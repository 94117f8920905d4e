import pytest

from leafpress import EngineOptions, HandlebarsEngine, SourceFile


@pytest.fixture
def site(tmp_path, monkeypatch):
    """An empty site root used as the working directory."""
    monkeypatch.chdir(tmp_path)
    for folder in ("layouts", "partials", "helpers", "pages"):
        (tmp_path / "src" / folder).mkdir(parents=True)
    return tmp_path / "src"


@pytest.fixture
def engine(site):
    return HandlebarsEngine(EngineOptions(input="src"))


@pytest.fixture
def page(site):
    return SourceFile(path=site / "pages" / "index.hbs")
