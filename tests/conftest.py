from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated cwd (no .env above it) and a fresh preferences path."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('RIME_SCHEME_PLATFORM', raising=False)
    monkeypatch.delenv('RIME_SCHEME_PREFS', raising=False)
    return tmp_path / 'prefs.json'
