from pathlib import Path

import pytest

from wordtally.config import load_config

_ENV_VARS = (
    "WORDTALLY_ENV",
    "WORDTALLY_LOG_LEVEL",
    "WORDTALLY_API_HOST",
    "WORDTALLY_API_PORT",
    "WORDTALLY_WORKERS",
    "WORDTALLY_DEFAULT_LIMIT",
)

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_load_dev_profile() -> None:
    config = load_config("dev", config_dir=REPO_ROOT / "configs")

    assert config.env == "dev"
    assert config.log_level == "DEBUG"
    assert config.api_host == "127.0.0.1"
    assert config.api_port == 8000
    assert config.workers == 1
    assert config.default_limit is None


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("WORDTALLY_ENV", "prod")
    monkeypatch.setenv("WORDTALLY_API_PORT", "9000")

    config = load_config(config_dir=REPO_ROOT / "configs")

    assert config.env == "prod"
    assert config.api_port == 9000
    assert config.default_limit == 100


def test_missing_profile_uses_defaults(tmp_path: Path) -> None:
    config = load_config("staging", config_dir=tmp_path)

    assert config.log_level == "INFO"
    assert config.api_port == 8000
    assert config.default_limit is None


def test_profile_ignores_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / "custom.toml").write_text('workers = 3\nunknown = "x"\n', encoding="utf-8")

    config = load_config("custom", config_dir=tmp_path)

    assert config.workers == 3


def test_invalid_integer_env(monkeypatch) -> None:
    monkeypatch.setenv("WORDTALLY_WORKERS", "many")

    with pytest.raises(ValueError, match="WORDTALLY_WORKERS must be an integer"):
        load_config("dev", config_dir=REPO_ROOT / "configs")


def test_non_positive_default_limit(monkeypatch) -> None:
    monkeypatch.setenv("WORDTALLY_DEFAULT_LIMIT", "0")

    with pytest.raises(ValueError, match="must be positive"):
        load_config("dev", config_dir=REPO_ROOT / "configs")
