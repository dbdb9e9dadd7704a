import pytest

ENV_VARS = (
    "SNIPPET_USER_NAME",
    "SNIPPET_FACTORIAL_N",
    "SNIPPET_MAX_FACTORIAL",
    "SNIPPET_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Tests start from the defaults: no SNIPPET_* variables, no .env in reach."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
