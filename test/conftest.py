import pathlib

import pytest
import yaml

TOKENS_PATH = pathlib.Path(__file__).parent / "fixtures" / "tokens.yaml"


def _load_tokens():
    with TOKENS_PATH.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def pytest_generate_tests(metafunc):
    tokens = None
    for fixture_name, key in (
        ("truthy_token", "truthy"),
        ("falsy_token", "falsy"),
        ("rejected_token", "rejected"),
    ):
        if fixture_name in metafunc.fixturenames:
            tokens = tokens or _load_tokens()
            metafunc.parametrize(fixture_name, tokens[key])


@pytest.fixture
def clean_env(monkeypatch):
    def _clear(*names: str) -> None:
        for name in names:
            # set first so monkeypatch restores the variable as absent on teardown
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)

    return _clear
