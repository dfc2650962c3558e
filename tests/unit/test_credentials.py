"""Credential store tests."""

import json

import pytest

from component_forge.core import CredentialStore, MissingCredentialError, Settings


@pytest.fixture
def keyless_settings(tmp_path, workspace) -> Settings:
    return Settings(
        api_key="",
        credentials_file=tmp_path / "config" / "credentials.json",
        workspace_root=workspace,
        _env_file=None,
    )


@pytest.mark.unit
def test_key_from_settings(settings):
    store = CredentialStore(settings, prompt=lambda: pytest.fail("should not prompt"))
    assert store.require() == "test-api-key"


@pytest.mark.unit
def test_key_from_file(keyless_settings):
    keyless_settings.credentials_file.parent.mkdir(parents=True)
    keyless_settings.credentials_file.write_text(json.dumps({"api_key": "stored-key"}))

    assert CredentialStore(keyless_settings).get() == "stored-key"


@pytest.mark.unit
def test_prompted_key_is_persisted(keyless_settings):
    """Test a key entered at the prompt is saved and reused."""
    calls = []

    def prompt():
        calls.append(1)
        return "  entered-key  "

    store = CredentialStore(keyless_settings, prompt=prompt)
    assert store.require() == "entered-key"
    assert store.require() == "entered-key"
    assert len(calls) == 1

    saved = json.loads(keyless_settings.credentials_file.read_text())
    assert saved == {"api_key": "entered-key"}
    assert CredentialStore(keyless_settings).get() == "entered-key"


@pytest.mark.unit
@pytest.mark.parametrize("answer", [None, "", "   "])
def test_cancelled_prompt_raises(keyless_settings, answer):
    store = CredentialStore(keyless_settings, prompt=lambda: answer)
    with pytest.raises(MissingCredentialError, match="API key is required to generate components"):
        store.require()
    assert not keyless_settings.credentials_file.exists()


@pytest.mark.unit
def test_no_prompt_raises(keyless_settings):
    with pytest.raises(MissingCredentialError, match="format descriptions"):
        CredentialStore(keyless_settings).require("format descriptions")


@pytest.mark.unit
def test_corrupt_file_is_ignored(keyless_settings):
    keyless_settings.credentials_file.parent.mkdir(parents=True)
    keyless_settings.credentials_file.write_text("{not json")

    store = CredentialStore(keyless_settings, prompt=lambda: "fresh-key")
    assert store.get() is None
    assert store.require() == "fresh-key"
