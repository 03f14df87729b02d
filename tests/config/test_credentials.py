import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from gy_commit.config.credentials import CredentialProvider
from gy_commit.config.loader import Config, ConfigError, ConfigStore
from gy_commit.llm.anthropic_client import LLMError


class FakeStore:
    def __init__(self, config=None, fail_save=False):
        self.config = config
        self.fail_save = fail_save
        self.saved = []
        self.path = Path("/home/user/.gy_config.json")

    def load(self):
        return self.config

    def save(self, config):
        if self.fail_save:
            raise ConfigError("Failed to save config: read-only file system")
        self.saved.append(config)


class FakeClient:
    """Validation double: keys listed in ``valid`` pass, others fail."""

    def __init__(self, valid):
        self.valid = valid
        self.validated = []

    def __call__(self, api_key):
        self.validated.append(api_key)
        client = MagicMock()
        if api_key not in self.valid:
            client.validate_key.side_effect = LLMError("invalid x-api-key")
        return client


def prompt_with(*answers):
    answers = list(answers)
    return lambda: answers.pop(0)


def echoed(mock_echo, err=None):
    """Join everything passed to a patched ``click.echo``."""
    parts = []
    for call in mock_echo.call_args_list:
        if err is not None and call.kwargs.get("err", False) != err:
            continue
        parts.append(str(call.args[0]) if call.args else "")
    return "\n".join(parts)


class TestCredentialProvider(unittest.TestCase):
    def test_environment_wins(self) -> None:
        store = FakeStore(Config(anthropic_api_key="from-config"))
        prompt = MagicMock()
        provider = CredentialProvider(store, environ={"ANTHROPIC_API_KEY": "from-env"}, prompt=prompt)
        self.assertEqual(provider.get_api_key(), "from-env")
        prompt.assert_not_called()

    def test_empty_environment_value_is_ignored(self) -> None:
        store = FakeStore(Config(anthropic_api_key="from-config"))
        provider = CredentialProvider(store, environ={"ANTHROPIC_API_KEY": ""}, prompt=MagicMock())
        self.assertEqual(provider.get_api_key(), "from-config")

    def test_config_beats_prompt(self) -> None:
        prompt = MagicMock()
        provider = CredentialProvider(FakeStore(Config(anthropic_api_key="stored")), environ={}, prompt=prompt)
        self.assertEqual(provider.get_api_key(), "stored")
        prompt.assert_not_called()

    @patch("click.echo")
    def test_prompt_validates_and_saves(self, mock_echo) -> None:
        store = FakeStore()
        client = FakeClient(valid={"good"})
        provider = CredentialProvider(store, environ={}, client_factory=client, prompt=prompt_with("  good \n"))

        self.assertEqual(provider.get_api_key(), "good")
        self.assertEqual(client.validated, ["good"])
        self.assertEqual(store.saved, [Config(anthropic_api_key="good")])
        output = echoed(mock_echo, err=False)
        self.assertIn("Validating API key...", output)
        self.assertIn(" Valid!", output)
        self.assertIn("API key saved to /home/user/.gy_config.json", output)

    @patch("click.echo")
    def test_empty_config_key_falls_through_to_prompt(self, _mock_echo) -> None:
        store = FakeStore(Config(anthropic_api_key=""))
        provider = CredentialProvider(
            store, environ={}, client_factory=FakeClient(valid={"good"}), prompt=prompt_with("good")
        )
        self.assertEqual(provider.get_api_key(), "good")

    @patch("click.echo")
    def test_prompt_loops_until_valid(self, mock_echo) -> None:
        store = FakeStore()
        client = FakeClient(valid={"good"})
        provider = CredentialProvider(
            store, environ={}, client_factory=client, prompt=prompt_with("", "bad", "worse", "good")
        )

        self.assertEqual(provider.get_api_key(), "good")
        # the empty answer never reaches validation
        self.assertEqual(client.validated, ["bad", "worse", "good"])
        self.assertEqual(len(store.saved), 1)
        err = echoed(mock_echo, err=True)
        self.assertIn("API key cannot be empty. Please try again.", err)
        self.assertEqual(err.count("Error: invalid x-api-key"), 2)
        self.assertIn("Please try again with a valid API key.", err)
        self.assertEqual(echoed(mock_echo, err=False).count(" Invalid!"), 2)

    @patch("click.echo")
    def test_invalid_key_is_never_saved(self, _mock_echo) -> None:
        store = FakeStore()
        provider = CredentialProvider(
            store, environ={}, client_factory=FakeClient(valid={"b"}), prompt=prompt_with("a", "b")
        )
        provider.get_api_key()
        self.assertEqual(store.saved, [Config(anthropic_api_key="b")])

    @patch("click.echo")
    def test_save_failure_is_only_a_warning(self, mock_echo) -> None:
        store = FakeStore(fail_save=True)
        provider = CredentialProvider(
            store, environ={}, client_factory=FakeClient(valid={"good"}), prompt=prompt_with("good")
        )

        self.assertEqual(provider.get_api_key(), "good")
        self.assertIn("Failed to save config", echoed(mock_echo, err=True))
        self.assertNotIn("API key saved", echoed(mock_echo))

    @patch("click.echo")
    def test_unwritable_config_file_warning_text(self, mock_echo) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = ConfigStore(Path(tmp) / "missing" / ".gy_config.json")
            provider = CredentialProvider(
                store, environ={}, client_factory=FakeClient(valid={"good"}), prompt=prompt_with("good")
            )
            self.assertEqual(provider.get_api_key(), "good")

        self.assertIn("⚠ Failed to save config: ", echoed(mock_echo, err=True))


if __name__ == "__main__":
    unittest.main()
