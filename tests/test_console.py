import unittest
from unittest.mock import patch

from gy_commit.console import ProgressIndicator, print_error, print_warning


class TestConsole(unittest.TestCase):
    @patch("click.echo")
    def test_progress_indicator_success(self, mock_echo) -> None:
        with ProgressIndicator("Generating commit message"):
            pass
        self.assertIn("Generating commit message...", mock_echo.call_args_list[0].args[0])
        self.assertTrue(mock_echo.call_args_list[1].args[0].startswith("\r✓"))
        self.assertTrue(all(c.kwargs["err"] for c in mock_echo.call_args_list))

    @patch("click.echo")
    def test_progress_indicator_failure_does_not_swallow(self, mock_echo) -> None:
        with self.assertRaises(ValueError):
            with ProgressIndicator("Working"):
                raise ValueError("boom")
        self.assertTrue(mock_echo.call_args_list[-1].args[0].startswith("\r✗"))

    @patch("click.echo")
    def test_streams(self, mock_echo) -> None:
        print_warning("careful", indent=1)
        print_error("broken")
        calls = mock_echo.call_args_list
        self.assertEqual(calls[0].args[0], "  ⚠ careful")
        self.assertTrue(calls[0].kwargs["err"])
        self.assertEqual(calls[1].args[0], "✗ broken")
        self.assertTrue(calls[1].kwargs["err"])


if __name__ == "__main__":
    unittest.main()
