import unittest
from unittest.mock import patch

from gy_commit.confirm.base import ConfirmationOutcome, EmptyMessageError
from gy_commit.confirm.inline import InlineEditStrategy


class TestInlineEditStrategy(unittest.TestCase):
    def resolve(self, typed, generated="feat: add foo"):
        with patch("gy_commit.confirm.inline.questionary.text") as mock_text, patch("click.echo"):
            mock_text.return_value.ask.return_value = typed
            result = InlineEditStrategy().resolve_final_message(generated)
        return result, mock_text

    def test_line_is_prefilled_with_generated_message(self) -> None:
        _, mock_text = self.resolve("feat: add foo")
        self.assertEqual(mock_text.call_args.kwargs["default"], "feat: add foo")

    def test_untouched_line_is_accept(self) -> None:
        result, _ = self.resolve("feat: add foo")
        self.assertEqual(result.outcome, ConfirmationOutcome.ACCEPTED)
        self.assertEqual(result.message, "feat: add foo")
        self.assertTrue(result.should_commit)

    def test_changed_line_is_edit(self) -> None:
        result, _ = self.resolve("  fix: handle foo  ")
        self.assertEqual(result.outcome, ConfirmationOutcome.EDITED)
        self.assertEqual(result.message, "fix: handle foo")

    def test_interrupt_is_abort(self) -> None:
        result, _ = self.resolve(None)
        self.assertEqual(result.outcome, ConfirmationOutcome.ABORTED)
        self.assertIsNone(result.message)
        self.assertFalse(result.should_commit)

    def test_empty_line_is_an_error_not_an_abort(self) -> None:
        with self.assertRaises(EmptyMessageError) as ctx:
            self.resolve("   ")
        self.assertEqual(str(ctx.exception), "Commit message cannot be empty")


if __name__ == "__main__":
    unittest.main()
