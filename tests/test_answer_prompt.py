"""Tests for the answer readers (cli/answer_prompt.py).

``questionary`` is mocked — no real terminal is opened.
"""

from __future__ import annotations

import io
import sys
from unittest.mock import MagicMock, patch

import pytest

from timequiz.cli.answer_prompt import (
    InteractiveAnswerReader,
    LineAnswerReader,
    make_answer_reader,
)
from timequiz.exceptions import EnvironmentError


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# LineAnswerReader
# ---------------------------------------------------------------------------

class TestLineAnswerReader:
    def test_reads_lines_in_order(self) -> None:
        reader = LineAnswerReader(io.StringIO("01h00\n02h00\n"))
        assert reader("ignored") == "01h00\n"
        assert reader("ignored") == "02h00\n"

    def test_end_of_input_is_none(self) -> None:
        reader = LineAnswerReader(io.StringIO("01h00\n"))
        reader("x")
        assert reader("x") is None

    def test_blank_line_is_not_end_of_input(self) -> None:
        reader = LineAnswerReader(io.StringIO("\n"))
        assert reader("x") == "\n"

    def test_defaults_to_sys_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("05h05\n"))
        assert LineAnswerReader()("x") == "05h05\n"


# ---------------------------------------------------------------------------
# InteractiveAnswerReader
# ---------------------------------------------------------------------------

class TestInteractiveAnswerReader:
    @patch("timequiz.cli.answer_prompt._import_questionary")
    def test_returns_text(self, mock_q: MagicMock) -> None:
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.unsafe_ask.return_value = "12h30"
        mock_q.return_value = questionary_mod

        reader = InteractiveAnswerReader()
        assert reader("Answer (HHhMM):") == "12h30"
        questionary_mod.text.assert_called_once_with("Answer (HHhMM):")

    @patch("timequiz.cli.answer_prompt._import_questionary")
    def test_eof_is_none(self, mock_q: MagicMock) -> None:
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.unsafe_ask.side_effect = EOFError
        mock_q.return_value = questionary_mod

        assert InteractiveAnswerReader()("x") is None

    @patch("timequiz.cli.answer_prompt._import_questionary")
    def test_ctrl_c_propagates(self, mock_q: MagicMock) -> None:
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.unsafe_ask.side_effect = KeyboardInterrupt
        mock_q.return_value = questionary_mod

        with pytest.raises(KeyboardInterrupt):
            InteractiveAnswerReader()("x")

    def test_missing_questionary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", None)
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            InteractiveAnswerReader()


# ---------------------------------------------------------------------------
# make_answer_reader
# ---------------------------------------------------------------------------

class TestMakeAnswerReader:
    def test_pipe_gets_line_reader(self) -> None:
        assert isinstance(make_answer_reader(io.StringIO("")), LineAnswerReader)

    @patch("timequiz.cli.answer_prompt._import_questionary", return_value=MagicMock())
    def test_tty_gets_interactive_reader(self, _mock_q: MagicMock) -> None:
        assert isinstance(make_answer_reader(_TtyStream("")), InteractiveAnswerReader)

    def test_tty_without_questionary_falls_back(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setitem(sys.modules, "questionary", None)
        assert isinstance(make_answer_reader(_TtyStream("")), LineAnswerReader)
