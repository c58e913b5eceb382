"""Tests for the command dispatcher (cli/menu.py).

Handlers are replaced in the dispatch table where only routing is under
test; end-to-end sessions run the real handlers against ``tmp_path``.

Coverage:
* Every choice 1–7 dispatches exactly its mapped handler; 8 exits.
* Malformed and out-of-range input re-prompts without dispatching.
* Failed results are reported and the loop continues.
* A closed input stream ends the session.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fileman.cli import exit_codes, handlers, menu
from fileman.core.file_service import FileService
from fileman.core.models import OperationResult
from fileman.exceptions import FileOperationError, InputClosedError


def _recording_table(
    monkeypatch: pytest.MonkeyPatch, calls: list[int],
) -> None:
    for number in list(menu.HANDLERS):

        def _handler(reader, service, number=number):
            calls.append(number)
            return OperationResult.success(f"handler {number}")

        monkeypatch.setitem(menu.HANDLERS, number, _handler)


# ---------------------------------------------------------------------------
# Menu definition
# ---------------------------------------------------------------------------

class TestMenuDefinition:
    def test_eight_options_numbered_in_order(self) -> None:
        assert [o.number for o in menu.MENU_OPTIONS] == list(range(1, 9))
        assert menu.EXIT_CHOICE == 8

    def test_dispatch_table(self) -> None:
        assert menu.HANDLERS == {
            1: handlers.list_directory,
            2: handlers.copy_file,
            3: handlers.move_file,
            4: handlers.delete_file,
            5: handlers.search_files,
            6: handlers.create_directory,
            7: handlers.delete_directory,
        }

    def test_display_menu(self, capsys: pytest.CaptureFixture[str]) -> None:
        menu.display_menu()
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "--- File Manager Menu ---"
        assert lines[2:] == [
            "1. List Directory",
            "2. Copy File",
            "3. Move File",
            "4. Delete File",
            "5. Search Files",
            "6. Create Directory",
            "7. Delete Directory",
            "8. Exit",
        ]


# ---------------------------------------------------------------------------
# Choice validation
# ---------------------------------------------------------------------------

class TestReadMenuChoice:
    def test_valid_choice(self, scripted: type) -> None:
        assert menu.read_menu_choice(scripted(["3"])) == 3

    def test_surrounding_whitespace_is_ignored(self, scripted: type) -> None:
        assert menu.read_menu_choice(scripted(["  5 "])) == 5

    def test_non_integer_is_discarded(
        self, scripted: type, capsys: pytest.CaptureFixture[str],
    ) -> None:
        reader = scripted(["abc", "", "2.5", "4"])
        assert menu.read_menu_choice(reader) == 4
        assert len(reader.prompts) == 4
        out = capsys.readouterr().out
        assert out.count("Invalid input. Please enter a number between 1 and 8.") == 3

    @pytest.mark.parametrize("raw", ["0", "9", "-1", "100"])
    def test_out_of_range(
        self, raw: str, scripted: type, capsys: pytest.CaptureFixture[str],
    ) -> None:
        reader = scripted([raw, "1"])
        assert menu.read_menu_choice(reader) == 1
        assert "Invalid option. Please try again." in capsys.readouterr().out

    def test_closed_input_propagates(self, scripted: type) -> None:
        with pytest.raises(InputClosedError):
            menu.read_menu_choice(scripted(["x"]))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestDispatch:
    @pytest.mark.parametrize("choice", range(1, 8))
    def test_each_choice_runs_its_handler(
        self,
        choice: int,
        monkeypatch: pytest.MonkeyPatch,
        service: FileService,
        scripted: type,
    ) -> None:
        calls: list[int] = []
        _recording_table(monkeypatch, calls)

        result = menu.dispatch(choice, scripted([]), service)
        assert calls == [choice]
        assert result.message == f"handler {choice}"

    def test_escaping_error_becomes_failed_result(
        self, monkeypatch: pytest.MonkeyPatch, service: FileService, scripted: type,
    ) -> None:
        def _boom(reader, service):
            raise FileOperationError("disk on fire", hint="call someone")

        monkeypatch.setitem(menu.HANDLERS, 1, _boom)
        result = menu.dispatch(1, scripted([]), service)
        assert result == OperationResult.failed("disk on fire", hint="call someone")

    def test_closed_input_is_not_swallowed(
        self, service: FileService, scripted: type,
    ) -> None:
        with pytest.raises(InputClosedError):
            menu.dispatch(1, scripted([]), service)


# ---------------------------------------------------------------------------
# Result rendering
# ---------------------------------------------------------------------------

class TestRenderResult:
    def test_failure_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        menu.render_result(OperationResult.failed("Permission denied: /x", hint="Check it"))
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "An error occurred: Permission denied: /x",
            "Hint: Check it",
            "Please try again or choose a different operation.",
        ]

    def test_rejection_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        menu.render_result(OperationResult.rejected("Directory already exists."))
        assert capsys.readouterr().out == "Directory already exists.\n"


# ---------------------------------------------------------------------------
# Loop
# ---------------------------------------------------------------------------

class TestRunMenu:
    def test_exit_stops_without_further_prompts(
        self,
        service: FileService,
        scripted: type,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        reader = scripted(["8", "1", "/never/read"])
        assert menu.run_menu(reader, service) == exit_codes.SUCCESS
        assert reader.prompts == ["Enter your choice: "]
        assert reader.remaining == ["1", "/never/read"]
        out = capsys.readouterr().out
        assert out.rstrip().endswith("Thank you for using File Manager. Goodbye!")

    def test_loop_survives_failures(
        self,
        monkeypatch: pytest.MonkeyPatch,
        service: FileService,
        scripted: type,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setitem(
            menu.HANDLERS, 4, lambda reader, service: OperationResult.failed("busy"),
        )
        reader = scripted(["4", "4", "8"])
        assert menu.run_menu(reader, service) == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert out.count("An error occurred: busy") == 2
        assert out.count("--- File Manager Menu ---") == 3

    def test_invalid_input_does_not_dispatch(
        self,
        monkeypatch: pytest.MonkeyPatch,
        service: FileService,
        scripted: type,
    ) -> None:
        calls: list[int] = []
        _recording_table(monkeypatch, calls)
        menu.run_menu(scripted(["hello", "42", "8"]), service)
        assert calls == []

    def test_end_to_end_session(
        self,
        service: FileService,
        sample_tree: Path,
        scripted: type,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        reader = scripted([
            "6", str(sample_tree / "archive"),
            "3", str(sample_tree / "b.log"), str(sample_tree / "archive"),
            "3", str(sample_tree / "b.log"), str(sample_tree / "archive" / "b.log"),
            "7", str(sample_tree / "archive"),
            "4", str(sample_tree / "nothing-here"),
            "8",
        ])
        assert menu.run_menu(reader, service) == exit_codes.SUCCESS

        out = capsys.readouterr().out
        assert "Directory created successfully." in out
        assert "Destination path must include a filename." in out
        assert "File moved successfully." in out
        assert "Directory is not empty. Cannot delete." in out
        assert "File does not exist or is not a file." in out
        assert (sample_tree / "archive" / "b.log").read_text() == "bravo"

    def test_operational_failure_is_reported_and_loop_continues(
        self,
        service: FileService,
        tmp_path: Path,
        scripted: type,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        reader = scripted([
            "6", str(tmp_path / "missing" / "child"),
            "6", str(tmp_path / "ok"),
            "8",
        ])
        assert menu.run_menu(reader, service) == exit_codes.SUCCESS

        out = capsys.readouterr().out
        assert "An error occurred:" in out
        assert "Please try again or choose a different operation." in out
        assert (tmp_path / "ok").is_dir()


class TestAwkwardPaths:
    @pytest.fixture
    def undecodable_dir(self, tmp_path: Path) -> Path:
        try:
            (tmp_path / os.fsdecode(b"bad\xffname")).write_text("x")
        except (OSError, UnicodeError):
            pytest.skip("filesystem rejects non-UTF-8 file names")
        return tmp_path

    @pytest.mark.parametrize(
        "choice_lines",
        [["1", "{root}"], ["5", "{root}", "bad"]],
        ids=["list", "search"],
    )
    def test_undecodable_name_is_printed_escaped(
        self,
        service: FileService,
        undecodable_dir: Path,
        scripted: type,
        capsys: pytest.CaptureFixture[str],
        choice_lines: list[str],
    ) -> None:
        lines = [line.format(root=undecodable_dir) for line in choice_lines]
        reader = scripted([*lines, "8"])
        assert menu.run_menu(reader, service) == exit_codes.SUCCESS

        out = capsys.readouterr().out
        assert "bad\\xffname" in out
        assert "Goodbye!" in out

    def test_nul_byte_path_is_reported_and_loop_continues(
        self,
        service: FileService,
        tmp_path: Path,
        scripted: type,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        reader = scripted([
            "6", str(tmp_path / "a\x00b"),
            "6", str(tmp_path / "ok"),
            "8",
        ])
        assert menu.run_menu(reader, service) == exit_codes.SUCCESS

        out = capsys.readouterr().out
        assert "An error occurred: Invalid path: embedded null byte" in out
        assert (tmp_path / "ok").is_dir()
        assert "Goodbye!" in out
