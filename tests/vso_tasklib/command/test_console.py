from __future__ import annotations

import io

import pytest

from vso_tasklib.command import TaskConsole, TaskResult, debug, set_result


def _lines(*lines: str) -> str:
    return "".join(f"{line}\n" for line in lines)


class TestTaskConsole:
    def test_set_result_succeeded(self):
        stream = io.StringIO()
        TaskConsole(stream).set_result(TaskResult.Succeeded, "success msg")

        assert stream.getvalue() == _lines(
            "##vso[task.debug]task result: Succeeded",
            "##vso[task.complete result=Succeeded;]success msg",
        )

    def test_set_result_failed(self):
        stream = io.StringIO()
        TaskConsole(stream).set_result(TaskResult.Failed, "failed msg")

        assert stream.getvalue() == _lines(
            "##vso[task.debug]task result: Failed",
            "##vso[task.complete result=Failed;]failed msg",
        )

    @pytest.mark.parametrize(
        ("code", "result"), [(0, "Succeeded"), (1, "Failed"), (3, "Failed")]
    )
    def test_exit(self, code: int, result: str):
        stream = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            TaskConsole(stream).exit(code)

        assert exc_info.value.code == code
        assert stream.getvalue() == _lines(
            f"##vso[task.debug]task result: {result}",
            f"##vso[task.complete result={result};]return code: {code}",
        )

    def test_issues(self):
        stream = io.StringIO()
        console = TaskConsole(stream)
        console.warning("careful")
        console.error("broken")

        assert stream.getvalue() == _lines(
            "##vso[task.issue type=warning;]careful",
            "##vso[task.issue type=error;]broken",
        )


def test_module_shortcuts_follow_stdout(capsys: pytest.CaptureFixture[str]):
    debug("hello")
    set_result(TaskResult.Succeeded, "ok")

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "##vso[task.debug]hello",
        "##vso[task.debug]task result: Succeeded",
        "##vso[task.complete result=Succeeded;]ok",
    ]
