from __future__ import annotations

from datetime import date

import pytest

from planmacro.domain.edit_handling import EditOutcome
from planmacro.domain.macros import MacroError, MacroErrorKind
from planmacro.ui import cli


def test_expand_prints_iso_date(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["expand", "w5", "--today", "2024-03-14"])

    assert capsys.readouterr().out == "2024-03-15\n"


def test_expand_passes_today(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_expand(text: str, **kwargs: object) -> str:
        captured["text"] = text
        captured.update(kwargs)
        return "2024-01-01"

    monkeypatch.setattr(cli, "expand_macro", fake_expand)

    cli.main(["expand", "f1"])
    cli.main(["expand", "d1", "--today", "2024-02-29"])

    assert captured == {"text": "d1", "today": date(2024, 2, 29)}


def test_expand_invalid_today_exits_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["expand", "f1", "--today", "not-a-date"])

    assert excinfo.value.code == 2


def test_expand_non_macro_exits_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["expand", "tomorrow", "--today", "2024-03-14"])

    assert excinfo.value.code == 2


def test_expand_macro_error_exits_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_expand(*_: object, **__: object) -> str:
        raise MacroError(MacroErrorKind.UNDEFINED_COMMAND, "Macro 'z' is not defined")

    monkeypatch.setattr(cli, "expand_macro", fake_expand)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["expand", "z1"])

    assert excinfo.value.code == 1


def test_edit_forwards_range_and_value(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[tuple[object, ...]] = []

    def fake_handle(range_address: str, value: object = None) -> EditOutcome:
        captured.append((range_address, value))
        return EditOutcome(expanded=1)

    monkeypatch.setattr(cli, "handle_sheet_edit", fake_handle)

    cli.main(["edit", "Planner!B4", "--value", "w5"])
    cli.main(["edit", "Planner!B2:B9"])

    assert captured == [("Planner!B4", "w5"), ("Planner!B2:B9", None)]


def test_edit_failure_exits_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_handle(*_: object, **__: object) -> EditOutcome:
        return EditOutcome(error="Named range 'config' not found")

    monkeypatch.setattr(cli, "handle_sheet_edit", fake_handle)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["edit", "Planner!B4"])

    assert excinfo.value.code == 1


def test_unexpected_error_exits_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_handle(*_: object, **__: object) -> EditOutcome:
        raise RuntimeError("credentials file unreadable")

    monkeypatch.setattr(cli, "handle_sheet_edit", fake_handle)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["edit", "Planner!B4"])

    assert excinfo.value.code == 1


def test_missing_subcommand_exits_2() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
