import io

import pytest
from rich.console import Console

from kubectl_ilogs.exceptions import PromptError
from kubectl_ilogs.prompt import select_one

LABELS = ["All", "web-2", "web-1"]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


def test_returns_label_for_index(console):
    assert select_one("Select pods:", LABELS, console=console, stream=io.StringIO("2\n")) == "web-1"


def test_lists_every_label(console):
    select_one("Select pods:", LABELS, console=console, stream=io.StringIO("0\n"))

    output = console.file.getvalue()
    assert "Select pods:" in output
    for label in LABELS:
        assert label in output


def test_invalid_answer_asks_again(console):
    answer = select_one("Select pods:", LABELS, console=console, stream=io.StringIO("7\nweb-1\n1\n"))

    assert answer == "web-2"


def test_empty_answer_picks_first(console, monkeypatch):
    monkeypatch.setattr(console, "input", lambda *args, **kwargs: "")

    assert select_one("Select pods:", LABELS, console=console) == "All"


@pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
def test_closed_or_interrupted_input(console, monkeypatch, error):
    def raise_error(*args, **kwargs):
        raise error()

    monkeypatch.setattr(console, "input", raise_error)

    with pytest.raises(PromptError):
        select_one("Select pods:", LABELS, console=console)


def test_no_labels(console):
    with pytest.raises(ValueError):
        select_one("Select pods:", [], console=console)
