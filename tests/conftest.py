import logging
from typing import Iterable

import pytest

import theme


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setattr(theme, "_ENABLE", False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence of answers; EOF when exhausted."""
    def _feed(answers: Iterable[str]) -> list[str]:
        it = iter(answers)
        prompts: list[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _feed
