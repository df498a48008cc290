import pytest

from easymenu.registry import ComponentRegistry


class ScriptedPrompt:
    """Answers prompts from a fixed list of keys."""

    def __init__(self, *keys: int):
        self._keys = list(keys)
        self.prompts = []

    def read_int(self, prompt: str) -> int:
        self.prompts.append(prompt)
        if not self._keys:
            raise AssertionError("Prompted for more input than was scripted")
        return self._keys.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._keys


class RecordingRenderer:
    def __init__(self):
        self.screens = []
        self.errors = []

    def display(self, label, entries):
        self.screens.append((label, list(entries)))

    def error(self, text):
        self.errors.append(text)

    @property
    def labels(self):
        return [label for label, _ in self.screens]


@pytest.fixture
def registry() -> ComponentRegistry:
    return ComponentRegistry()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()
