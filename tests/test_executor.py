import logging

import pytest

from conftest import ScriptedPrompt
from easymenu.actions import action, navigation
from easymenu.context import NavigationContext
from easymenu.executor import MenuExecutor
from easymenu.levels import MenuLevel, MenuOption, QuitAction
from easymenu.settings import MenuSettings

QUIT = MenuSettings().quit_key


class RecordingQuit(QuitAction):
    def __init__(self, log):
        self.log = log

    def run(self):
        self.log.append("quit")


class Main(MenuLevel):
    label = "Main"

    def __init__(self, log):
        self.log = log

    @action("A", order=2)
    def a(self):
        self.log.append("A")

    @action("B", order=1)
    def b(self):
        self.log.append("B")

    @action("Broken", order=3)
    def broken(self):
        self.log.append("broken")
        raise RuntimeError("kaboom")

    go = navigation("Go", "Detail", order=4)

    @action("Lost", order=5)
    def lost(self):
        self.navigate(Nowhere)


class Detail(MenuLevel):
    label = ""
    back = Main
    show_exit = False

    def __init__(self, log):
        self.log = log

    @action("Same", order=1)
    def same_one(self):
        self.log.append("same one")

    @action("Same", order=1)
    def same_two(self):
        self.log.append("same two")


class Nowhere(MenuLevel):
    pass


class Extra(MenuOption):
    level = Main
    label = "Extra"
    order = 1

    def __init__(self, log):
        self.log = log

    def run(self):
        self.log.append("extra")


@pytest.fixture
def log():
    return []


@pytest.fixture
def context(log) -> NavigationContext:
    context = NavigationContext()
    main = Main(log)
    context.add_level(main)
    context.add_level(Detail(log))
    context.set_home(main)
    context.add_option(Main, Extra(log))
    context.set_quit_action(RecordingQuit(log))
    context.post_init()
    return context


def make_executor(context, renderer, *keys):
    prompt = ScriptedPrompt(*keys)
    return MenuExecutor(context, MenuSettings(), renderer, prompt), prompt


def test_display_order_follows_order_then_declaration(context, renderer):
    executor, _ = make_executor(context, renderer)

    entries = [(d.key, d.label) for d in executor.display_actions(context.current)]

    assert entries == [
        (1, "B"),
        (2, "Extra"),
        (3, "A"),
        (4, "Broken"),
        (5, "Go"),
        (6, "Lost"),
        (QUIT, "Quit"),
    ]


def test_back_comes_first_and_ties_keep_declaration_order(context, renderer):
    executor, _ = make_executor(context, renderer)
    context.navigate(Detail)

    entries = [(d.key, d.label) for d in executor.display_actions(context.current)]

    assert entries == [(1, "Back"), (2, "Same"), (3, "Same")]
    executor.display_actions(context.current)[1].action.run()
    executor.display_actions(context.current)[2].action.run()
    assert context.current.log == ["same one", "same two"]


def test_selected_action_runs_and_quit_ends_the_loop(context, renderer, log):
    executor, prompt = make_executor(context, renderer, 1, 3, QUIT)

    executor.run()

    assert log == ["B", "A", "quit"]
    assert prompt.exhausted
    assert renderer.labels == ["Main", "Main", "Main"]


def test_quit_ends_the_loop_without_running_anything_else(context, renderer, log):
    executor, prompt = make_executor(context, renderer, QUIT, 1)

    executor.run()

    assert log == ["quit"]
    assert not prompt.exhausted


def test_invalid_keys_are_reprompted(context, renderer, log):
    executor, prompt = make_executor(context, renderer, 42, -7, 2, QUIT)

    executor.run()

    assert log == ["extra", "quit"]
    assert renderer.errors == ["Please select a valid option!"] * 2
    assert len(prompt.prompts) == 4
    assert len(renderer.screens) == 2


def test_failing_action_does_not_end_the_loop(context, renderer, log, caplog):
    executor, _ = make_executor(context, renderer, 4, QUIT)

    with caplog.at_level(logging.ERROR, logger="easymenu.executor"):
        executor.run()

    assert log == ["broken", "quit"]
    assert renderer.errors == ["Error running selected action! kaboom"]
    assert renderer.labels == ["Main", "Main"]
    assert type(context.current) is Main
    assert "Error running action 'Broken'" in caplog.text


def test_navigation_to_unknown_level_is_reported_and_current_is_kept(context, renderer, log):
    executor, _ = make_executor(context, renderer, 6, QUIT)

    executor.run()

    assert type(context.current) is Main
    assert len(renderer.errors) == 1
    assert "Nowhere" in renderer.errors[0]


def test_navigation_and_back(context, renderer, log):
    executor, _ = make_executor(context, renderer, 5, 2, 1, QUIT)

    executor.run()

    assert renderer.labels == ["Main", "", "", "Main"]
    assert log == ["same one", "quit"]


def test_quit_key_is_not_offered_when_level_hides_exit(context, renderer):
    context.navigate(Detail)
    executor, _ = make_executor(context, renderer, QUIT, 1, QUIT)

    executor.run()

    assert renderer.errors == ["Please select a valid option!"]
    assert renderer.labels == ["", "Main"]


def test_failing_quit_action_still_ends_the_loop(context, renderer):
    def fail():
        raise RuntimeError("cannot quit cleanly")

    context.quit_action.run = fail
    executor, _ = make_executor(context, renderer, QUIT)

    executor.run()

    assert renderer.errors == ["Error running quit action! cannot quit cleanly"]


def test_custom_keys(context, renderer, log):
    settings = MenuSettings(first_key=10, quit_key=-1, prompt="Choice")
    prompt = ScriptedPrompt(10, -1)

    MenuExecutor(context, settings, renderer, prompt).run()

    assert log == ["B", "quit"]
    assert renderer.screens[0][1][0] == (10, "B")
    assert renderer.screens[0][1][-1] == (-1, "Quit")
    assert prompt.prompts == ["Choice", "Choice"]
