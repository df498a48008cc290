import pytest

from easymenu.context import NavigationContext
from easymenu.errors import (
    ConfigurationError,
    MissingHomeError,
    MissingQuitActionError,
    MultipleHomeError,
    MultipleQuitError,
    NavigationError,
    UnknownLevelError,
)
from easymenu.levels import ExitAction, MenuLevel, MenuOption, QuitAction


class Home(MenuLevel):
    label = "Home"


class Sub(MenuLevel):
    label = "Sub"


class Unregistered(MenuLevel):
    pass


class Quit(QuitAction):
    pass


class OtherQuit(QuitAction):
    pass


class Greet(MenuOption):
    level = Home
    label = "Greet"


@pytest.fixture
def context() -> NavigationContext:
    context = NavigationContext()
    home = Home()
    context.add_level(home)
    context.add_level(Sub())
    context.set_home(home)
    context.set_quit_action(Quit())
    return context


def test_post_init_makes_home_current(context):
    context.post_init()

    assert context.current is context.home
    assert context.initialised


@pytest.mark.parametrize("order", [(Home, Sub), (Sub, Home)])
def test_second_home_raises_naming_both_levels(order):
    context = NavigationContext()
    first, second = order[0](), order[1]()
    context.set_home(first)

    with pytest.raises(MultipleHomeError) as e:
        context.set_home(second)

    assert order[0].__qualname__ in str(e.value)
    assert order[1].__qualname__ in str(e.value)
    assert context.home is first


def test_second_quit_action_raises_naming_both_actions():
    context = NavigationContext()
    context.set_quit_action(Quit())

    with pytest.raises(MultipleQuitError, match="Quit.*OtherQuit"):
        context.set_quit_action(OtherQuit())


def test_missing_home_is_fatal():
    context = NavigationContext()
    context.set_quit_action(Quit())

    with pytest.raises(MissingHomeError):
        context.post_init()


def test_missing_quit_action_is_fatal_when_required():
    context = NavigationContext()
    home = Home()
    context.add_level(home)
    context.set_home(home)

    with pytest.raises(MissingQuitActionError):
        context.post_init()


def test_exit_action_is_installed_when_quit_action_is_optional():
    context = NavigationContext()
    home = Home()
    context.add_level(home)
    context.set_home(home)

    context.post_init(require_quit_action=False)

    assert isinstance(context.quit_action, ExitAction)


def test_navigate_to_registered_level(context):
    context.post_init()

    context.navigate(Sub)

    assert type(context.current) is Sub
    assert context.current in context.levels


def test_navigate_to_unknown_level_leaves_current_unchanged(context):
    context.post_init()
    context.navigate(Sub)
    before = context.current

    with pytest.raises(UnknownLevelError, match="Unregistered") as e:
        context.navigate(Unregistered)

    assert e.value.target is Unregistered
    assert context.current is before


def test_navigation_matches_exact_type(context):
    class SpecialHome(Home):
        pass

    context.post_init()

    with pytest.raises(UnknownLevelError):
        context.navigate(SpecialHome)


def test_level_type_by_name(context):
    assert context.level_type("Sub") is Sub

    with pytest.raises(UnknownLevelError, match="Nowhere"):
        context.level_type("Nowhere")


def test_options_are_grouped_by_level(context):
    greet = Greet()
    context.add_option(Home, greet)

    assert context.options(Home) == [greet]
    assert context.options(Sub) == []


def test_registration_is_closed_after_post_init(context):
    context.post_init()

    with pytest.raises(ConfigurationError, match="add_level cannot be called after"):
        context.add_level(Unregistered())
    with pytest.raises(ConfigurationError):
        context.set_home(Home())
    with pytest.raises(ConfigurationError):
        context.post_init()


def test_current_before_post_init_raises():
    with pytest.raises(ConfigurationError, match="not been initialised"):
        NavigationContext().current


def test_levels_navigate_through_their_context(context):
    context.post_init()

    context.current.navigate(Sub)
    assert type(context.current) is Sub

    context.current.navigate("Home")
    assert type(context.current) is Home


def test_unregistered_level_cannot_navigate():
    with pytest.raises(NavigationError, match="not registered"):
        Unregistered().navigate(Home)
