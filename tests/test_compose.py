import pytest

from ccl.compose import YOLO_ARG, compose, compose_args, compose_env, select_config
from ccl.core.config import ConfigSet
from ccl.core.errors import ConfigNotFoundError
from ccl.resolve import Invocation


@pytest.fixture
def config_set() -> ConfigSet:
    return ConfigSet.model_validate({
        'default': {'env': {'A': '2', 'B': '3'}},
        'configs': {
            'work': {'env': {'B': '4', 'C': '5'}},
            'bare': {},
        },
    })


def test_precedence_process_default_selected(config_set: ConfigSet) -> None:
    env = compose_env({'A': '1'}, config_set, 'work')

    assert env == {'A': '2', 'B': '4', 'C': '5'}


def test_unrelated_process_env_is_kept(config_set: ConfigSet) -> None:
    env = compose_env({'PATH': '/usr/bin', 'HOME': '/home/u'}, config_set, 'work')

    assert env['PATH'] == '/usr/bin'
    assert env['HOME'] == '/home/u'


@pytest.mark.parametrize('name', [None, 'default'])
def test_default_selection_applies_only_default(config_set: ConfigSet, name: str | None) -> None:
    env = compose_env({'A': '1', 'Z': '9'}, config_set, name)

    assert env == {'A': '2', 'B': '3', 'Z': '9'}


def test_selected_config_without_env(config_set: ConfigSet) -> None:
    env = compose_env({}, config_set, 'bare')

    assert env == {'A': '2', 'B': '3'}


def test_base_environment_is_not_mutated(config_set: ConfigSet) -> None:
    environ = {'A': '1'}

    compose_env(environ, config_set, 'work')

    assert environ == {'A': '1'}


def test_unknown_config_never_falls_back(config_set: ConfigSet) -> None:
    with pytest.raises(ConfigNotFoundError) as exc_info:
        compose_env({}, config_set, 'nope')

    assert exc_info.value.name == 'nope'
    assert exc_info.value.known == ['default', 'bare', 'work']
    message = str(exc_info.value)
    assert "config 'nope' not found" in message
    assert '  default' in message
    assert '  work' in message


def test_select_config(config_set: ConfigSet) -> None:
    assert select_config(config_set, None) is config_set.default
    assert select_config(config_set, 'default') is config_set.default
    assert select_config(config_set, 'work').env == {'B': '4', 'C': '5'}


def test_select_config_is_case_sensitive(config_set: ConfigSet) -> None:
    with pytest.raises(ConfigNotFoundError):
        select_config(config_set, 'Work')


def test_yolo_prepends_skip_permissions() -> None:
    args = compose_args(Invocation(yolo=True, passthrough=('chat', '--model', 'x')))

    assert args == [YOLO_ARG, 'chat', '--model', 'x']
    assert YOLO_ARG == '--dangerously-skip-permissions'


def test_args_unchanged_without_yolo() -> None:
    assert compose_args(Invocation(passthrough=('--yolo', 'chat'))) == ['--yolo', 'chat']


def test_compose(config_set: ConfigSet) -> None:
    invocation = Invocation(config_name='work', yolo=True, passthrough=('-p', 'hi'))

    launch = compose({'A': '1'}, config_set, invocation)

    assert launch.config_name == 'work'
    assert launch.env == {'A': '2', 'B': '4', 'C': '5'}
    assert launch.args == (YOLO_ARG, '-p', 'hi')


def test_compose_names_default_when_unset(config_set: ConfigSet) -> None:
    assert compose({}, config_set, Invocation()).config_name == 'default'
