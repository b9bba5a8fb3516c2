import pytest

from suggestbox.states import StateEnum, States


def test_all_states_start_off():
    states = States()
    assert all(states.check(state) is False for state in StateEnum)


def test_enable_and_disable():
    states = States()
    states.enable(StateEnum.BLINKING)
    assert states.check(StateEnum.BLINKING) is True
    assert states.check(StateEnum.HIDDEN) is False
    states.disable(StateEnum.BLINKING)
    assert states.check(StateEnum.BLINKING) is False


def test_toggle_twice_restores():
    states = States()
    states.toggle(StateEnum.HIDDEN)
    assert states.check(StateEnum.HIDDEN) is True
    states.toggle(StateEnum.HIDDEN)
    assert states.check(StateEnum.HIDDEN) is False


def test_unknown_state_rejected():
    with pytest.raises(ValueError):
        States().enable(42)