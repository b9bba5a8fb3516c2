from suggestbox.history import UndoStack


def test_undo_empty_returns_empty_string():
    assert UndoStack().undo() == ""


def test_undo_is_last_in_first_out():
    stack = UndoStack()
    states = ["", "A", "An", "Ann"]
    for state in states:
        stack.save_state(state)
    assert len(stack) == len(states)
    assert [stack.undo() for _ in states] == list(reversed(states))
    assert len(stack) == 0
    assert stack.undo() == ""


def test_save_after_undo():
    stack = UndoStack()
    stack.save_state("Be")
    assert stack.undo() == "Be"
    stack.save_state("Cl")
    assert stack.undo() == "Cl"