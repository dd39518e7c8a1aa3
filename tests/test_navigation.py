from services.navigation import ListCursor


def cursor_over(length: int) -> ListCursor:
    cursor = ListCursor()
    cursor.resize(length)
    return cursor


def test_starts_on_first_entry():
    assert cursor_over(3).index == 0
    assert cursor_over(0).index is None


def test_move_down_wraps_to_top():
    cursor = cursor_over(3)
    cursor.index = 2
    cursor.move_down()
    assert cursor.index == 0


def test_move_up_wraps_to_bottom():
    cursor = cursor_over(3)
    cursor.move_up()
    assert cursor.index == 2


def test_moves_step_by_one():
    cursor = cursor_over(3)
    cursor.move_down()
    assert cursor.index == 1
    cursor.move_up()
    assert cursor.index == 0


def test_empty_list_moves_are_noops():
    cursor = cursor_over(0)
    cursor.move_down()
    assert cursor.index is None
    cursor.move_up()
    assert cursor.index is None
    cursor.jump_top()
    cursor.jump_bottom()
    assert cursor.index is None


def test_jumps():
    cursor = cursor_over(5)
    cursor.jump_bottom()
    assert cursor.index == 4
    cursor.jump_top()
    assert cursor.index == 0


def test_jumps_need_a_selection():
    cursor = cursor_over(5)
    cursor.index = None
    cursor.jump_bottom()
    assert cursor.index is None
    cursor.jump_top()
    assert cursor.index is None


def test_shrinking_list_clamps_on_use():
    cursor = cursor_over(5)
    cursor.jump_bottom()
    cursor.resize(2)
    assert cursor.index == 4
    assert cursor.clamped() == 1
    cursor.move_down()
    assert cursor.index == 0


def test_clearing_list_drops_selection():
    cursor = cursor_over(5)
    cursor.resize(0)
    assert cursor.clamped() is None
    assert cursor.index is None
