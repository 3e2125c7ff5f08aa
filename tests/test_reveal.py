from rastervis.controller.reveal import RevealSchedule


def test_reveals_items_in_order():
    schedule = RevealSchedule(["a", "b", "c"])
    assert len(schedule) == 3
    assert [schedule.advance() for _ in range(3)] == ["a", "b", "c"]
    assert schedule.finished
    assert schedule.advance() is None
    assert schedule.revealed_count == 3


def test_revealed_prefix():
    schedule = RevealSchedule([1, 2, 3, 4])
    schedule.advance()
    schedule.advance()
    assert schedule.revealed() == [1, 2]
    assert not schedule.finished


def test_empty_schedule_is_finished_immediately():
    schedule = RevealSchedule([])
    assert schedule.finished
    assert schedule.advance() is None


def test_source_changes_do_not_affect_schedule():
    items = [1, 2]
    schedule = RevealSchedule(items)
    items.append(3)
    assert len(schedule) == 2


def test_reset_starts_over():
    schedule = RevealSchedule("xy")
    schedule.advance()
    schedule.reset()
    assert schedule.revealed_count == 0
    assert schedule.advance() == "x"
