from duikit.geometry import Point
from duikit.mouse_model import MouseModel, point_to_string


class _Recorder:
    def __init__(self):
        self.changes = []

    def on_model_changed(self, model):
        self.changes.append(str(model))


def test_point_to_string():
    assert point_to_string(Point(1, 2)) == "{1, 2}"


def test_initial_string():
    assert str(MouseModel()) == "{0, 0} out, up"


def test_string_reflects_state():
    model = MouseModel()
    model.set_point(Point(3, 4))
    model.set_mouse_in(True)
    model.set_mouse_down(True)
    assert str(model) == point_to_string(Point(3, 4)) + " in, down"


def test_observer_notified_on_change():
    model = MouseModel()
    recorder = _Recorder()
    model.set_observer(recorder)
    model.set_point(Point(5, 6))
    model.set_mouse_in(True)
    assert len(recorder.changes) == 2
    assert recorder.changes[-1] == str(model)


def test_observer_not_notified_without_change():
    model = MouseModel()
    recorder = _Recorder()
    model.set_observer(recorder)
    model.set_point(Point(0, 0))
    model.set_mouse_in(False)
    model.set_mouse_down(False)
    assert recorder.changes == []


def test_no_observer_still_updates():
    model = MouseModel()
    model.set_mouse_down(True)
    assert model.mouse_down is True


def test_point_is_copied():
    model = MouseModel()
    pt = Point(1, 1)
    model.set_point(pt)
    pt.offset(5, 5)
    assert model.point == Point(1, 1)