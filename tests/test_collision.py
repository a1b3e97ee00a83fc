from shrinkarena.collision import CollisionManager
from shrinkarena.game_object import GameObject
from shrinkarena.geometry import Vector2D


class Box(GameObject):
    def __init__(self, x, y, size=10):
        super().__init__(Vector2D(x, y), Vector2D(size, size))
        self.init_rectangle_collision()

    def update(self, delta_time):
        self.move(self.direction * delta_time)

    def draw(self, surface):
        self._render(surface, Vector2D())


class Recorder:
    def __init__(self):
        self.pairs = []

    def handle_collision(self, a, b):
        self.pairs.append((a, b))


def make_manager():
    recorder = Recorder()
    return CollisionManager(recorder), recorder


def test_overlapping_pair_reported_once_in_order():
    manager, recorder = make_manager()
    a, b = Box(0, 0), Box(5, 5)
    manager.add_object(a)
    manager.add_object(b)
    manager.check_collisions()
    assert recorder.pairs == [(a, b)]


def test_separate_objects_not_reported():
    manager, recorder = make_manager()
    manager.add_object(Box(0, 0))
    manager.add_object(Box(100, 100))
    manager.check_collisions()
    assert recorder.pairs == []


def test_inactive_objects_skipped():
    manager, recorder = make_manager()
    a, b, c = Box(0, 0), Box(2, 2), Box(4, 4)
    b.active = False
    for obj in (a, b, c):
        manager.add_object(obj)
    manager.check_collisions()
    assert recorder.pairs == [(a, c)]


def test_all_overlapping_pairs_reported():
    manager, recorder = make_manager()
    boxes = [Box(0, 0), Box(1, 1), Box(2, 2)]
    for box in boxes:
        manager.add_object(box)
    manager.check_collisions()
    assert recorder.pairs == [
        (boxes[0], boxes[1]),
        (boxes[0], boxes[2]),
        (boxes[1], boxes[2]),
    ]


def test_remove_object():
    manager, recorder = make_manager()
    a, b = Box(0, 0), Box(5, 5)
    manager.add_object(a)
    manager.add_object(b)
    manager.remove_object(a)
    assert manager.objects == (b,)
    assert a not in manager
    manager.check_collisions()
    assert recorder.pairs == []


def test_remove_unknown_object_leaves_list_unchanged():
    manager, _ = make_manager()
    a = Box(0, 0)
    manager.add_object(a)
    manager.remove_object(Box(0, 0))
    assert manager.objects == (a,)


def test_clear_forgets_everything():
    manager, recorder = make_manager()
    manager.add_object(Box(0, 0))
    manager.add_object(Box(1, 1))
    manager.clear()
    assert len(manager) == 0
    manager.check_collisions()
    assert recorder.pairs == []


def test_without_game_manager_objects_remain_registered():
    manager = CollisionManager()
    a, b = Box(0, 0), Box(1, 1)
    manager.add_object(a)
    manager.add_object(b)
    manager.check_collisions()
    assert manager.objects == (a, b)
    assert a.active and b.active


def test_handle_collision_delegates():
    manager, recorder = make_manager()
    a, b = Box(0, 0), Box(500, 500)
    manager.handle_collision(a, b)
    assert recorder.pairs == [(a, b)]