"""Tests for scene registration and dispatch."""

import pygame
import pytest

from pygame_ui.core.scene_manager import SceneManager
from pygame_ui.scenes.base_scene import BaseScene


class RecordingScene(BaseScene):
    """Scene that records what the manager asks of it."""

    def __init__(self, consume: bool = True):
        super().__init__()
        self.consume = consume
        self.events = []
        self.updates = []
        self.entered = 0
        self.exited = 0

    def on_enter(self):
        super().on_enter()
        self.entered += 1

    def on_exit(self):
        super().on_exit()
        self.exited += 1

    def handle_event(self, event):
        self.events.append(event)
        return self.consume

    def update(self, dt):
        self.updates.append(dt)

    def draw(self, surface):
        pass


@pytest.fixture
def manager():
    return SceneManager(pygame.Surface((1, 1)))


class TestSceneManager:
    def test_register_sets_back_reference(self, manager):
        scene = RecordingScene()
        manager.register("table", scene)
        assert scene.scene_manager is manager
        assert manager.get_scene("table") is scene
        assert manager.get_scene("missing") is None

    def test_no_current_scene_initially(self, manager):
        assert manager.current_scene is None
        assert manager.handle_event(pygame.event.Event(pygame.USEREVENT)) is False
        manager.update(0.016)

    def test_change_to_enters_scene(self, manager):
        scene = RecordingScene()
        manager.register("table", scene)
        manager.change_to("table")
        assert manager.current_scene is scene
        assert scene.is_active
        assert scene.entered == 1

    def test_change_to_exits_previous(self, manager):
        first, second = RecordingScene(), RecordingScene()
        manager.register("first", first)
        manager.register("second", second)

        manager.change_to("first")
        manager.change_to("second")

        assert first.exited == 1
        assert not first.is_active
        assert second.is_active

    def test_change_to_unknown_scene_raises(self, manager):
        with pytest.raises(ValueError, match="not registered"):
            manager.change_to("nowhere")

    def test_dispatches_to_current_scene(self, manager):
        scene = RecordingScene(consume=False)
        manager.register("table", scene)
        manager.change_to("table")

        event = pygame.event.Event(pygame.USEREVENT, {"code": 1})
        assert manager.handle_event(event) is False
        manager.update(0.5)

        assert scene.events == [event]
        assert scene.updates == [0.5]

    def test_base_scene_is_abstract(self):
        with pytest.raises(TypeError):
            BaseScene()
