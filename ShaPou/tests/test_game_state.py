import pytest

from conftest import StubRng
from constants import MINIGAME_TICK_SECONDS
from game_state import GameModeController
from models import Bubble, FallingItem, ModeKind, Mood, Room, StatEngine


def make_controller(rng=None, **stats):
    controller = GameModeController(StatEngine(**stats), rng=rng or StubRng(0.99), dialog_timeout=3.0)
    controller.start_session()
    return controller


def go_to(controller, room):
    while controller.rooms.room != room:
        controller.room_next()


def test_initial_state_is_browsing_main_room():
    controller = make_controller()
    snap = controller.snapshot()
    assert snap.mode.kind == ModeKind.BROWSING
    assert snap.room == Room.MAIN
    assert snap.is_outside is False
    assert snap.mood == Mood.NORMAL
    assert snap.action == "walk"
    assert snap.stats == {"emotion": 1.0, "hunger": 1.0, "cleanliness": 1.0}


def test_kitchen_when_not_hungry_shows_dialog():
    controller = make_controller(hunger=0.6)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    assert controller.mode.kind == ModeKind.DIALOG_NOT_HUNGRY
    assert controller.minigame is None


def test_kitchen_when_hungry_starts_feeding():
    controller = make_controller(hunger=0.4)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    assert controller.mode.kind == ModeKind.FEEDING


def test_hunger_exactly_half_still_feeds():
    controller = make_controller(hunger=0.5)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    assert controller.mode.kind == ModeKind.FEEDING


def test_bathroom_gate():
    clean = make_controller(cleanliness=0.6)
    go_to(clean, Room.BATHROOM)
    clean.perform_room_action()
    assert clean.mode.kind == ModeKind.DIALOG_ALREADY_CLEAN

    dirty = make_controller(cleanliness=0.4)
    go_to(dirty, Room.BATHROOM)
    dirty.perform_room_action()
    assert dirty.mode.kind == ModeKind.WASHING


def test_closing_feeding_returns_to_browsing_with_no_items():
    controller = make_controller(rng=StubRng(0.0), hunger=0.4)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    game = controller.minigame
    for _ in range(5):
        controller.tick(MINIGAME_TICK_SECONDS)
    assert controller.snapshot().items

    controller.close_mini_game()
    snap = controller.snapshot()
    assert snap.mode.kind == ModeKind.BROWSING
    assert snap.room == Room.KITCHEN
    assert snap.items == ()
    assert game.items == []


def test_closed_minigame_is_not_ticked_again():
    controller = make_controller(rng=StubRng(0.0), hunger=0.4)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    game = controller.minigame
    controller.close_mini_game()
    controller.tick(1.0)
    assert game.items == []
    assert [t.name for t in controller.ticker.timers] == ["ambient-decay"]


def test_close_in_browsing_is_noop():
    controller = make_controller()
    before = controller.snapshot()
    controller.close_mini_game()
    assert controller.snapshot() == before


def test_dialog_dismissed_by_tap():
    controller = make_controller(hunger=0.9)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    controller.dismiss_dialog()
    assert controller.mode.kind == ModeKind.BROWSING
    assert controller.rooms.room == Room.KITCHEN


def test_dialog_times_out():
    controller = make_controller(cleanliness=0.9)
    go_to(controller, Room.BATHROOM)
    controller.perform_room_action()
    controller.tick(2.0)
    assert controller.mode.kind == ModeKind.DIALOG_ALREADY_CLEAN
    controller.tick(1.0)
    assert controller.mode.kind == ModeKind.BROWSING


def test_navigation_ignored_outside_browsing():
    controller = make_controller(hunger=0.9)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    controller.room_next()
    controller.go_outside()
    assert controller.rooms.room == Room.KITCHEN
    assert controller.mode.kind == ModeKind.DIALOG_NOT_HUNGRY


def test_main_room_action_goes_outside_and_back():
    controller = make_controller(emotion=0.5)
    controller.perform_room_action()
    snap = controller.snapshot()
    assert snap.is_outside is True
    assert snap.mode.is_outside is True
    assert snap.action == "back"
    assert snap.stats["emotion"] == pytest.approx(0.7)

    controller.room_next()
    assert controller.rooms.room == Room.MAIN

    controller.perform_room_action()
    assert controller.snapshot().is_outside is False


def test_go_outside_from_kitchen_is_noop():
    controller = make_controller(emotion=0.5)
    go_to(controller, Room.KITCHEN)
    controller.go_outside()
    assert controller.rooms.is_outside is False
    assert controller.stats.emotion == 0.5


def test_ambient_decay_runs_once_per_second():
    controller = make_controller()
    controller.tick(0.5)
    assert controller.stats.hunger == 1.0
    controller.tick(0.5)
    assert controller.stats.values() == pytest.approx({"emotion": 0.99, "hunger": 0.99, "cleanliness": 0.99})


def test_no_ticking_without_session():
    controller = GameModeController(StatEngine())
    controller.tick(10.0)
    assert controller.stats.hunger == 1.0


def test_end_session_cancels_everything():
    controller = make_controller(rng=StubRng(0.0), cleanliness=0.3)
    go_to(controller, Room.BATHROOM)
    controller.perform_room_action()
    game = controller.minigame
    controller.tick(MINIGAME_TICK_SECONDS)
    controller.end_session()
    assert game.bubbles == []
    assert controller.ticker.timers == []
    assert controller.mode.kind == ModeKind.BROWSING
    controller.tick(5.0)
    assert controller.stats.emotion == 1.0


def test_feeding_input_moves_paddle():
    controller = make_controller(hunger=0.4)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    controller.move_right(True)
    snap = controller.tick(MINIGAME_TICK_SECONDS)
    assert snap.player_x == pytest.approx(0.52)
    controller.move_right(False)
    snap = controller.tick(MINIGAME_TICK_SECONDS)
    assert snap.player_x == pytest.approx(0.52)


def test_feeding_catch_raises_hunger_through_controller():
    controller = make_controller(hunger=0.4)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    controller.minigame.items.append(FallingItem(99, 0.5, 0.915, True, "apple"))
    controller.tick(MINIGAME_TICK_SECONDS)
    assert controller.stats.hunger == pytest.approx(0.5)


def test_pop_bubble_only_while_washing():
    controller = make_controller(cleanliness=0.3)
    assert controller.pop_bubble(1) is False
    go_to(controller, Room.BATHROOM)
    controller.perform_room_action()
    controller.minigame.bubbles.append(Bubble(42, 0.5, 0.4, 40.0))
    assert controller.bubble_at(0.5, 0.4).id == 42
    assert controller.pop_bubble(42) is True
    assert controller.stats.cleanliness == pytest.approx(0.35)
    assert controller.pop_bubble(42) is False


def test_snapshot_entities_are_copies():
    controller = make_controller(cleanliness=0.3)
    go_to(controller, Room.BATHROOM)
    controller.perform_room_action()
    controller.minigame.bubbles.append(Bubble(1, 0.5, 0.4, 40.0))
    snap = controller.snapshot()
    snap.bubbles[0].x = 0.0
    assert controller.minigame.bubbles[0].x == 0.5


def test_minigame_started_before_session_ticks_once_session_opens():
    controller = GameModeController(StatEngine(hunger=0.4), rng=StubRng(0.99))
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    controller.move_left(True)
    controller.start_session()
    controller.tick(MINIGAME_TICK_SECONDS)
    assert controller.minigame.player_x == pytest.approx(0.48)


def test_decay_pauses_while_feeding_and_resumes_after():
    controller = make_controller(hunger=0.4)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    for _ in range(300):
        controller.tick(MINIGAME_TICK_SECONDS)
    assert controller.stats.emotion == 1.0
    assert controller.stats.hunger == pytest.approx(0.4)
    assert "ambient-decay" not in [t.name for t in controller.ticker.timers]

    controller.close_mini_game()
    controller.tick(1.0)
    assert controller.stats.emotion == pytest.approx(0.99)


def test_decay_pauses_while_washing():
    controller = make_controller(cleanliness=0.3)
    go_to(controller, Room.BATHROOM)
    controller.perform_room_action()
    controller.tick(5.0)
    assert controller.stats.emotion == 1.0
    assert controller.stats.hunger == 1.0


def test_decay_keeps_running_under_a_dialog():
    controller = make_controller(hunger=0.9)
    go_to(controller, Room.KITCHEN)
    controller.perform_room_action()
    controller.tick(1.0)
    assert controller.mode.kind == ModeKind.DIALOG_NOT_HUNGRY
    assert controller.stats.emotion == pytest.approx(0.99)


def test_new_session_starts_with_a_fresh_pet_in_the_main_room():
    controller = make_controller()
    controller.room_next()
    controller.tick(30.0)
    assert controller.stats.hunger < 1.0
    controller.end_session()

    controller.start_session()
    snap = controller.snapshot()
    assert snap.room == Room.MAIN
    assert snap.is_outside is False
    assert snap.stats == {"emotion": 1.0, "hunger": 1.0, "cleanliness": 1.0}
    controller.tick(1.0)
    assert controller.stats.hunger == pytest.approx(0.99)


def test_new_session_after_leaving_outside_is_back_indoors():
    controller = make_controller(emotion=0.2)
    controller.go_outside()
    controller.end_session()
    controller.start_session()
    assert controller.rooms.is_outside is False
    assert controller.stats.emotion == 1.0
