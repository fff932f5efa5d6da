"""Tests for the display list visibility operations."""

import pytest

from pokedeck.display import DisplayList
from tests.helpers import make_record


@pytest.fixture
def display():
    return DisplayList([make_record(1, "bulbasaur", 45), make_record(4, "charmander", 65)])


def test_show_all_then_hide_all(display):
    display.show_all()
    assert all(r.visible for r in display)
    display.hide_all()
    assert not any(r.visible for r in display)


def test_toggle_twice_restores(display):
    assert display.toggle(4)
    assert display.get(4).visible
    assert not display.get(1).visible
    display.toggle(4)
    assert not display.get(4).visible


def test_toggle_unknown_id_is_noop(display):
    display.show_all()
    assert display.toggle(99) is False
    assert all(r.visible for r in display)


def test_replace_resets_visibility(display):
    display.show_all()
    fresh = [make_record(7, "squirtle", 43)]
    fresh[0].visible = True
    display.replace(fresh)
    assert display.ids == [7]
    assert not display.get(7).visible


def test_speed_label_masks_until_visible():
    record = make_record(1, "bulbasaur", 45)
    assert record.speed_label == "-"
    record.visible = True
    assert record.speed_label == "45"
    record.speed = None
    assert record.speed_label == "?"
