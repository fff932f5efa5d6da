"""Record builders shared by the test modules."""

from __future__ import annotations

from pokedeck.models import DisplayRecord


def make_record(item_id: int, name: str, speed: int | None = None) -> DisplayRecord:
    return DisplayRecord(
        id=item_id,
        name=name,
        image_url=f"https://img.example/{item_id}.png",
        speed=speed,
    )
