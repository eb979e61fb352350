"""
Tiny host simulation: scroll a viewport over a note, keep decorations current
and "click" each decorated formula.
"""

from __future__ import annotations

from inline_dice import DecorationBuilder, DiceConfig, RollSession

NOTE = (
    "The goblin swings its scimitar: 1d20+4 to hit, 1d6+2 slashing.\n"
    "Initiative for everyone is a plain 1d20.\n"
    "The fireball deals 8к6 fire damage (save for half).\n"
)


def main() -> None:
    config = DiceConfig()
    builder = DecorationBuilder(config.style_id, config.formula_attribute)
    viewport = 60

    for start in range(0, len(NOTE), viewport // 2):
        builder.update(NOTE, [(start, start + viewport)], viewport_changed=True)
        print(f"viewport {start}-{start + viewport}: {builder.decorations.literals()}")

    builder.rebuild(NOTE, [(0, len(NOTE))])
    session = RollSession(config)
    for decoration in builder.decorations:
        notice = session.roll(decoration.attributes[config.formula_attribute])
        print(notice.text)
        if notice.css_class:
            print(f"[{notice.css_class}]")
        print()


if __name__ == "__main__":
    main()
