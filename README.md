# melice

Building blocks for small 2D games: the game logic around sprites, written in
plain Python with no dependencies beyond the standard library.

## Installation

```
pip install melice
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "melice[test]"
pytest
```

## Modules

- `melice.geometry`: frozen `Point`, `Size` and `Rectangle` dataclasses. A
  `Rectangle`'s origin is its centre; `left()`, `right()`, `top()` and
  `bottom()` give its edges. `origin_for_size_and_alignment(origin, size,
  horizontal_alignment, vertical_alignment)` returns the centre of a rectangle
  aligned on a point, using `HorizontalAlignment` (`LEFT`, `CENTER`, `RIGHT`)
  and `VerticalAlignment` (`TOP`, `MIDDLE`, `BOTTOM`).
- `melice.hitbox`: `Hitbox`, built from a fixed `Rectangle` or a callable that
  returns one. It offers `frame()`, `collides_with_point(point)`,
  `collides_with_rectangle(rectangle)`, `collides_with_hitbox(other)`,
  `top_half_rectangle()` and `bottom_quarter_rectangle()`. `HitboxType` lists
  the kinds of hitbox.
- `melice.direction`: `Direction` (`LEFT`, `RIGHT`, `UP`, `DOWN`) with
  `value()`, `angle()`, `reverse()`, `flip()`, `axe()`, `int_point()`,
  `circle_index()` and `is_same_value(value)`; `DIRECTION_CIRCLE`, `Axe` and
  `BitmapFlip`. For sprites that aim, `animation_direction_for_angle(radians)`
  gives one of the eight `AnimationDirection` values, and
  `flip_for_angle(angle, direction)` returns an `AnimationDirectionFlip` (the
  direction to draw and the flip to apply). Only `LEFT` and `RIGHT` facing
  directions are accepted; others raise `ValueError`.
- `melice.animation`: `AnimationType`, `AnimationFrame` and
  `AnimationDefinition` (with `from_frames(frames, frequency, looping,
  loop_start=0)`, `frame_count` and `duration()`). `Animation` holds playback
  state (`frame_index`, `frame`, `speed`) and does not advance by itself;
  `HalfLoopingAnimation` plays every frame, then loops from the definition's
  `loop_start`. `animation_type_for_frame_count_and_looping(...)` and
  `animation_type_for_frame_count_looping_and_loop_start(...)` choose a type.
- `melice.shooting`: `ShootingStyleDefinition` and
  `CircularShootingStyleDefinition` describe how a sprite shoots.
  `BurstShootingStyle` and `CircularShootingStyle` return, from
  `bullet_speeds(angle)`, the speed `Point` of each bullet to fire. Both take
  an optional `random.Random` for reproducible results.
- `melice.controller`: `Buttons` flags and `Controller.from_buttons(current,
  pressed)`, which turns held and newly pressed buttons into a direction axe
  and A/B states.
- `melice.crank`: `accelerated_change(change)` amplifies fast crank turns;
  `CrankIndicator.advance(current_time)` times the "use the crank" indicator
  and returns the crank image index to show, or `None` while its text shows.
- `melice.bitmap`: `Bitmap`, one bit per pixel with an opacity mask.
  `get_pixel`, `set_pixel` and `is_opaque` work on single pixels; `fade(value)`
  and `shade(brightness)` dither with an 8x8 Bayer matrix (`BAYER_MATRIX`);
  `copy_and_shade(brightness)` leaves the original untouched; `to_bmp()`
  returns a 24-bit BMP file as bytes.
- `melice.keyvaluetable`: `KeyValueTable`, a hash table for integer keys with
  `put`, `put_and_get_old_value`, `get` (raises `KeyError`), `remove`,
  `remove_and_get_old_value`, `entries()` and `len()`, plus `[]`, `in`, `del`
  and iteration over keys.
- `melice.sha256`: an incremental `Sha256` hasher (`update(data)`,
  `final()`), `hash_data(data)` and `hashes_equal(lhs, rhs)`.
- `melice.base64`: `encode(data)` and `decode(text)`. `decode` raises
  `ValueError` when the text length is not a multiple of 4 or when the result
  would be longer than `BUFFER_LENGTH` (64) bytes.

## Example

```python
from melice.geometry import Point, Size, HorizontalAlignment, VerticalAlignment, origin_for_size_and_alignment
from melice.sha256 import hash_data

centre = origin_for_size_and_alignment(
    Point(0, 0), Size(32, 16), HorizontalAlignment.LEFT, VerticalAlignment.TOP
)
print(centre)  # Point(x=16.0, y=8.0)

print(hash_data(b"abc").hex())
```

## What it does not do

melice computes game state; it does not run a game. It has no window or
screen output, no sprite list or scene loop, no loading of images, fonts or
maps from disk, and no reading of real buttons or a real crank: callers pass
in button states, crank changes and times themselves. Of the animation kinds
named by `AnimationType`, only the still `Animation` and
`HalfLoopingAnimation` are provided, and animations are not saved or loaded.
Shooting styles return bullet speeds rather than creating bullets.