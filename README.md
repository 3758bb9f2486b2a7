# duikit

Core value types for user interface code, in pure Python with no runtime
dependencies.

## Modules

- `duikit.color`: colours as 32-bit ARGB integers. `color_argb` and
  `color_rgb` pack components (`color_rgb` makes them opaque).
  `color_alpha`, `color_red`, `color_green` and `color_blue` unpack them.
  `hex_to_rgb` parses `"abc"` or `"aabbcc"` strings and raises `ValueError`
  on anything else. `hsl_to_rgb` converts hue, saturation and lightness
  (each 0..1). Named constants such as `BLACK`, `WHITE`, `RED` and
  `TRANSPARENT` are provided.
- `duikit.geometry`: integer `Point`, `Size`, `Inseting` and `Rect`. A
  `Size` clamps negative dimensions to zero. `Rect` offers `inset`,
  `inset_by`, `offset`, `contains_point`, `contains`, `intersects`,
  `intersect`, `union`, `subtract`, `adjust_to_fit` and `center_point`.
- `duikit.matrix`: a 2-D affine `Matrix`, which is the identity by default.
  It has `translate`, `rotate` (radians), `scale`, `concat`,
  `concat_transform` and `invert`. `invert` raises `ValueError` for a
  singular matrix. `apply_point`, `apply_size` and `apply_rect` apply the
  matrix to geometry values and round the results down.
- `duikit.range`: a `Range` of positions with a start and an end. A range may
  run backwards. It has `length`, `min`, `max`, `intersects`, `contains` and
  `intersect`. `Range.invalid()` marks "no range". Ordering compares start
  positions only.
- `duikit.length`: `Length` values of a `LengthType` (`AUTO`, `PERCENT`,
  `FIXED` and others). They hold an integer or a float.
- `duikit.value`: a value tree made of null `Value`, `FundamentalValue`
  (bool, int or finite float) and `StringValue`, plus `ListValue` with
  indexed access, padding `set`, `insert`, `find` and `remove_value`. Typed
  accessors raise `TypeError` on a kind mismatch and `IndexError` out of
  range.
- `duikit.dictionary`: `DictionaryValue`, keyed by strings and iterated in key
  order. The `set`, `get`, `remove` and typed variants follow dotted paths
  such as `"a.b.c"`. The `*_without_path_expansion` forms take keys
  literally. Missing keys raise `KeyError`. It also provides
  `merge_dictionary` and `copy_without_empty_children`.
- `duikit.mouse_model`: `MouseModel` tracks a pointer position, hover state
  and press state. It notifies an observer's `on_model_changed` only when
  something changes. `str()` of a model gives text such as
  `"{3, 4} in, up"`.

## Example

```python
from duikit.color import color_rgb, hex_to_rgb
from duikit.geometry import Rect
from duikit.range import Range
from duikit.dictionary import DictionaryValue

assert hex_to_rgb("0f0") == color_rgb(0, 255, 0)

a = Rect(0, 0, 10, 10)
b = Rect(5, 5, 10, 10)
print(a.intersect(b))                      # Rect(5, 5, 5, 5)

print(Range(2, 8).intersect(Range(5, 12)))  # Range(5, 8)

settings = DictionaryValue()
settings.set_int("window.size.width", 400)
print(settings.get_int("window.size.width"))  # 400
```

## What it does not do

duikit holds only these value types. It does not create windows, draw,
dispatch input events or build views from layout files. You supply that
with a toolkit of your own. Such a toolkit can use these types.

## Running the tests

```
pip install -e ".[test]"
pytest
```