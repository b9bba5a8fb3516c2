# suggestbox

A small desktop text box that suggests words as you type. Each word in a
word bank is scored by how many of its leading characters match what you
have typed so far, and the best matches are listed below the box.

## Installing

```
pip install .
```

## Running

```
suggestbox [WORD_BANK]
```

This opens a 600×760 window with one input box. Click inside the box to
activate it; clicking anywhere else deactivates it. While it is active:

- typed ASCII characters are inserted at the cursor (at most 100 characters);
- Backspace deletes the character before the cursor;
- Ctrl+Z, or Cmd+Z on macOS, undoes the last edit and puts the cursor at the
  end of the restored text. An edit that would restore an empty box is not
  undone;
- up to ten suggestions are shown under the box, and the cursor blinks every
  half second.

`WORD_BANK` is a text file of words separated by whitespace. It defaults to
`5000-baby-girl-names.txt` in the current directory. If the file cannot be
opened, an `OSError` is raised.

Text is drawn with `Futura-Medium.ttf` when that file is found in the current
directory; otherwise pygame's default font is used.

## Using the pieces

The matching logic can be used without the window:

```python
from suggestbox.words import AutoCorrect, prefix_match_length

ac = AutoCorrect("words.txt")
for word in ac.sorted_words("mar")[:5]:
    print(word.word, word.priority)

prefix_match_length("mark", "mary")   # 3
```

- `suggestbox.words` provides `read_words`, `prefix_match_length`, the
  `Word` dataclass (`word`, `priority`), `WordSort` and `AutoCorrect`.
  `sorted_words(text)` returns every word of the bank, highest priority
  first; words with equal priority keep their previous relative order.
- `suggestbox.heap.Heap` is a min-heap of words: `pop()` returns the word
  with the lowest priority and raises `IndexError` when the heap is empty.
- `suggestbox.history.UndoStack` keeps earlier input states; `undo()`
  returns the last one, or an empty string when there is none.
- `suggestbox.cursor.Cursor` tracks a character position and its blink
  state.
- `suggestbox.states` holds `StateEnum` and `States`, a set of on/off flags
  that all start off.
- `suggestbox.textinput.TextInput` models the input box: clicking, typing,
  deleting, undo and suggestions (`visible_suggestions(limit=10)`). It does
  no drawing.
- `suggestbox.app` holds `font_path`, `get_font` and `main`, which runs the
  window.

## Tests

```
pip install .[test]
pytest
```