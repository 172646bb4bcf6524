# scratchpad

A small borderless, resizable pad. You draw freehand lines and type notes on
one canvas, and you can save the canvas as a PNG image. It is built on pygame.

## Installation

```
pip install .
```

## Usage

```
scratchpad [--font FONT] [--folder FOLDER]
```

- `--font` is a TrueType font file for the typed text. If you leave it out,
  pygame's default font is used.
- `--folder` is the folder where saved images go. The default is `images/`.
  The folder is created when the first image is saved.

The pad opens in dark mode with white strokes and text on black.

### Drawing and typing

- Hold the left mouse button and drag to draw. Lines are anti-aliased.
  Points closer than one pixel to the previous point are not stored.
- Type to add text. It appears in the top-left corner and wraps to the
  window width. Spaces are drawn double wide. A tab is drawn as four double-wide spaces.
- Enter starts a new line. Tab adds a tab. Backspace deletes the last character.
- The keypad `+` and `-` keys make new strokes thicker or thinner. The
  thickness never goes below zero.
- The mouse cursor hides when you type and after five seconds without mouse
  movement. It shows again when the mouse moves.
- Any other key prints its key code and name on standard output.

### Shortcuts (left Ctrl)

| Keys              | Action                                                   |
|-------------------|----------------------------------------------------------|
| Ctrl+A            | Select all text (press again to cancel)                  |
| Ctrl+C            | Copy the selected text to the clipboard                  |
| Ctrl+X            | Cut the selected text to the clipboard                   |
| Ctrl+A, Backspace | Clear all strokes and text                               |
| Ctrl+D            | Switch between dark mode and light mode                  |
| Ctrl+E            | Turn eraser mode on or off                               |
| Ctrl+S            | Save the canvas as a PNG image                           |
| Ctrl+Keypad +/-   | Make the font larger or smaller (line thickness changes too) |
| Esc               | Quit                                                     |

Selected text is drawn with the text and background colours swapped.
Underscores are hidden while the text is selected. The clipboard is set
through `pygame.scrap`, where the platform supports it.

Images are saved as `__image__NNN.png`. `NNN` starts at the number of
visible entries in the folder and goes up until the name is not already
taken, so existing files are never overwritten.

## What it does not do

Eraser mode only stops the mouse from drawing. It does not remove any
strokes. The only way to remove strokes is Ctrl+A then Backspace, which
clears everything. The pad has no undo. It cannot open a saved image again,
and the text is not saved except as part of the image.

## Library use

The stroke and text parts work without a window:

```python
from scratchpad.canvas import PointStore, line_pixels
from scratchpad.text import TextBuffer, format_for_display
from scratchpad.storage import unique_name

store = PointStore(threshold=1)
store.add(0, 0, 2, True)          # returns True when the point is stored
store.add(10, 5, 2, True)
for first, second in store.segments():
    for x, y, intensity in line_pixels(first.x, first.y, second.x, second.y,
                                       first.line_thickness):
        ...

buffer = TextBuffer()
buffer.append("a")                # one character at a time; else ValueError
buffer.append("\t")
print(format_for_display(str(buffer), highlight=False))

path = unique_name("images/", "__image__")   # a free Path such as images/__image__000.png
```

- `scratchpad.canvas` contains `Point`, `PointStore` (`add`, `clear`,
  `segments`, `len()` and iteration) and `line_pixels`. `line_pixels`
  yields `(x, y, intensity)` triples for a thick line.
- `scratchpad.text` contains `TextBuffer` (`append`, `pop`, `clear`), `replace`,
  `append_string`, `format_for_display`, `collision_detection` and `Blinker`.
  `Blinker.state(now)` flips its state once per interval of milliseconds.
- `scratchpad.storage.unique_name(folder, prefix)` chooses the file name for
  a saved image.
- `scratchpad.app.ScratchPad` holds the pad's state. `handle_event` takes a
  pygame event. `render(surface)` draws onto a surface. `save_image(surface)`
  writes a PNG and returns its path. `run()` opens the window.
  `scratchpad.app.main` is the command's entry point.