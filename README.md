# myeditor

A small read-only text viewer for POSIX terminals. It opens a file and shows
it full-screen. You can move the cursor with the arrow keys, Home/End and
PageUp/PageDown. Tabs are drawn as 4-column tab stops. A reverse-video status
bar shows the file name (cut to 20 characters), the current line and the
current column. A message bar sits below it.

## Installation

```
pip install .
```

## Usage

Open a file:

```
myeditor notes.txt
```

If you give no file name, or the file cannot be read or is empty, the viewer
shows a single placeholder line, `Hello,World!`. Files are read as UTF-8;
bytes that are not valid UTF-8 are replaced. At most 1024 rows are loaded, and
a line longer than 255 characters is split over several rows.

Three screen lines are kept back for the status and message bars; the rest
show text, with `~` on lines past the end of the file.

Keys:

| Key                  | Action                                     |
|----------------------|--------------------------------------------|
| Arrow keys           | Move the cursor                            |
| Home / End           | Jump to the start / end of the line        |
| PageUp / PageDown    | Move the cursor one screen up or down      |
| Tab                  | Move the cursor to the next tab stop       |
| `q`                  | Quit                                       |

If the terminal window size cannot be read, 24 rows by 80 columns are assumed.

### Extra tools

Two smaller programs are included as well.

`myeditor-keyecho` puts the terminal in raw mode and prints every byte you
type, together with its code (non-printable bytes are shown as `?`). Press `q`
to stop:

```
myeditor-keyecho
```

`myeditor-tildes` draws an empty screen with a column of `~` markers. You can
move the cursor around it with the arrow keys. Press `q` to clear the screen
and quit. It exits with status 1 if the terminal size cannot be read:

```
myeditor-tildes
```

## What it does not do

This is a viewer only. There is no inserting or deleting of text, no saving
of files, and no search: the message bar shows the text `Ctrl-F 搜索...`,
but Ctrl-F and every other key not listed above are ignored.

## Using it from Python

```python
from myeditor.editor import Editor, render_x, render_row, load_rows
from myeditor.terminal import Key

editor = Editor(screenrows=24, screencols=80)   # terminal size; 21 rows of text
editor.open("notes.txt")
editor.process_key(Key.ARROW_DOWN)
frame = editor.refresh_screen()   # the escape-coded frame, as a str

render_x("\tab", 2)               # 5: the on-screen column of character 2
render_row("\tab", 80)            # "    ab"
```

`Editor.draw_rows()`, `Editor.draw_status_bar()` and
`Editor.draw_message_bar()` return the parts of a frame; `Editor.run(terminal)`
draws and handles keys until `q` is pressed.

`myeditor.terminal.Terminal` handles raw mode, reading bytes and keys,
writing output and the window size. `Terminal.raw_mode()` is a context
manager that puts the original terminal settings back when it exits.
`myeditor.terminal.decode_key(read_byte)` turns a stream of bytes into
ordinary byte values or `Key` members, which makes key handling easy to drive
without a real terminal.

`myeditor.keyecho.echo_keys(read_byte, write)` and
`myeditor.tildes.TildeScreen` are the pieces behind the two extra tools.

## Running the tests

```
pip install .[test]
pytest
```