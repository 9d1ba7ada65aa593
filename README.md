# longlist

`longlist` provides pieces for rendering a long-format directory listing in
a terminal. It does not read the file system itself. You give it the details
of each file, and it returns ANSI-styled cells with their display widths. It
can then pad those cells into table rows and prefix them with tree
characters.

## Modules

- `longlist.cell`: `Colour`, `Style`, `ANSIString`, `TextCell` and
  `TextCellContents`, plus `fixed(n)` for the 256 indexed colours,
  `display_width(text)` and `render_strings(strings)`. The named colours are
  module constants: `BLACK`, `RED`, `GREEN`, `YELLOW`, `BLUE`, `PURPLE`,
  `CYAN` and `WHITE`. A `TextCell` keeps the Unicode display width of its
  contents, so columns line up even when the text has wide characters.
- `longlist.escape`: `escape(text, good, bad)` breaks a name into styled
  pieces. Control characters are written as escapes (`\n`, `\t`, `\r`,
  `\u{1b}`, ...) and painted in the `bad` style.
- `longlist.tree`: `TreeTrunk`, `TreeParams`, `TreePart` and
  `iterate_over(depth, items)`. `iterate_over` marks the last item of each
  group. These build the `├──`, `│  `, `└──` and blank parts of a tree view.
- Field renderers. Each one returns a `TextCell`, and each takes an object
  that supplies the styles it needs:
  - `longlist.size`: `render_size` with `SizeFormat.DECIMAL_BYTES`,
    `BINARY_BYTES` or `JUST_BYTES`. `DeviceIDs` shows the major and minor
    numbers of a device.
  - `longlist.blocks`: `render_blocks`
  - `longlist.inode`: `render_inode`
  - `longlist.links`: `Links`, and `NumericLocale` for thousands and
    decimal separators
  - `longlist.users`: `render_user`, `User`, `Group`, `UserFormat`, and
    `SystemUsers`, which looks users and groups up in the system database
    and caches the results
  - `longlist.groups`: `render_group`
  - `longlist.time`: `TimeFormat` (`DEFAULT_FORMAT`, `ISO_FORMAT`,
    `LONG_ISO`, `FULL_ISO`), applied to seconds since the epoch
  - `longlist.times`: `render_time`, which shows `-` when there is no
    timestamp
- `longlist.table`: `Columns` selects the columns, and `Columns.collect`
  returns them in display order. `Column` gives each column its header and
  alignment, `TimeType` and `TimeTypes` pick the timestamp columns, and
  `Table` and `TableWidths` track the widest cell in each column and pad
  rows to match.
- `longlist.details`: `Row`, `render_header`, `render_error`,
  `render_xattr`, `iterate` and `iterate_with_table`. These join the table
  cells, the tree parts and the file name into finished output lines.
- `longlist.icons`: `icon_for_file(name, extension, is_directory)` chooses a
  glyph for a file, and `iconify_style` turns a file-name style into the
  style for its icon. `Icons` lists the shared audio, image and video icons.
- `longlist.view`: `TerminalWidth` holds either a fixed width or, when
  automatic, asks the terminal that stdout is attached to for its width.

## Installing

Install the project directory with pip. The `test` extra adds pytest for the
test suite.

## Example

```python
from longlist.cell import BLUE, RED, TextCell
from longlist.details import Row, iterate_with_table
from longlist.inode import render_inode
from longlist.table import Column, Table
from longlist.tree import TreeParams, TreeTrunk

cell = TextCell.paint(BLUE.bold(), "README.md")
print(cell.width)        # 9
print(cell.strings())    # the name wrapped in ANSI escapes

trunk = TreeTrunk()
trunk.new_row(TreeParams(0, False))
parts = trunk.new_row(TreeParams(1, True))
print("".join(part.ascii_art() for part in parts))  # └──

table = Table([Column.INODE])
cells = [render_inode(1414213, RED.normal())]
table.add_widths(cells)
name = TextCell.paint(BLUE.normal(), "notes.txt")
for line in iterate_with_table(table, [Row(cells, name, TreeParams(0, False))], RED.normal()):
    print(line.strings())
```

## What it does not do

- It does not walk directories, call `stat`, or read extended attributes or
  Git state. Every value to display comes from the caller.
- It has no command-line program.
- It does not render permission bits, octal modes, file-type characters or
  Git status columns. `Column` names those columns and gives their headers
  and alignment, but the cells for them have to be built with
  `TextCell.paint` or with your own code.
- It does not arrange cells into a multi-column grid. It produces table rows
  and tree lines only.