# debtoolkit

Tools for reading and unpacking Debian binary packages (`.deb`), with no
dependencies outside the standard library. The package also holds a few
small, display-free models of widgets: a CPU level meter, a clock, and
helpers for splitting items into pages.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Extracting a package

```
debtoolkit-extract path/to/package.deb
```

This reads the archive and unpacks its data member into a directory named
`extract` under the current directory, creating it if needed. Extracted
files are stamped with the current time rather than the times stored in the
archive. With no argument the command prints a usage line; on any problem
it prints an error and exits with status 2.

From Python:

```python
from debtoolkit.deb import read_deb, extract_deb, DebError

try:
    package = read_deb("example.deb", 0)
    print(package.version, package.member.name, package.member.size)
    extract_deb("example.deb", "extract", 0)
except DebError as exc:
    print(f"cannot read package: {exc}")
```

- `read_deb(path, admininfo)` checks the archive's format version and member
  order and returns a `DebPackage` describing the member to unpack. Pass
  `admininfo=0` for the data archive, any other value for the control
  archive; from `2` upwards a short summary of the layout is also printed
  (available as `DebPackage.summary`). Both the current ar-based format
  (version 2.x) and the old `0.93` format are read. Problems are raised as
  `DebError`.
- `extract_deb(path, dest, admininfo)` unpacks the chosen member into `dest`
  (default `./extract`). For old-format control archives, files found under
  `.DEBIAN` or `DEBIAN` are moved up into `dest`.
- `parse_deb_version(text)` parses a `major.minor` format version into a
  `DebVersion`.
- `compressor_from_extension(extension)` maps a member name suffix such as
  `.gz` or `.xz` to a `Compressor`, or returns `None`.
- `decompress(compressor, data)` decompresses bytes with gzip, xz, lzma,
  bzip2 or none. The control member may only be uncompressed, gzip or xz.

## Other modules

- `debtoolkit.cpu`: `CpuMeter`, a 20-row, two-column bar meter. `set_sel`
  sets the level (0 to 100) and `bars()` returns the `Bar` rectangles to
  paint, each marked lit or dim.
- `debtoolkit.pages`: `paginate(items, per_page, limit)` splits items into
  pages (28 per page and at most 256 items by default), `page_names(count,
  per_page)` names them `"1"` upwards, and `drag_target_page(current_name,
  x, width, margin)` picks the previous or next page when a drag hovers near
  the left or right edge.
- `debtoolkit.clock`: `Clock` gives preferred sizes for analogue and digital
  modes, the positions of the four digits (`digit_layout`), the day or night
  dial (`face`), the hand angles in radians (`hand_angles`, returning
  `HandAngles`), and a second hand that overshoots on `tick` and settles back
  with each `animate` call. `radians` converts degrees.

## What this package does not do

It does not build, install or remove packages, does not read split
(multi-part) archives, and does not run any package scripts. The widget
modules compute sizes, layout and state only; they draw nothing on screen.