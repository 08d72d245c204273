# memtune

`memtune` holds the logic behind a memory-profiler front end. It has no
user interface of its own. Each piece is plain Python that you drive from
your own code or views:

- `memtune.formatting` turns byte counts and times into labels and places
  grid lines: `format_size_label`, `format_time`, `time_in_msec`,
  `size_grid_lines` and `time_grid_ticks`.
- `memtune.curve` samples usage and live-block counts, one sample per
  pixel, into polylines (`GraphEntry`, `GraphCurve`).
- `memtune.graphview` maps between time and horizontal position, and
  handles zooming and highlighting of the visible window (`GraphView`).
- `memtune.graph` handles snapshot selection, marker snapping, panning and
  the scroll bar on top of a `GraphView` (`GraphController`).
- `memtune.markers` places memory markers under the graph and clamps the
  selected time range (`MemoryMarker`, `marker_tooltips`, `GraphSelection`).
- `memtune.histogram` lays out allocation-size histogram bars, their
  tooltips, hover highlight and bin selection (`Histogram`, `HistogramBin`).
- `memtune.bigtable` keeps a scrolling window, selection and sort over a
  large row source (`BigTable`, `TableSource`).
- `memtune.heaps` lists heaps by handle and toggles the heap filtered on
  (`HeapList`, `format_heap_handle`).
- `memtune.environment` edits `KEY=VALUE` environment lists with accept and
  reject (`EnvironmentEditor`, `parse_environment`, `format_environment`).
- `memtune.highlighter` assigns a text format to every character of a C or
  C++ source line (`Highlighter`, `highlight_block`, `default_rules`).

## Installing

```
pip install memtune
```

For the test suite:

```
pip install "memtune[test]"
pytest
```

## Example

```python
from memtune.formatting import format_size_label, format_time
from memtune.environment import EnvironmentEditor

print(format_size_label(3 * 1024 * 1024))  # "3Mb"
print(format_time(75.25))                  # "1m 15s 250ms"

editor = EnvironmentEditor(["PATH=/usr/bin", "HOME=/home/user"])
editor.add("LANG", "C")
editor.accept()
print(editor.entries())  # ['PATH=/usr/bin', 'HOME=/home/user', 'LANG=C']
```

```python
from memtune.graphview import GraphView
from memtune.graph import GraphController

view = GraphView(0, 1000, 400, 300)
print(view.zoom_in())        # (167, 833)

controller = GraphController(view)
controller.select_from_times(700, 200)
print(controller.snapshot)   # (200, 700)
```

## What it does not do

`memtune` does not read capture files, compute memory statistics, resolve
symbols or locate binutils toolchains. You supply the data: graph samples
through a callable given to `GraphCurve.update`, histogram bins as
`HistogramBin` values, table rows through a `TableSource`, and heap names as
a mapping. It draws nothing and has no command-line program.