# rustlings

Helpers for a workspace of small Rust exercises, together with worked Python
solutions to many of those exercises.

## Requirements

- Python 3.11 or later
- For `RustAnalyzerProject.get_sysroot_src`: either the `RUST_SRC_PATH`
  environment variable or `rustc` on the `PATH`

## Installation

```
pip install .
```

## Terminal messages: `rustlings.ui`

- `warn(message)` prints a red warning line.
- `success(message)` prints a green success line.
- `no_emoji()` returns True when `NO_EMOJI` is set. The markers are then plain
  (`!` and `✓`) instead of emoji.

Colours are only used when standard output is a terminal and `NO_COLOR` is
not set.

## rust-analyzer project file: `rustlings.project`

`RustAnalyzerProject` builds the contents of a `rust-project.json` file. Each
`.rs` file becomes one `Crate` with edition 2021, no dependencies and the
`test` cfg enabled.

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()           # RUST_SRC_PATH, or derived from `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `path_to_json(path)` adds one crate if `path` ends in `.rs`.
- `to_json()` returns the compact JSON text.

## Worked solutions: `rustlings.exercises`

Each module can be imported and used as ordinary Python:

- `quizzes`: `calculate_price_of_apples`, `transformer` with the commands
  `Uppercase`, `Trim` and `Append`, and `ReportCard`
- `basics`: `bigger`, `foo_if_fizz`, `sale_price`, `is_even`, `trim_me`,
  `compose_me`, `replace_me`, `vec_loop`, `vec_map`, `maybe_icecream`
- `traits`: `append_bar` for strings and lists, `Licensed`, `SomeSoftware`,
  `OtherSoftware`, `compare_license_types`
- `collections`: `default_fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`,
  `build_scores_table`
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `DivisionError`,
  `NotDivisibleError` and `DivideByZeroError`, `result_with_list`,
  `list_of_results`, `factorial`, `Progress` and the `count_*` functions
- `models`: `Package`, `Point`, the messages `ChangeColor`, `Echo`, `Move` and
  `Quit`, and `State.process`
- `errors`: `generate_nametag_text`, `total_cost`, `CreationError`,
  `PositiveNonzeroInteger`, `ParsePosNonzeroError`, `parse_pos_nonzero`
- `records`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order`, `create_order_template`, `Wrapper`
- `smart_pointers`: the cons list `Cons`, `create_empty_list`,
  `create_non_empty_list`, and the clone-on-write `Cow` with `abs_all`
- `concurrency`: `offset_sums`, `SplitQueue`, `send_tx`, `receive_all`

```python
from rustlings.exercises.quizzes import Append, Uppercase, transformer
from rustlings.exercises.iterators import divide, DivideByZeroError

transformer([("hello", Uppercase()), ("foo", Append(1))])  # ["HELLO", "foobar"]
try:
    divide(81, 0)
except DivideByZeroError:
    ...
```

## What this package does not do

- There is no command-line tool. Nothing here compiles, runs, tests or lints
  Rust exercises.
- There is no watch mode and no listing of exercises.
- Nothing reads an `info.toml`, tracks `I AM NOT DONE` markers or resets
  exercises.
- The conversion exercises have no worked solutions here.

## Running the tests

```
pip install ".[test]"
pytest
```