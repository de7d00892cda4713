# rustlings

A small library for a learning course built from short programming
exercises. It holds:

- `rustlings.ui` – coloured warning and success messages for the terminal;
- `rustlings.project` – a generator for `rust-project.json`, the project
  file that the rust-analyzer editor server reads;
- `rustlings.exercises` – worked solutions to the course exercises, written
  as ordinary library code.

It has no dependencies outside the standard library.

## Installing

```
pip install .
pip install .[test]   # with pytest, to run the tests
```

## Terminal messages: `rustlings.ui`

```python
from rustlings import ui

ui.warn("Compiling of exercises/intro/intro2.rs failed!")
ui.success("Successfully ran exercises/intro/intro1.rs!")
```

`warn` prints a red line starting with `⚠️ `, `success` a green line
starting with `✅`. When the environment variable `NO_EMOJI` is set
(`ui.no_emoji()` returns True), the icons become `!` and `✓`.

`bold`, `blue`, `red` and `green` wrap text in ANSI colour codes. Colours are
used when standard output is a terminal or `CLICOLOR_FORCE` is set to
something other than `0`; they are turned off by `NO_COLOR`, or by
`CLICOLOR=0`. Otherwise the text comes back unchanged.

## Editor project file: `rustlings.project`

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` asks `rustc` for the toolchain directory, prints
  `Determined toolchain: ...` and stores
  `<toolchain>/lib/rustlib/src/rust/library` as `sysroot_src`.
- `exercises_to_json(root)` walks every entry below `root` (default
  `exercises`) in sorted order and passes it to `path_to_json`.
- `path_to_json(path)` adds a `Crate` when the text after the first dot in
  the path is exactly `rs`. Each crate has edition `2021`, no dependencies
  and the `test` cfg, so the editor also analyses test code.
- `write_to_disk(path)` writes the project as compact JSON (default
  `rust-project.json`). `to_dict()` gives the same data as a dictionary.

## Worked solutions: `rustlings.exercises`

| Module | What it holds |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command` and `Append`, `ReportCard` |
| `strings` | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `errors` | `generate_nametag_text`, `parse_int`, `total_cost`, `purchase_message`, `PositiveNonzeroInteger`, `parse_pos_nonzero`, `describe_input` |
| `options` | `maybe_icecream`, `describe_number`, `drain_optionals`, `Point`, `describe_point` |
| `enums` | the messages `Move`, `Echo`, `ChangeColor`, `Quit` and the `State` that processes them |
| `generics` | `shopping_list`, `Wrapper` |
| `person` | `Person.default`, `Person.from_text` (falls back to the default) and `Person.parse` (raises `ParsePersonError`) |
| `color` | `Color.from_tuple`, `Color.from_array`, `Color.from_slice`, raising `IntoColorError` |
| `functions` | `call_me`, `sale_price`, `is_even`, `square`, `bigger`, `foo_if_fizz` |
| `iterators` | `favourite_fruits`, capitalisation helpers, `divide`, `result_with_list`, `list_of_results`, `factorial`, `Progress` counters |
| `smart_pointers` | `offset_sums` over worker threads, the cons list `Cons` / `Nil` |
| `hashmaps` | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `structs` | colour structs, `Order` and `create_order_template`, `Package` |
| `threads` | `run_sleepers`, `JobStatus` and `complete_jobs`, `Queue`, `send_tx`, `receive_all` |
| `traits` | `append_bar`, `Licensed` software, `compare_license_types`, `SomeStruct`, `some_func` |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map`, `fill_vec`, `fill_new_vec`, `get_char`, `string_uppercase` |
| `basics` | `longest`, `Book`, `circle_area`, `add_optional`, `swap` |

Failures are raised as exceptions:

```python
from rustlings.exercises.person import Person, BadLen
from rustlings.exercises.color import Color, BadLengthError
from rustlings.exercises.iterators import divide, NotDivisibleError

Person.parse("Mark,20")       # Person(name='Mark', age=20)
Person.from_text("Mark")      # Person(name='John', age=30)
Person.parse("John,32,man")   # raises BadLen
Color.from_slice([0, 0])      # raises BadLengthError
divide(81, 6)                 # raises NotDivisibleError
```

## What this package does not do

There is no command-line tool. The package does not read an exercise list,
does not compile, run or test exercise files, does not track which
exercises are done, and has no watch mode or hints. Only `rustlings.project`
starts another program (`rustc`, to find the toolchain).