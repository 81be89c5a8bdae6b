# poppingpenguin

A command-line tool that shrinks image files in place and reports how much
space was saved.

Each image is re-encoded with ImageMagick's `convert` at a chosen quality
level into a temporary file next to it (`<file>.tmp`), which then replaces
the original. Afterwards one line per file, sorted by path, and an overall
summary are printed:

```
photos/a.jpg: 2.31 MB → 0.87 MB (62.34% smaller)
photos/b.jpg: 1.10 MB → 0.45 MB (59.09% smaller)

Summary: 3.41 MB → 1.32 MB (61.29% smaller)
```

## Requirements

- Python 3.10 or later
- ImageMagick, with the `convert` command on your `PATH`

## Installation

```
pip install .
```

## Usage

Shrink one or more files. Glob patterns are expanded by the tool itself, so
they can be quoted:

```
poppingpenguin shrink photo.jpg
poppingpenguin shrink "photos/*.jpg" "scans/*.png"
```

Options for `shrink`:

| Option | Default | Meaning |
| --- | --- | --- |
| `-l`, `--level` | 80 | Quality level passed to `convert -quality`; lower means a smaller file |
| `-c`, `--concurrency` | 4 | Number of images processed at the same time (at least 1) |
| `-v`, `--verbose` | | Increase verbosity; adds to the global `-v` count |

Global options:

| Option | Meaning |
| --- | --- |
| `--config PATH` | Config file to read instead of `~/.poppingpenguin.yaml` |
| `-v`, `--verbose` | Increase verbosity; repeat up to three times (`-vvv`) for debug output |

Without `-v` only errors are shown. `-v` adds warnings, `-vv` informational
messages and `-vvv` debug messages. Log messages go to standard error; the
report goes to standard output.

Files that fail to process are logged as errors and skipped; the remaining
files are still shrunk and summarised, and the command still exits with
status 0. A malformed glob pattern or a concurrency below 1 is reported as
an error and the command exits with status 1. Patterns that match nothing
produce a warning (visible with `-v`).

Print the installed version (or `development` when the package metadata is
not available):

```
poppingpenguin version
```

## Configuration

If `--config` is not given, the tool looks for `.poppingpenguin.yaml` in your
home directory. When a readable YAML mapping is found there, its path is
printed to standard error as `Using config file: <path>`. A missing,
unreadable or non-mapping file is silently ignored.

The configuration file is only loaded and reported: no setting in it
currently changes how images are shrunk. Use the command-line options above.

## Using it from Python

The pieces behind the command can be used directly:

```python
from poppingpenguin.logger import new_logger
from poppingpenguin.shrinker import ImageShrinker

shrinker = ImageShrinker(compression_level=70, concurrency_level=2,
                         logger=new_logger(1))
results = shrinker.shrink_images(["photos/*.jpg"])
for result in results:
    print(result.file_path, result.shrink_percentage())
```

- `poppingpenguin.shrinker.ImageShrinker` — `shrink_images(patterns)`,
  `expand_file_patterns(patterns)` and `process_file(file_path)`; a custom
  `processor` (any object with `process(file_path)`) and `reporter` (any
  object with `report_results(results, total_original_size, total_new_size)`)
  can be passed in.
- `poppingpenguin.processor.ImageMagickProcessor` — runs the `convert`
  command (or another command given as `command`); raises
  `ProcessingError` on failure.
- `poppingpenguin.reporter.ShrinkResult` and `ConsoleReporter` — the result
  record and the console report.
- `poppingpenguin.logger.ConsoleLogger`, `LogLevel` and `new_logger` —
  levelled logging to a stream.
- `poppingpenguin.cli.main(argv=None)` and `load_config(config_file)`.

## Running the tests

```
pip install ".[test]"
pytest
```