# aocsolver

Solutions to Advent of Code puzzles from 2015 to 2019, together with the
pieces needed to run them: a fetcher for puzzle input, an Intcode computer,
parsing helpers and a formatter for puzzle answers.

## Solving a puzzle

Every solution module in `aocsolver.solutions` has a `Solution` class with
`year` and `day` attributes (strings such as `"2015"` and `"1"`) and `part1`
and `part2` methods. Each method takes a readable text stream holding the
puzzle input and returns the answer as a string. Malformed input raises
`ValueError` (or `LookupError` where no answer can be found).

```python
import io

from aocsolver.solutions.y2015_day01 import Solution

solution = Solution()
print(solution.part1(io.StringIO("(()(()(")))  # 3
print(solution.part2(io.StringIO("()())")))    # 5
```

Available solutions:

| Year | Modules                                     |
|------|---------------------------------------------|
| 2015 | `y2015_day01`, `y2015_day02`, `y2015_day03` |
| 2016 | `y2016_day01`, `y2016_day02`                |
| 2017 | `y2017_day01`, `y2017_day02`                |
| 2018 | `y2018_day01`, `y2018_day02`                |
| 2019 | `y2019_day01`, `y2019_day02`, `y2019_day03`, `y2019_day04` |

## Fetching input

`aocsolver.fetch.Fetcher` downloads your personal puzzle input. It takes an
HTTP client with a `requests`-style `get` method (a new `requests.Session` if
none is given) and a timeout in seconds, and needs your session cookie. It
returns the raw input as bytes.

```python
import requests

from aocsolver.fetch import Date, Fetcher, UnauthorizedError

fetcher = Fetcher(requests.Session(), 30)
try:
    data = fetcher.fetch(Date("2019", "1"), "placeholder")
except UnauthorizedError:
    print("session expired, log in again")
```

A 404 answer raises `InputNotFoundError`, a 400 answer raises
`UnauthorizedError`, and an empty body, a failed request or any other status
raises `InputError`, the base class of both. `input_url(date)` gives the
address that is requested.

## Presenting answers

`aocsolver.result.Result` holds the year, the puzzle name and both answers,
and renders them as an aligned table when turned into a string. Missing
answers are shown as `not solved`, a missing year or name as `unknown`.

```python
from aocsolver.result import Result

print(Result(year="2019", name="1", part1="34241", part2="51316"))
```

A `Result` may also carry `aocsolver.metrics.Metrics`, a list of `Metric`
entries. `Metric.elapsed()` starts a timer and `Metric.bench(func)` prepares a
benchmark; each returns a callable that records the measurement when called.

## Other building blocks

- `aocsolver.intcomputer.IntComputer` runs Intcode programs (add, multiply and
  halt); load one with `IntComputer.load(stream)`, set noun and verb with
  `input`, run with `execute` and restore memory with `reset`.
- `aocsolver.parse.parse_ints(stream, sep)` reads integers, one per line, or
  split by `sep` within each line.
- `aocsolver.name.make_name(year, puzzle)` builds a puzzle's full name.
- `aocsolver.constants` defines the `Day` and `Year` enums.
- `aocsolver.menu` holds helpers for a puzzle menu: `make_menu_items_list`,
  `searcher`, `get_url`, `is_exit`, `is_back` and `is_abort`.

## What is not included

The package is a library only. It has no command-line program or interactive
menu of its own, and no registry that looks a solution up by year and day:
pick the solution module yourself and pass it the fetched input.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.