# ninetools

Three small command-line tools, with the logic behind each available as a
Python module. No third-party libraries are needed.

## Installation

```
pip install .
```

## btc — value a bitcoin amount on a date

```
btc input.txt
```

Rates are read from `data.csv` in the current directory, with lines of the
form `date,exchange_rate` (a `date,exchange_rate` header line is skipped, and
the first rate given for a date is kept). If `data.csv` cannot be opened, an
error is printed and every lookup then fails. The package ships no rate
database of its own.

The argument must be a single file name whose first `.txt` ends it. The file
holds lines of the form `date | value`:

```
date | value
2011-01-03 | 3
2011-01-09 | 1.2
```

For each valid line the tool prints `date => value = result` on standard
output, where `date` is the database date used: the input date itself if it is
present, otherwise the closest earlier date. Dates must be real calendar dates
in `YYYY-MM-DD` form; values must lie strictly between 0 and 1000. Each
malformed line, and each date earlier than anything in the database, is
reported in red on standard error and skipped.

From Python, `ninetools.bitcoin` offers:

- `ExchangeRates.from_file(path)` and `ExchangeRates.from_lines(lines)` to load
  rates, and `rate_on(date)` / `convert(date, amount)`, which return
  `(database_date, rate)` and `(database_date, amount * rate)` and raise
  `DateNotFoundError` when no earlier date exists;
- `validate_delim`, `validate_date`, `validate_value` and `parse_line`, which
  raise `InputFormatError` on bad input;
- `process_input(lines, rates)`, a generator yielding one output line per
  valid input line, or the exception for a line that failed;
- helpers `trim_spaces`, `is_leap_year` and `is_valid_filename`.

## rpn — evaluate Reverse Polish Notation

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

The expression is a single argument holding single-digit operands (0–9) and
the operators `+ - / *`, separated by single spaces; it must contain both
digits and operators. Arithmetic is on 32-bit integers, and division truncates
toward zero. The result is printed in green; malformed expressions and division
by zero are reported on standard error with exit status 1.

From Python, `ninetools.rpn.evaluate(expr)` returns the result and
`ninetools.rpn.validate_notation(expr)` only checks the expression; both raise
`NotationError` on bad input.

## pmergeme — Ford-Johnson merge-insertion sort

```
pmergeme 3 5 9 7 4
```

Takes at least two distinct, non-negative integers that are not already in
ascending order. For each of three containers (list, deque, tuple) it prints
the sequence before and after sorting and the time taken, in microseconds.
Invalid arguments, duplicates and an already sorted sequence are reported on
standard error with exit status 1.

From Python:

- `ninetools.pmerge.ford_johnson_sort(values)` returns a new sorted list; the
  steps are also available as `group_pairs`, `order_pairs`, `merge`,
  `merge_sort`, `build_main_chain`, `build_pending`, `insert_pending` and
  `jacobsthal`, along with `find_duplicate` and `is_sorted`;
- `ninetools.pmerge_cli.parse_arguments(args)` validates command-line
  arguments and returns the integers, raising `ArgumentError`.

## Terminal styling

`ninetools.console` holds the `Style` enum of ANSI escape sequences,
`colorize(text, *styles)`, `print_error(message, file=None)` and
`format_heading(title)`, used by all three tools.

## Running the tests

```
pip install .[test]
pytest
```