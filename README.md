# minitools

This package provides three small command-line tools. Each tool can also be used from Python.

- `btc` values bitcoin amounts against a database of exchange rates.
- `rpn` evaluates reverse Polish notation expressions.
- `pmergeme` sorts integers with merge-insertion (Ford-Johnson).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## btc: bitcoin wallet evaluator

```
btc input.txt
```

The command always reads its rate database from `data.csv` in the current directory. There is no option to choose a different file.

### The database

The first line of the database is a header and is skipped. Each line after it has the form `date,rate`. Lines with a bad date or a bad rate are skipped without any message.

### The input file

The first line of the input file is also a header. Each line after it has the form `YYYY-MM-DD | amount`. For every valid line, `btc` prints the date, the amount and the amount multiplied by the rate. For example:

```
2011-01-03 => 3 = 0.9
```

The rate comes from the given date. If that date is not in the database, the closest earlier date is used instead.

### Validation

A date must have the exact shape `YYYY-MM-DD` and a valid month and day. February always has 28 days, so `YYYY-02-29` is rejected.

An amount must be a number from 0 to 2147483647. Decimals are accepted.

### Errors

Problems are written to standard error, and processing continues with the next line:

- `Error: bad input => ...` for a malformed line or date;
- `Error: not a positive number.` for a negative amount;
- `Error: too large a number.` for an amount that is too large or not a number;
- `Error: no earlier date in database.` when the date comes before every date in the database.

The exit status is 1 in two cases: the argument count is wrong, or `data.csv` cannot be opened.

### From Python

```python
from minitools.exchange import BitcoinExchange, ExchangeError

exchange = BitcoinExchange()
exchange.load_database("data.csv")        # raises ExchangeError if unreadable
rate = exchange.rate_for("2011-01-03")    # exact or closest earlier date

evaluation = exchange.evaluate_line("2011-01-03 | 3")
print(evaluation.result, evaluation)

for outcome in exchange.evaluate_file("input.txt"):
    print(outcome)  # an Evaluation or an ExchangeError
```

`is_valid_date(date)` and `is_valid_value(value)` are also available as plain functions.

## rpn: reverse Polish calculator

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

Tokens are separated by whitespace. Each token must be a single digit or one of the operators `+ - * /`. Division truncates toward zero.

The command prints the result. In each of the following cases it prints an error to standard error instead and exits with status 1:

- an invalid token;
- too few operands;
- division by zero;
- more than one value left at the end.

From Python:

```python
from minitools.rpn import evaluate, RPNError

evaluate("1 2 * 2 / 2 * 2 4 - +")  # 0
```

`evaluate` raises `RPNError` on invalid input.

## pmergeme: Ford-Johnson merge-insertion sort

```
pmergeme 3 5 9 7 4
```

Each argument must consist only of digits, with a value no greater than 2147483647. An empty argument counts as 0. Any other argument makes the command print `Error` and exit with status 1.

The command prints four lines:

1. the sequence before sorting;
2. the sequence after sorting;
3. the processor time taken to sort a list, in microseconds;
4. the processor time taken to sort a deque, in microseconds.

From Python:

```python
from minitools.pmerge import ford_johnson_sort, jacobsthal_order, parse_input

ford_johnson_sort([3, 5, 9, 7, 4])      # [3, 4, 5, 7, 9]
parse_input(["3", "5", "9"])            # [3, 5, 9]
jacobsthal_order(6)                     # insertion order used by the sort
```

`ford_johnson_sort` returns a new sequence. If you pass a `deque`, you get a `deque` back. For any other input you get a `list`.