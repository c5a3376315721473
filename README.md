# asciicase

Upper-casing that only touches the ASCII letters `a`–`z`.

Python's `str.upper()` follows Unicode rules. For example, `"ß".upper()` gives `"SS"`. `asciicase.case.to_upper` changes only the 26 ASCII lowercase letters and leaves every other character as it is. The result is always the same length as the input.

## Installation

```
pip install asciicase
```

## Usage

```python
from asciicase.case import to_upper

to_upper("Hello, World!")   # "HELLO, WORLD!"
to_upper("1234!@#$")        # "1234!@#$"
to_upper("straße")          # "STRAßE"
to_upper("")                # ""
to_upper(None)              # None
```

If you pass `None`, you get `None` back.

## What it does not do

The package has one function, `to_upper`. It does not provide lower-casing, trimming, or any other string routines, and it has no command-line tool.

## Running the tests

```
pip install "asciicase[test]"
pytest
```