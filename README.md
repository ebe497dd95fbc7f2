# diagkit

diagkit adds structured diagnostic data to Python exceptions. You declare the
data on a dataclass, and the decorated class gets methods that return it:

- `code()`: a diagnostic code
- `severity()`: a `diagkit.severity.Severity`
- `help()`: help text
- `url()`: a documentation URL
- `labels()`: labelled source spans (`diagkit.label.LabeledSpan`)
- `related()`: related diagnostics
- `source_code()`: the source code the spans point into
- `diagnostic_source()`: the diagnostic this one was caused by

Each method returns `None` when nothing was declared for it.

## Installation

```
pip install diagkit
```

## Declaring a diagnostic

Apply `diagkit.diagnostic.diagnostic` to a dataclass exception. Mark fields with
`diagkit.utils.diagnostic_field` to say what each one means:

```python
from dataclasses import dataclass

from diagkit.diagnostic import diagnostic
from diagkit.label import SourceSpan
from diagkit.utils import diagnostic_field


@diagnostic(code="oops::my::bad", help="try doing it better next time?")
@dataclass
class MyBad(Exception):
    src: str = diagnostic_field(source_code=True)
    highlight: SourceSpan = diagnostic_field(label="this bit here")
    extra: list = diagnostic_field(label="and here", collection=True, default_factory=list)


err = MyBad("source\n  text\n    here", SourceSpan(9, 4), [(1, 2), (3, 4)])
print(err.code())    # oops::my::bad
print(err.help())    # try doing it better next time?
for span in err.labels():
    print(span.label, span.offset, span.length)
```

`labels()` lists single labels first, then the items of collection labels. A
collection item may be a `SourceSpan`, an `(offset, length)` pair, a `range`, an
offset, or a `LabeledSpan`. A `LabeledSpan` keeps its own label, if it has one.
Only one field may be marked `primary=True`.

The `diagnostic` decorator accepts these options:

- `code`: a string, or a sequence of identifiers joined with `::`
- `severity`: `"error"`, `"warning"` or `"advice"`, with `"err"`, `"warn"`,
  `"adv"` and `"info"` as aliases, in any case
- `help`: a format string, or a `(format, *args)` tuple
- `url`: a format string, or `True` for a generated documentation link
- `forward`: a field name or index to delegate unspecified methods to
- `transparent=True`: forward every method to the one field of the class

Format strings may name fields directly, as in `help="bad value {value}"`. They
are filled in from the instance.

A decorated subclass of a decorated class acts as a variant. It takes its
parent's options as well as its own.

When the same option is given twice, an option is unknown, or `transparent` is
combined with other options, the decorator raises
`diagkit.diagnostic.DiagnosticDefinitionError`. The error's `errors` attribute
lists every problem found.

## Walking error chains

`diagkit.chain.Chain` iterates over an exception and its causes, outermost
first. It follows `__cause__`, and `__context__` unless that is suppressed. It
also supports `len()`, and `next_back()` for taking the innermost error first.

`diagkit.diagnostic_chain.DiagnosticChain` does the same, but prefers a
diagnostic's `diagnostic_source()` over its ordinary cause. Build one with
`DiagnosticChain.from_diagnostic` or `DiagnosticChain.from_stderror`.

## Library errors

`diagkit.errors` defines two exceptions:

- `IoError`, which wraps an `OSError`
- `OutOfBounds`, which reports a span that lies outside its source

Both derive from `DiagnosticError`, and both provide `code()`, `help()` and
`url()`. `IoError.help()` returns `None`.

## What diagkit does not do

diagkit collects diagnostic data. It does not render it: there are no report
printers, graphical or narrated output, or JSON output. It does not map spans to
lines and columns, or check spans against the source text. Showing the data to a
user is left to your own code.