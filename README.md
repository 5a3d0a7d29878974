# cukesuite

Building blocks for running Gherkin scenarios. It covers the bookkeeping
around the step functions: choosing scenarios by tag, storing results,
deciding step outcomes and running hooks.

## Modules

### `cukesuite.tags`

- `apply_tag_filter(filter, pickles)` returns the pickles whose `tags`
  satisfy the filter. An empty filter returns the list you passed in,
  unchanged.
- `matches(filter, tags)` checks one collection of tags. A tag can be a
  string or an object with a `name`.

In a filter:

- `,` means *or* within a group.
- `&&` joins groups, and every group must match.
- `~` negates a tag.
- `@` signs are ignored.

An empty tag in a filter raises `ValueError`.

### `cukesuite.storage`

`Storage` is a thread-safe in-memory store. It holds features (keyed by
`uri`), pickles and their steps (keyed by `id`), pickle results (keyed by
`pickle_id`), pickle step results (keyed by `pickle_step_id`), step
definition matches and the test-run-started record.

- Inserting a record under a key that is already stored replaces the old
  record.
- Listings come back sorted by key.
- A lookup that finds nothing raises `RecordNotFound`, a `LookupError`.
- A record with an empty or non-string key raises `ValueError`.

### `cukesuite.hooks`

Enums:

- `StepResultStatus`: `PASSED`, `FAILED`, `SKIPPED`, `UNDEFINED`, `PENDING`.
- `Keyword`: `NONE`, `GIVEN`, `WHEN`, `THEN`.
- `PickleStepType`: `UNKNOWN`, `CONTEXT`, `ACTION`, `OUTCOME`.

Exceptions: `StepUndefinedError`, `StepPendingError`, `StepSkippedError`.

Outcome rules:

- `should_fail(error, strict)` is true for any error except a skip. An
  undefined or pending step fails only when `strict` is true.
- `step_status(error, scenario_error)` classifies a step from its own error
  and from the error earlier in the scenario.
- `keyword_matches(keyword, step_type)` tells whether a definition
  registered for a keyword may run a step of that type.

`HookChain` holds lists of before/after scenario hooks and before/after
step hooks.

- Hooks signal failure by raising.
- A hook may return a new context, which replaces the current one, or
  `None` to keep the current context.
- The `run_*` methods return `(ctx, error)`. The errors raised by hooks are
  merged into that error, and a failing hook never stops the hooks after it.

### `cukesuite.fs`

`FS(fs=None).open(name)` opens a file for binary reading. It reads from the
object you pass as `fs`, which can be:

- a mapping of names to `bytes` or `str`;
- any object with an `open(name)` method.

With no `fs` it reads from the local disk. A missing file raises
`FileNotFoundError`. A name that is a directory raises `IsADirectoryError`.

### `cukesuite.utils`

- `spaces(n)` returns `n` spaces. A negative count gives one space.
- `time_now()` returns the current local time.

## Example

```python
from cukesuite.hooks import HookChain, StepPendingError, should_fail

print(should_fail(StepPendingError(), strict=True))   # True
print(should_fail(StepPendingError(), strict=False))  # False

def before(ctx, scenario):
    raise RuntimeError("boom")

chain = HookChain(before_scenario=[before])
ctx, error = chain.run_before_scenario({}, "my scenario")
print(error)  # before scenario hook failed: boom
```

## What it does not do

The package does not parse Gherkin feature files. It has no step
definition registry and no runner that executes scenarios. It has no output
formatters and no command-line program. You bring these yourself and use
the pieces above inside them.

## Installing and testing

```
pip install cukesuite
pip install "cukesuite[test]"
pytest
```