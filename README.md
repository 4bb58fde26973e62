# hcat

Building blocks for rendering configuration files from service-discovery
and secret data:

- `hcat.tfunc` holds template helper functions (math, membership, loops,
  parsing, strings, encoding and serialisation, map manipulation, time,
  environment lookup, file writing and grouping of service and key/value
  results) and `hcat.tfunc.funcmaps`, which gathers them under the names
  used in templates.
- `hcat.view` holds `View`, which repeatedly fetches a dependency's data
  with retries, staleness handling and rate limiting, and reports progress
  through event objects.
- `hcat.vaulttoken` holds `VaultAgentTokenQuery`, a dependency that watches
  a token file, and `CallbackNotifier`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Template functions

Every helper is a plain Python function that returns its result or raises
an exception. Helpers meant for pipes take the piped value last:

```python
from hcat.tfunc.mathfuncs import add, divide
from hcat.tfunc.strfuncs import indent, join, split
from hcat.tfunc.transform import base64_encode, to_json

add(2, 2)                     # 4
divide(2, 4)                  # 2  (4 / 2)
indent(4, "a\nb")             # "    a\n    b"
join(";", split(",", "a,b"))  # "a;b"
base64_encode("hello")        # "aGVsbG8="
to_json(["a", "b"])           # '["a","b"]'
```

The modules are:

- `mathfuncs`: `add`, `subtract`, `multiply`, `divide`, `modulo`,
  `minimum`, `maximum`. Only integers and floats are accepted; anything
  else (booleans included) raises `TypeError`. Integer division truncates
  toward zero; `modulo` takes integers only.
- `contains`: `is_in`, `contains`, `contains_all`, `contains_any`,
  `contains_none`, `contains_not_all`.
- `loop`: `loop(stop)` or `loop(start, stop)` returns a `range`; arguments
  may be integers or strings of integers.
- `parsing`: `parse_bool`, `parse_float`, `parse_int`, `parse_uint`,
  `parse_json`, `parse_yaml`. An empty string gives the zero value (an
  empty dict for JSON and YAML); invalid input raises `ValueError`.
- `strfuncs`: `indent`, `join`, `split`, `trim_space`, `replace_all`,
  `regex_replace_all` (replacements may refer to groups as `$1` or
  `${name}`), `regex_match`.
- `transform`: `base64_decode`, `base64_encode`, `base64_url_decode`,
  `base64_url_encode`, `sha256_hex`, `md5sum`, `to_lower`, `to_upper`,
  `to_title`, `to_json`, `to_json_pretty`, `to_unescaped_json`,
  `to_unescaped_json_pretty`, `to_yaml`, `to_toml`. The JSON helpers sort
  keys; the escaped variants write `<`, `>` and `&` as `\u003c`, `\u003e`
  and `\u0026`.
- `timefuncs`: `now()` and `timestamp()`. With no argument `timestamp`
  gives RFC 3339, `"unix"` gives epoch seconds, and any other argument is a
  layout written with the reference time `Mon Jan 2 15:04:05 2006`, such
  as `"2006-01-02"`.
- `envfuncs`: `env_func(entries)` and `env_or_default_func(entries)` build
  lookups over `KEY=VALUE` strings that fall back to the process
  environment.
- `maps`: `explode` (key pairs with `.key` and `.value` to a nested dict),
  `explode_map`, `merge_map`, `merge_map_with_override`.
- `files`: `write_to_file(path, username, group_name, permissions,
  [flags,] content)` writes (or, with the `append` flag, appends) content,
  optionally followed by a newline (`newline` flag), then sets ownership
  and octal permissions. It returns an empty string. It relies on POSIX
  users and groups.
- `consul_filter`: `by_meta`, `by_key`, `by_tag`, which group objects
  carrying `service_meta`, `key` or `tags` attributes.
- `deny`: `deny_func` always raises `FunctionDisabledError`; put it in a
  function map in place of a function that is to be refused.

### Function maps

`hcat.tfunc.funcmaps` returns dicts of template name to function:
`consul_filters()`, `env()`, `control()`, `helpers()`, `math_funcs()` and
`files()`; `all_unversioned()` merges them all.

```python
from hcat.tfunc.funcmaps import all_unversioned

funcs = all_unversioned()
funcs["toUpper"]("hi")        # "HI"
list(funcs["loop"](1, 3))     # [1, 2]
```

`env()` takes a snapshot of the process environment when it is called.

## Views

`hcat.view.View(dependency, clients=None, event_handler=None,
block_wait_time=0.0, max_stale=0.0, retry_func=None,
vault_default_lease=0.0)` keeps the latest data for one dependency.
Durations are in seconds.

A dependency provides `id()`, `stop()` and `fetch(clients)`, which returns
`(data, ResponseMetadata)` or raises. If it has `set_options`, it is handed
a `QueryOptions` before each fetch; if it has a true `blocking_query`
attribute, `None` data is treated as still waiting. Raising
`DependencyStopped` ends fetching quietly.

- `View.poll(view_queue, err_queue)` runs until stopped, putting the view
  on `view_queue` when new data arrives and an error on `err_queue` when it
  is not retried. `retry_func(retries)` returns `(retry, sleep_seconds)`; a
  400 response is never retried and a 500 response resets the last index.
- `View.fetch(done, success, err_queue)` fetches until new data is stored,
  then sets the `done` event.
- `View.data()`, `View.data_and_last_index()`, `View.store(data)`,
  `View.stop()` and `View.id()`.
- `rate_limiter(start)` and `get_response_code_from_error(err)` are module
  helpers.

Progress is reported to `event_handler` as `TrackStart`, `TrackStop`,
`ServerContacted`, `ServerError`, `RetryAttempt`, `MaxRetries`, `Trace`,
`StaleData`, `NoNewData`, `BlockingWait` and `NewData` objects.

## Vault agent token

```python
from hcat.vaulttoken.agent_token import VaultAgentTokenQuery

query = VaultAgentTokenQuery("/path/to/token-file")
token, meta = query.fetch(None)
```

`fetch` returns as soon as the file is new or its size or modification
time has changed since the last read, checking every `poll_interval`
seconds (15 by default). It raises `OSError` if the file cannot be read and
`DependencyStopped` after `stop()`.

`hcat.vaulttoken.notifier.CallbackNotifier(dep, fun=None)` reports
`dep.id()` as its id and returns `fun(d)` from `notify(d)`, or `True` when
no callback is given.

## What this package does not do

It has no template engine: the helpers are plain functions and the
function maps are plain dicts for an engine to use. It does not talk to
Consul or Vault: there are no query functions for keys, services, nodes or
secrets, no API clients and no watcher that drives views; dependencies are
supplied by the caller. There is no command-line program.