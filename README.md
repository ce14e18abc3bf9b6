# bmovie

Building blocks for a small movie search HTTP service, plus two string
utilities with command-line front ends. No third-party libraries are
needed.

## Command-line tools

```
bmovie-brackets [TEXT ...]
bmovie-anagram [WORD ...]
```

`bmovie-brackets` prints, for each argument, the text between its first
`(` and its first `)` (an empty line when there is none). With no
arguments it uses two built-in samples.

`bmovie-anagram` groups its arguments into anagram groups and prints
them as `[[kita atik tika] [aku kua] ...]`. With no arguments it uses a
built-in word list.

## String utilities

```python
from bmovie.brackets import find_first_string_in_bracket
from bmovie.anagram import is_valid_anagram, group_anagrams

find_first_string_in_bracket("bi(sa)bit")   # "sa"
find_first_string_in_bracket("bi)sa(bit")   # ""

is_valid_anagram("anagram", "nagaram")      # True
group_anagrams(["kita", "atik", "tika", "aku", "kia", "makan", "kua"])
# [["kita", "atik", "tika"], ["aku", "kua"], ["kia"], ["makan"]]
```

`is_valid_anagram` accepts only the letters `a`-`z`: words of different
length are simply not anagrams, but any other character in words of
equal length raises `ValueError`. `group_anagrams` keeps the order in
which words first appear.

## Service pieces

- `bmovie.response`: `Status` is an enum of outcomes; each member has a
  `code`, a `message` and an `http_status`. `StdError` is an exception
  holding a status and a list of error messages (`append_error` adds
  one). `make_error(stat, err)` builds a `StdError`. `body(data, err)`
  returns a pair `(http status code, HttpRespBody)`; with no error the
  body carries `data` under `SUCCESS`, a `StdError` is reported as is,
  and any other exception as `SYSTEM_ERROR`. `HttpRespBody.to_dict()`
  gives `{"response_code", "response_message", "data"}`.
- `bmovie.config`: `parse_config(data, env)` decodes JSON text (str or
  bytes) with the sections `http_server`, `grpc_server`, `grpc_gateway`,
  `mysql`, `logger`, `datadog`, `new_relic` and `omdb` into an
  `EnvConfig` of dataclasses; `load_config(path, env)` reads it from a
  file (default `./config-local.json`). Problems raise `ConfigError`.
- `bmovie.logs`: `new_logger(LogOption(...))` creates an INFO-level
  `logging.Logger` that appends to `file_path + file_name` (creating the
  directory) and, with `stdout=True`, also writes to standard output, in
  text or JSON (`Formatter`). `LoggerWrapper` wraps such a logger with a
  `prefix`, a `level`, `output()` and the `printj`/`debugj`/`infoj`/
  `warnj`/`errorj` methods; `fatalj` exits with status 1 and `panicj`
  raises `RuntimeError` after logging.
- `bmovie.utils`: `fetch_request_id(headers)`, `read_json(stream)`,
  `unhandled_resp_status(status, message)` and
  `unhandled_http_status(status)`, plus the log message templates.
- `bmovie.model`: `SearchHistory`, the record of one search.
- `bmovie.repository`, `bmovie.application`, `bmovie.interfaces`:
  `Application` runs a title search or an IMDb-id lookup through a
  movie lookup client you supply (an object with
  `search_movie(req_id, search_key, page)` and
  `search_movie_by_imdb_id(req_id, search_key)`) and hands the resulting
  `SearchHistory` to a repository; `SearchInterfaces` forwards to it.
- `bmovie.controller`: `Controller(interfaces)` answers a `Request`
  (query and headers). `health_check` always succeeds. `search_movie`
  searches by title with `s` and page `p` (falling back to 1 when `p` is
  not an integer) or looks up by IMDb id with `i`; with neither it
  answers 400, and an error raised below it becomes a 500.
- `bmovie.app`: `make_wsgi_app(controller, logger)` serves
  `GET /bmovie/health-check` and `GET /bmovie/v1/` as a WSGI
  application, answers CORS preflight requests, returns 404 and 405 for
  other paths and methods, and writes one access log line per request to
  standard output (`format_access_log`). `SearchApp(config, logger,
  controller)` exposes the WSGI callable as `.wsgi`; `close()` closes the
  logger's handlers.

```python
from wsgiref.simple_server import make_server
from bmovie.app import make_wsgi_app

server = make_server("127.0.0.1", 8080, make_wsgi_app(controller, logger))
server.serve_forever()
```

## What it does not do

- There is no movie database client: searches only work with a lookup
  client you provide.
- `Repository.store` does not persist anything; it only logs the record
  at debug level.
- There is no RPC server or gateway, and no command that loads the
  configuration and starts the HTTP service; serve the WSGI application
  with a server of your choice.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e .[test]
pytest
```