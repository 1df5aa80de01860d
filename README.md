# mlopskit

A collection of small, self-contained tools for everyday MLOps work:
command-line utilities, tiny Flask microservices, serverless-style event
handlers, a duplicate-file finder, a CSV data frame explorer and a TCP echo
client and server.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Most tools use subcommands; run one without a subcommand and it prints a
short notice instead of doing anything. `-V`/`--version` prints `1.0`.

### Marco Polo

```
marco-polo play --name Marco    # prints "Polo"
marco-polo play --name Bob      # prints "Marco"
```

### Hello and greetings

```
hello-mlops                     # prints "Hello, world MLOPs!"
greet greet --name Ada          # prints "Hello, Ada!"
```

### Finding duplicate files

`deduper` walks a directory tree, computes the MD5 digest of every regular
file and reports the groups of files with identical content:

```
deduper --path ./data
```

`parallel-dedupe` does the same with either a serial or a threaded checksum
pass, printing each duplicated digest followed by its files. `--path`
defaults to `src/data/`.

```
parallel-dedupe serial --path ./data
parallel-dedupe parallel --path ./data
```

### Logging a random fruit

`fruit-logger` picks a random fruit and logs it to standard error at info,
trace and warning level; `--level` chooses which of those are shown. Any
level other than `info`, `trace` or `warn` is treated as `info`.

```
fruit-logger --level info
fruit-logger --level warn
fruit-logger --level trace
```

### Exploring a CSV file

`frame` reads a CSV file with pandas. `--path` defaults to
`src/data/global-life-expt-2022.csv`.

```
frame print --path data.csv --rows 5       # first rows (default 10)
frame describe --path data.csv             # the whole frame
frame schema --path data.csv               # each column's name and type
frame shape --path data.csv                # (rows, columns)
frame sort --path data.csv --year 2020 --rows 10 --order true
```

`sort` keeps the `Country Name` column and the chosen year column, drops
rows with missing values and sorts by the year, descending when `--order` is
`true` (the default) and ascending when it is `false`.

### Song lyrics

```
lyrics candidates                 # rock, pop, hip hop, country, latin
lyrics lyrics --file lyrics.txt   # print the file line by line
```

The candidate genre labels are kept in an in-memory SQLite table.

### Echo roulette

A TCP client and server that echo tagged messages back and forth. Both take
`--host` (default `127.0.0.1`) and `--port` (default `8080`). The client
prefixes its message with a fresh UUID; the server replies with the message
followed by `:host:port`.

```
roulette server
roulette client --message "Hello World"
```

## Microservices

Each service is a small Flask application; `create_app()` returns it for
embedding or testing, and the command starts it. Every command takes
`--host` and `--port` (port 8080 by default; host `127.0.0.1` for the
calculator, `0.0.0.0` for the others).

```
calc-service       # /, /add/{a}/{b}, /subtract/{a}/{b}, /multiply/{a}/{b}, /divide/{a}/{b}
textops-service    # /, /reverse/{input}, /piglatin/{input}, /binary/{input}
fruit-service      # /, /fruit, /health, /version
```

The calculator works on 32-bit signed integers: operands that are not
integers or do not fit give 404, and division by zero or a result that
overflows gives 500 with the error text. `/version` of the fruit service
returns `0.1.0`; `/health` returns an empty 200 response.

## Library use

```python
from mlopskit.marcopolo import marco_polo
from mlopskit.calc import add, divide
from mlopskit.textops import reverse, pig_latin, binary
from mlopskit.dedupe import walk, checksum, checksum_parallel, find_duplicates

marco_polo("Marco")                 # "Polo"
add(2, 3)                           # 5
divide(-7, 2)                       # -3, truncated toward zero
pig_latin("hello")                  # "hayello"
binary("A")                         # "01000001"
duplicates = find_duplicates(checksum(walk("./data")))
```

`mlopskit.frame` offers `read_csv`, `print_df`, `print_schema`,
`print_shape` and `sort_by_year`; `mlopskit.lyrics` offers
`get_all_zeroshotcandidates` and `read_lyrics`; `mlopskit.roulette` offers
the coroutines `serve` and `send_message` and `get_id`.

### Serverless-style handlers

`mlopskit.lambdas` holds handlers that take an event mapping and a
`LambdaContext` and return a response dictionary carrying the context's
`aws_request_id` as `req_id`. A missing or non-string event field raises
`ValueError`.

```python
from mlopskit.lambdas import LambdaContext, marco_polo_handler

marco_polo_handler({"name": "Marco"}, LambdaContext(aws_request_id="req-1"))
# {"req_id": "req-1", "msg": "Marco says Polo"}
```

| Handler | Event field | Reply |
| --- | --- | --- |
| `marco_polo_handler` | `name` | `msg`: "Marco says Polo", otherwise "... says Who?" |
| `command_handler` | `command` | `msg`: "Command {command}." |
| `command_executed_handler` | `command` | `msg`: "Command {command} executed." |
| `step_marco_handler` | `name` | `payload`: "Polo" for "Marco", otherwise "Nobody" |
| `step_polo_handler` | `payload` | `payload`: "YouWin!" for "Polo", otherwise "YouLose" |
| `heavy_compute_handler` | `name` | `msg`: ten rounds of a 32-bit summation |
| `threads_handler` | `command` | `msg`: "Command {command}.", after running `parallel_sum()` |
| `efs_lister_handler` | `name` | `msg` greeting and `files` listing the mounted volume |
| `checksum_handler` | `command` | `msg`: "Command {command}.", after `run_duplicate_search` |

`efs_lister_handler` lists `/mnt/efs` unless the `EFS_MOUNT` environment
variable names another directory; `checksum_handler` searches
`/efs/testfiles/` unless `TESTFILES_DIRECTORY` is set. `list_files` and
`run_duplicate_search` can also be called directly with a directory.

## What the package does not do

- The handlers in `mlopskit.lambdas` are plain functions; the package has no
  runtime that receives events from a serverless platform and calls them.
- `lyrics` only lists candidate genre labels and prints lyrics; it has no
  command that classifies lyrics into those genres.
- The roulette tools only echo messages; there is no roulette game logic.