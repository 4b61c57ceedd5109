# apptemplate

A small JSON web service built on Flask and SQLAlchemy. It reads its settings
from the environment (and from a `.env` file in the working directory), connects
to a MySQL database, writes a rotating log file under `log/`, and serves two
read-only endpoints over a table of records that each have one detail row.

## Installation

```
pip install .
```

The connection URL built from the configuration uses SQLAlchemy's
`mysql+pymysql` dialect, so connecting to MySQL needs the PyMySQL driver,
which is not installed with the package:

```
pip install pymysql
```

For running the tests:

```
pip install .[test]
pytest
```

## Configuration

Settings come from environment variables, read by
`apptemplate.config.init_config`. When started as a command, a `.env` file in
the current directory is loaded first and must exist; without it the command
fails with `FileNotFoundError`.

| Variable                         | Meaning                                     |
|----------------------------------|---------------------------------------------|
| `APP_NAME`                       | Application name, used in the log file name |
| `APP_VERSION`                    | Application version                         |
| `RUN_MODE`                       | `development` enables permissive CORS       |
| `HTTP_PORT`                      | Port to listen on (default `8080`)          |
| `DB_MYSQL_USERNAME`              | MySQL user                                  |
| `DB_MYSQL_PASSWORD`              | MySQL password                              |
| `DB_MYSQL_HOST`                  | MySQL host                                  |
| `DB_MYSQL_PORT`                  | MySQL port                                  |
| `DB_MYSQL_DBNAME`                | MySQL database name                         |
| `MAX_OPEN_CONNECTION`            | Connection pool: maximum open connections   |
| `MAX_IDDLE_CONNECTION`           | Connection pool: maximum idle connections   |
| `DB_MAX_IDLE_TIME_CONN_SECONDS`  | Connection pool: idle time in seconds       |
| `DB_MAX_LIFE_TIME_CONN_SECONDS`  | Connection pool: connection lifetime        |

Pool settings that are missing or not integers are left at zero. They are read
into `AllConfig.db_connection_pool` but not applied to the engine.

Example `.env`:

```
APP_NAME=demo
APP_VERSION=1.0.0
RUN_MODE=development
HTTP_PORT=8080
DB_MYSQL_USERNAME=user
DB_MYSQL_PASSWORD=password
DB_MYSQL_HOST=localhost
DB_MYSQL_PORT=3306
DB_MYSQL_DBNAME=demo
```

## Running

```
apptemplate
```

The command loads `.env`, builds the configuration, opens the database engine
and checks it with `SELECT 1` (SQL statements are echoed), prints
`RUNNING IN PORT <port>`, and serves on all interfaces with a threaded WSGI
server. On SIGINT or SIGTERM it shuts the server down, waits out a five-second
grace period, and exits.

Logs go to `log/<APP_NAME>_<DDMMYY>.log` under the working directory, as
`time=... level=... msg=...` lines. The file is rotated at 5 MB, up to ten
gzip-compressed backups are kept, and backups older than 30 days are removed
when a rotation happens.

## Endpoints

Every response is a JSON object of the form `{"data": ..., "message": ...}`.

- `GET /` lists all records as `[{"id": ..., "name": ...}, ...]` with status
  200 and the message `HALO`. A database error gives status 500 with the error
  text as the message.
- `GET /detail?id=<n>` returns one record with its detail:
  `{"id": ..., "name": ..., "detail": {"id": ..., "isDetail": ...}}`, with the
  message `SUCCESS`. Note that this success response is sent with status 400.
  - An `id` that is not an integer gives status 400 with the message
    `Invalid Query Parameters ` and is written to the log.
  - A missing, empty or zero `id` gives status 400 with the message
    `Invalid Query Parameters` followed by the validation error.
  - A database error gives status 400 with the error text as the message.
  - An unknown `id`, or a record without a detail row, raises an exception in
    the handler, which Flask answers with status 500.

In `development` run mode every response carries permissive CORS headers and
`OPTIONS` requests are answered with status 204.

## Using it as a library

```python
from apptemplate.app import create_app
from apptemplate.config import init_config
from apptemplate.database import connect
from apptemplate.logger import new_logger

conf = init_config()
connection = connect(conf)
logger = new_logger(conf.app_config)
app = create_app(conf, connection, logger)
```

- `apptemplate.config`: `init_config(environ)` and `set_connection_pool(environ)`
  read from the given mapping, or from `os.environ` when it is `None`.
- `apptemplate.database`: `build_dsn(db_config)` renders the MySQL URL (a
  non-numeric port raises `ValueError`); `connect(conf, url)` takes an optional
  SQLAlchemy URL instead, so the application can run against, for example, an
  SQLite file.
- `apptemplate.models`: the SQLAlchemy tables `TestTable` (`test_tables`) and
  `TestJoinTable` (`test_join_tables`) on the declarative `Base`.
- `apptemplate.repository.TestTableRepository`: `get_list_test_table()` and
  `get_detail_test_table(record_id)`.
- `apptemplate.controller.MainController`: the two handlers, returning Flask
  responses.
- `apptemplate.app`: `init_route`, `create_app`, `start_service` and `main`.

## What it does not do

The package never creates the tables; they must already exist in the database.
It serves only the two read-only endpoints above, and has no endpoints for
writing records.