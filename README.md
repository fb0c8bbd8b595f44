# threadnet

A small toolkit with no dependencies, built from a few classic systems pieces:

- **`threadnet.logger`**: a thread-safe logger with swappable output
  strategies (console or append-only file). Each record carries a timestamp, a
  level, the process id, the source file and the line.
- **`threadnet.thread`**: a named worker thread (`Worker-1`, `Worker-2`, ...)
  with an explicit lifecycle (`ThreadStatus`).
- **`threadnet.threadpool`**: a fixed-size pool of workers that share a task
  queue. A process-wide shared instance is available through
  `ThreadPool.get_instance()`.
- **`threadnet.udp_server`**, **`threadnet.udp_client`**: a UDP server that
  replies to every datagram with the result of a callback, and an interactive
  client for it.
- **`threadnet.dictionary`**: a word list loaded from a `word: translation` file.
- **`threadnet.inetaddr`**, **`threadnet.route`**: an IPv4 address/port value
  type, and a chat router that remembers every peer that has spoken and
  forwards each message to all of them.

Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Logging

```python
from threadnet.logger import Logger, LogLevel, log

log(LogLevel.INFO, "server started on port ", 8080)   # shared logger, console

logger = Logger()
logger.use_file_strategy("./log/", "log.log")   # append records to ./log/log.log
with logger.message(LogLevel.WARNING, "app.py", 42) as msg:
    msg << "disk usage at " << 91 << "%"
```

A record looks like this:

```
[2024-05-01 12:00:00] [WARNING] [4242] [app.py] [42] - disk usage at 91%
```

The levels are `DEBUG`, `INFO`, `WARNING`, `ERROR` and `FATAL`. A record is
written once, when it is flushed or its `with` block ends. `log()` and
`Logger.log()` fill in the caller's file name and line themselves.

## Threads and the thread pool

```python
from threadnet.threadpool import ThreadPool

pool = ThreadPool(4)
pool.start()
pool.enqueue(lambda: print("work"))
pool.stop()   # workers finish the queued tasks, then exit
pool.wait()   # joins every worker
```

`enqueue()` returns `False` and drops the task when the pool is not running,
that is before `start()` or after `stop()`. A task that raises is logged at
`ERROR` and the worker carries on.

`threadnet.thread.Thread` raises `RuntimeError` when started twice, stopped
while not running, or joined after `detach()`. Python threads cannot be
cancelled from outside, so `stop()` only sets `stop_requested` for the running
function to check.

## UDP servers

```python
from threadnet.udp_server import UdpServer, echo

with UdpServer(echo, 0, "127.0.0.1") as server:   # port 0: any free port
    print(server.address)
    server.handle_one()   # serve a single request
```

`start()` serves requests until receiving fails and returns how many were
served.

## Chat routing

```python
import socket
from threadnet.inetaddr import InetAddr
from threadnet.route import Route

route = Route()
with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
    route.route_message("hi all", InetAddr(9000, "127.0.0.1"), sock)
```

A peer becomes online the first time a message arrives from it; every message
is then sent to all online peers.

## Command-line tools

| Command | What it does |
| --- | --- |
| `threadnet-log-demo` | Writes one record at every level to the console, then to `./log/log.log`. |
| `threadnet-pool-demo` | Starts the shared pool, feeds it two sample tasks ten times over, then shuts it down. |
| `threadnet-echo-server PORT` | Replies to each datagram with `server say: <message>`. |
| `threadnet-dict-server PORT` | Looks each received word up in `./Dict.txt` and replies with its translation, or `未知` if the word is unknown. |
| `threadnet-udp-client SERVER_IP SERVER_PORT` | Reads words from standard input, sends each to the server and prints the reply, until end of input. |

The dictionary file holds one entry per line, with the word and its
translation separated by `": "`:

```
apple: 苹果
book: 书
```

Lines without the separator are skipped and logged as warnings; if a word
appears more than once, its first entry is kept. A missing file raises
`DictionaryError`.

Example session:

```
$ threadnet-echo-server 8080
$ threadnet-udp-client 127.0.0.1 8080
Please Enter: hello
server say: hello
```

## What is not included

There is no chat server command. `Route` and `InetAddr` are provided as
building blocks, but `UdpServer` only ever replies to the sender of each
datagram and is not wired to a `Route`; broadcasting to all peers needs your
own receive loop calling `Route.route_message()`.