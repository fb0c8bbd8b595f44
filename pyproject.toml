[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadnet"
version = "0.1.0"
description = "Thread-safe logging, a worker thread pool, UDP echo and dictionary servers, a UDP client and a chat message router"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "thread pool", "udp", "echo server", "dictionary server", "chat", "sockets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadnet-log-demo = "threadnet.logger:main"
threadnet-pool-demo = "threadnet.threadpool:main"
threadnet-echo-server = "threadnet.udp_server:echo_main"
threadnet-dict-server = "threadnet.udp_server:dict_main"
threadnet-udp-client = "threadnet.udp_client:main"

[tool.hatch.build.targets.wheel]
packages = ["threadnet"]

[tool.hatch.build.targets.sdist]
include = ["threadnet", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
