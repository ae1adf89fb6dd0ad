[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dhcpwire"
version = "0.1.0"
description = "Encoding, decoding and pretty-printing of DHCPv4 options, plus relay agent circuit-id parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["dhcp", "dhcpv4", "bootp", "options", "rfc2132", "rfc3046", "relay-agent", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dhcpwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
