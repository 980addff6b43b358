# miinettest

A small network check. It shows this host's addresses, finds the active
connection slot in a network configuration file, and times one HTTP request.

## Installation

```
pip install .
```

The package uses only the standard library.

## Usage

```
miinettest [--config PATH] [--url URL] [--timeout SECONDS]
```

The command does these steps in order:

1. It prints the local IPv4 address and the MAC address. If the IP address
   cannot be found, it prints `Failed`. If the MAC address cannot be found,
   it prints `Unavailable`.
2. It reads the configuration file given by `--config`. The default path is
   `/shared2/sys/net/02/config.dat`. The file has three connection slots.
   Each slot has a flag byte, at offset 8, 2340 and 4672. The first slot
   whose flag byte is above `0xA0` is the active one. The command prints its
   number: 1, 2 or 3. If no slot is active, it prints `-1`. If the file
   cannot be read, the command prints an error and exits with status 1.
3. It sends a request to `--url` and prints how long the request took in
   milliseconds. The default URL is `http://google.com/` and the default
   timeout is 10 seconds. If the request fails, it prints
   `Ping test failed.` The exit status is still 0 in that case.

On an ordinary computer the default configuration path usually does not
exist. In that case, pass `--config` with the path of a copy of the file.

## Using it as a library

```python
from miinettest.netinfo import gather, format_mac
from miinettest.netconfig import active_connection, read_active_connection, ConfigReadError
from miinettest.ping import ping, PingError

info = gather()
print(info.ip, info.mac, info.connected)

print(format_mac(bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01])))  # 02:00:00:00:00:01

try:
    slot = read_active_connection("config.dat")
except ConfigReadError as exc:
    print("cannot read configuration:", exc)

try:
    result = ping("http://example.com/", 10)
except PingError as exc:
    print("Ping test failed:", exc)
else:
    print(result.status, f"{result.elapsed_ms:.2f} ms")
```

### `miinettest.netinfo`

- `local_ip()` returns the IPv4 address used for outgoing traffic. It returns
  `None` if the address cannot be found. No packet is sent to find it.
- `mac_address()` returns the host's hardware address. It returns `None` if
  the address is unknown.
- `format_mac(raw)` turns six bytes into an upper-case, colon-separated
  string. It raises `ValueError` for any other length.
- `gather()` returns a `NetworkInfo` with the fields `ip` and `mac`. Its
  `connected` property is true when an IP address was found.

### `miinettest.netconfig`

- `active_connection(data)` takes the raw bytes of a configuration file. It
  returns the number of the first active slot, or `None` if no slot is
  active. If a flag byte lies past the end of the data, it counts as zero.
- `read_active_connection(path)` reads the file and returns its active slot.
  It raises `ConfigReadError` if the file cannot be read.

### `miinettest.ping`

- `ping(url, timeout)` fetches the URL once and throws the body away. It
  returns a `PingResult` with the fields `url`, `status` and `elapsed_ms`.
  - It does not follow redirects.
  - Any HTTP status counts as a completed request.
  - It raises `PingError` when the connection or the request fails.
  - It raises `ValueError` if `timeout` is not positive.

## What it does not do

It does not measure bandwidth. The result is the time taken by one request,
and no throughput figure is given.

## Running the tests

```
pip install .[test]
pytest
```