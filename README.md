# nexusgate

Building blocks for a LoRa gateway that talks to upstream hosts over HTTP
and serves a small web interface built from HTML pages with utility classes.

## Modules

- `nexusgate.airtime` - `calculate_airtime(payload_len, spreading_factor,
  bandwidth, coding_rate, checksum)` estimates the time on air of a LoRa
  packet and returns it in sixteenths of a millisecond, truncated to an
  unsigned 16-bit value.
- `nexusgate.schedule` - `Schedule` is a payload waiting for a device.
  `ScheduleQueue(capacity)` is a thread-safe bounded store: `push` raises
  `ScheduleFullError` once the queue is at capacity, and `find(device_tag)`
  removes and returns the oldest schedule for that tag, or `None`.
- `nexusgate.http` - `Request` describes an outgoing request,
  `encode_request` turns it into bytes, `parse_response` reads the status
  code and first header line (lower-cased) of a raw reply into an
  `HttpResponse`, and `fetch(address, port, request)` sends a request to an
  IPv4 address over TCP. Failures raise `FetchError`.
- `nexusgate.auth` - `Host` describes an upstream host and `Cookie` holds its
  session cookie; `Cookie.expired()` is true once the cookie is older than an
  hour. `auth(host, cookie)` posts to `/api/signin` and stores the `auth=`
  value from the `set-cookie` header; `signin_body` and `parse_cookie` are
  the two halves of that exchange. Failures raise `AuthError`.
- `nexusgate.file` - `Asset(path)` keeps a file open and cached; `load()`
  rereads it when its modification time changes, `close()` closes it.
  `content_type(path)` maps `.txt` and `.html` to their content types.
- `nexusgate.assemble` - `assemble(source, version, commit, reader=None)`
  replaces tags carrying `ref="path"` with the referenced file, repeating
  until no references are left, fills in `{version}` and `{commit}`, and
  inlines `import 'path'` lines found after the closing body tag. Unreadable
  files raise `AssembleError`.
- `nexusgate.utility`, `nexusgate.styles`, `nexusgate.palette` - tables that
  turn utility class names (`p-4`, `md:flex`, `text-center`,
  `dark:background-slate-900/50`, ...) into CSS rules written into a
  `RuleBuffer`.
- `nexusgate.hydrate` - `extract(content)` collects the class names used in
  `class="..."` attributes of the body and in `classList.add('...')` calls of
  its script; `hydrate(content, classes)` inserts the matching CSS, with
  responsive (`xs`, `sm`, `md`, `lg`, `xl`) and dark-mode media queries,
  right after the page's `<style>` tag. Problems raise `HydrateError`.
- `nexusgate.serve` - `serve(asset, response, version, commit)` loads an
  `Asset`, assembles and hydrates it once, and writes it with its
  content type and length into a `Response`; failures set status 500.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from nexusgate.airtime import calculate_airtime
from nexusgate.hydrate import extract, hydrate
from nexusgate.schedule import Schedule, ScheduleQueue

airtime = calculate_airtime(
    payload_len=12, spreading_factor=7, bandwidth=125000, coding_rate=5, checksum=True
)

queue = ScheduleQueue(capacity=16)
queue.push(Schedule(kind=1, data=b"\x01\x02", device_id=bytes(16), device_tag=b"\xab\xcd"))
pending = queue.find(b"\xab\xcd")

page = b'<html><head><style></style></head><body class="p-4 md:flex"></body></html>'
styled = hydrate(page, extract(page))
```

## What it does not do

The package has no command and no server of its own: it neither listens for
HTTP requests nor routes them to pages. It has no radio access, does not
build or forward uplink and downlink records to hosts, and keeps no storage
of hosts, radios or devices; callers supply `Host` values and drive
`auth`, `fetch` and `serve` themselves.