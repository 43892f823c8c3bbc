# sigtalk

Send a line of text from one process to another using nothing but the
POSIX user signals. Each byte travels as eight signals, most significant
bit first: `SIGUSR1` carries a 1 and `SIGUSR2` a 0, and a NUL byte ends
the message. The server acknowledges every bit with `SIGUSR1`, so the
client never gets ahead of it, and answers the terminating NUL with
`SIGUSR2` to confirm the whole message arrived.

The two commands wait for signals with `signal.sigwaitinfo`, which
Python provides on Linux and some other Unix systems but not on macOS or
Windows.

## Installing

```
pip install .
```

## Using it

Start the server in one terminal. It prints its process id and waits:

```
sigtalk-server
```

```
pid: 48213
```

In another terminal, send it a message:

```
sigtalk-client 48213 "hello there"
```

The server prints

```
Client say : hello there
```

and the client prints `Message received !` before it exits.

The client exits with status 1 and a message when:

- it is not given exactly two arguments (it prints its usage line);
- the pid is zero, negative or above 4194304 (`PID_MAX`);
- the message contains a NUL character;
- the target process cannot be signalled during the transfer.

The server runs until interrupted (exit status 130) or until a client it
is talking to can no longer be signalled (exit status 1).

## As a library

The pieces the commands are built from can be used on their own:

- `sigtalk.protocol` — `char_bits`, `encode_message`, `parse_pid`,
  `PID_MAX`, the signal constants `SIGNAL_ONE` and `SIGNAL_ZERO`, and the
  `BitDecoder` that turns a stream of bits back into bytes.
- `sigtalk.server.Server` — `handle(signum, sender)` processes one
  signal; `serve()` announces the pid and loops. Output stream and the
  function used to send signals can be passed in.
- `sigtalk.client.Client` — `send_message(message)` and
  `wait_for_receipt()`; the signal-sending and signal-waiting functions
  can be passed in.
- `sigtalk.printf` — `format_string` and `printf`, a small printf-style
  formatter supporting `%c %s %p %d %i %u %x %X %%` with the
  `# + - 0 .` flags and field widths, plus the `FormatOptions` dataclass.
- `sigtalk.linereader.LineReader` — `read_line(fd, clear)` returns one
  line at a time from any number of file descriptors, keeping each
  descriptor's leftover input; `forget(fd)` drops it.
- `sigtalk.strutils` — C-style string helpers (`strchr`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `substr`, `strtrim`, `split`, ...)
  that return indices or new strings.
- `sigtalk.chars` — `atoi`, `itoa` and ASCII classification and case
  conversion.
- `sigtalk.fdio` — `put_char`, `put_str`, `put_endl`, `put_nbr` writing
  straight to a file descriptor.

```python
from sigtalk.printf import format_string
from sigtalk.protocol import BitDecoder, char_bits, encode_message

format_string("%05d|%-4s|%#x", 42, "ab", 255)   # '00042|ab  |0xff'
char_bits(ord("A"))      # (False, True, False, False, False, False, False, True)
len(encode_message("hi"))                       # 24: two bytes and the NUL

decoder = BitDecoder()
[decoder.feed(bit) for bit in char_bits(ord("A"))][-1]   # 65
```

## Running the tests

```
pip install .[test]
pytest
```