# shadigest

SHA-2 message digests written in plain Python: SHA-256, SHA-384 and SHA-512.
Each one returns the digest as a lowercase hexadecimal string. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Library use

```python
from shadigest.sha256 import SHA256, sha256
from shadigest.sha512 import SHA384, SHA512, sha384, sha512

print(sha256("abc"))
print(sha384(b"abc"))
print(sha512("abc"))

hasher = SHA512()
print(hasher.hash("hello"))
```

- `shadigest.sha256` provides the `SHA256` class and the `sha256(message)` function.
- `shadigest.sha512` provides the `SHA512` and `SHA384` classes and the
  `sha512(message)` and `sha384(message)` functions.

`sha256`, `sha384` and `sha512` are shorthand for calling `hash` on a new
`SHA256`, `SHA384` or `SHA512` object.

A message may be a `str`, which is encoded as UTF-8, or a bytes-like object
(`bytes`, `bytearray`, `memoryview`). Anything else raises `TypeError`.

Each class also carries `digest_size` and `block_size` in bytes:

| Class    | `digest_size` | `block_size` | Hex characters returned |
|----------|---------------|--------------|-------------------------|
| `SHA256` | 32            | 64           | 64                      |
| `SHA384` | 48            | 128          | 96                      |
| `SHA512` | 64            | 128          | 128                     |

## Command line

```
shadigest "some message"
```

or, without installing the script:

```
python -m shadigest.cli "some message"
```

This prints all three digests of the message, one per line:

```
SHA256:<digest>
SHA384:<digest>
SHA512:<digest>
```

The message is required; without it the command prints a usage message and
exits with status 2.

## What it does not do

- A message is hashed only up to its first NUL byte (`"\0"`); anything after
  it is ignored, so `"ab\0cd"` gives the same digest as `"ab"`.
- There is no incremental interface: the whole message is passed to `hash` at
  once. There is no `update` method and no raw binary digest, only the hex
  string.
- The command line hashes the text given as its argument; it does not read
  files or standard input.