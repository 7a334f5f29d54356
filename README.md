# classgroup

Integer arithmetic building blocks for working with binary quadratic forms
and class groups: bit- and division-level helpers on Python integers,
number-theoretic functions, two's-complement byte encoding, a linear
congruence solver, and the message kinds exchanged between protocol
participants.

The package has no dependencies outside the standard library.

## Installation

```
pip install classgroup
```

## Modules

### `classgroup.bignum`

Helpers on Python `int` with the rounding and formatting conventions of a
multiple-precision library.

```python
from classgroup.bignum import (
    Sign, div_floor, div_trunc, mod_floor, rem_trunc,
    from_str_radix, to_str_radix, tstbit, popcount, to_u64,
)

div_floor(-8, 3)            # -3, rounds towards negative infinity
div_trunc(-8, 3)            # -2, rounds towards zero
mod_floor(8, -3)            # -1, takes the sign of the divisor
rem_trunc(-20, 3)           # -2, takes the sign of the dividend
to_str_radix(255, 16)       # 'ff'
from_str_radix("ff", 16)    # 255
tstbit(-1, 100)             # True, two's-complement view
popcount(0b1010010011)      # 5
to_u64(-1)                  # None, does not fit
```

Also available: `size_in_base`, `bit_length`, `sign`, `compl`, `modulus`,
`div_ceil`, `setbit`, `clrbit`, `combit`, `hamdist`, `to_unsigned_bytes`,
`from_unsigned_bytes` and `to_i64`. Division by zero raises
`ZeroDivisionError`; a malformed string raises `ParseIntegerError`
(a `ValueError`); an unsupported base raises `ValueError`.

### `classgroup.numtheory`

```python
from classgroup.numtheory import (
    ProbabPrimeResult, probab_prime, nextprime, gcdext, invert, powm, root, sqrt,
)

probab_prime(2, 15)         # ProbabPrimeResult.PRIME
probab_prime(4, 15)         # ProbabPrimeResult.NOT_PRIME
nextprime(123456)           # 123457
g, s, t = gcdext(18, 24)    # g == 6 == s*18 + t*24
invert(3, 11)               # 4
invert(2, 4)                # None
powm(13, 7, 19)             # 10
root(123456, 3)             # 49
sqrt(567)                   # 23
```

Small numbers are decided with certainty by `probab_prime`; larger ones
that pass trial division and Miller-Rabin rounds are reported as
`PROBABLY_PRIME`. Also available: `millerrabin`, `gcd`, `lcm`,
`is_multiple_of` and `ui_pow_ui`.

### `classgroup.encoding`

Two's-complement, big-endian encoding of integers into fixed-length byte
strings. One bit beyond the magnitude is always reserved for the sign.

```python
from classgroup.encoding import BufferTooSmallError, export_obj, import_obj, crem_u16

data = export_obj(~0x100, 3)    # b'\xff\xfe\xff'
import_obj(data)                # -257
import_obj(b"")                 # 0

try:
    export_obj(0x100, 1)
except BufferTooSmallError as exc:
    exc.needed                  # 2

crem_u16(-100, 3)               # 1
crem_u16(100, 3)                # 2
```

Also available: `size_in_bits`, `three_gcd` and `frem_u32`.

### `classgroup.congruence`

```python
from classgroup.congruence import CongruenceError, solve_linear_congruence

mu, v = solve_linear_congruence(3, 2, 7)
assert (3 * mu - 2) % 7 == 0 and v == 7
```

`v` is `m / gcd(a, m)`, the period of the solutions. If `gcd(a, m)` does
not divide `b`, `CongruenceError` is raised; a zero modulus raises
`ZeroDivisionError`.

### `classgroup.messages`

Frozen dataclasses for the messages a participant sends: `NormalMessage`,
`P2pMessage`, `SubsetMessage`, `BroadcastMessage`, `EmptyMsg`,
`KeyGenSuccessWithResult`, `SignOfflineSuccessWithResult` and
`SignOnlineSuccessWithResult`. They convert to and from an externally
tagged JSON form, with byte strings written as lists of integers.

```python
from classgroup.messages import EmptyMsg, NormalMessage, dumps, loads

dumps(NormalMessage("bob", b"\x01\x02"))   # '{"NormalMessage":["bob",[1,2]]}'
dumps(EmptyMsg())                          # '"EmptyMsg"'
loads('{"BroadcastMessage":[7]}')          # BroadcastMessage(message=b'\x07')
```

`to_dict` and `from_dict` give the same tagged form as Python objects;
malformed input raises `ValueError`.

## What the package does not do

There is no type for binary quadratic forms and no class-group arithmetic:
the package does not compose, square, reduce, normalize, invert or
exponentiate forms, does not build identity or generator elements for a
discriminant, and does not perform repeated squaring. The messages module
only defines and serializes messages; it does not send them anywhere.
There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```