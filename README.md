# cipherkit

A small toolkit of ciphers in pure Python:

- **AES** (128, 192 and 256-bit keys), one 16-byte block at a time.
- **Block modes**: CBC, CBC-MAC and CTR in `cipherkit.modes`, and CCM
  (authenticated encryption) in `cipherkit.ccm`.
- **Password hashing** with bcrypt in `cipherkit.passwords`.
- **Classical ciphers**: Caesar and Vigenère in `cipherkit.classical`.
- A file-backed **user store** in `cipherkit.users` and two interactive
  command-line programs in `cipherkit.cli`.

The AES code is written for clarity, not speed, and has not been hardened
against side channels. Use it to learn, to test, or to check other
implementations.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## AES

```python
from cipherkit.aes import AES

key = bytes(range(16))          # 16, 24 or 32 bytes
cipher = AES(key)

block = bytes(16)
encrypted = cipher.encrypt_block(block)
assert cipher.decrypt_block(encrypted) == block
```

A key of any other length, or a block that is not 16 bytes long, raises
`ValueError`. `cipher.key_size` holds the key length in bits and
`cipher.rounds` the number of rounds. `key_setup(key)` returns the expanded
key schedule as a tuple of 32-bit words.

## Block modes

Every function takes the data, an `AES` instance and a 16-byte IV.

```python
from cipherkit.aes import AES
from cipherkit.modes import encrypt_cbc, decrypt_cbc, cbc_mac, encrypt_ctr, decrypt_ctr

cipher = AES(bytes(range(16)))
iv = bytes(16)

data = b"sixteen byte msg" * 2             # CBC needs whole 16-byte blocks
encrypted = encrypt_cbc(data, cipher, iv)
assert decrypt_cbc(encrypted, cipher, iv) == data

tag = cbc_mac(data, cipher, iv)            # the last CBC block only

message = b"any length at all"             # CTR takes any length
encrypted = encrypt_ctr(message, cipher, iv)
assert decrypt_ctr(encrypted, cipher, iv) == message
```

CBC and CBC-MAC raise `ValueError` when the data is not a whole number of
blocks; `cbc_mac` also refuses empty input. CTR counts over the whole
16-byte IV.

`increment_iv(iv, counter_size)` returns a new IV whose last `counter_size`
bytes have been increased by one as a big-endian integer, wrapping within
those bytes. A counter size of zero or less returns the IV unchanged; one
larger than 16 raises `ValueError`. `xor_bytes(a, b)` XORs two byte strings
up to the length of the shorter.

## CCM

CCM encrypts a payload and authenticates it together with associated data.
The nonce is 7 to 13 bytes long, the MAC length is one of 4, 6, 8, 10, 12,
14 or 16, and the associated data may be at most 32768 bytes. Other values
raise `ValueError`.

```python
from cipherkit.ccm import encrypt_ccm, decrypt_ccm, AuthenticationError

key = bytes(range(16))
nonce = bytes(range(16, 23))
assoc = b"header"

sealed = encrypt_ccm(b"payload", assoc, nonce, 8, key)   # ciphertext + MAC
opened = decrypt_ccm(sealed, assoc, nonce, 8, key, True)
assert opened == b"payload"
```

When verification is requested (the default) and the MAC does not match,
`decrypt_ccm` raises `AuthenticationError`, a subclass of `ValueError`.
Pass `False` as the last argument to decrypt without checking the MAC. A
ciphertext no longer than the MAC raises `ValueError`.

The formatting of the authenticated data follows this package's own rules:
only the low 16 bits of the payload length are recorded, and the associated
data is always followed by padding, a whole block of it when it already ends
on a block boundary. Output is therefore not guaranteed to match other CCM
implementations.

## Passwords

```python
from cipherkit.passwords import gensalt, hashpw, checkpw

password = "password"
salt = gensalt(12)          # work factors outside 4..31 fall back to 12
hashed = hashpw(password, salt)
assert checkpw(password, hashed)
```

`gensalt` returns a `$2a$` salt as a string. `hashpw` and `checkpw` take
strings or bytes; an invalid salt or hash raises `ValueError`. `checkpw`
returns a boolean and compares hashes in constant time.

## Classical ciphers

Only ASCII letters are shifted; case is kept and everything else passes
through unchanged.

```python
from cipherkit.classical import (
    CaesarCipher,
    caesar_encrypt,
    caesar_decrypt,
    vigenere_encrypt,
    vigenere_decrypt,
)

assert caesar_decrypt(caesar_encrypt("Hello, World", 3), 3) == "Hello, World"

key = "secret"
assert vigenere_decrypt(vigenere_encrypt("Attack at dawn", key), key) == "Attack at dawn"

caesar = CaesarCipher()
assert caesar.decrypt(caesar.encrypt("abc", 5), 5) == "abc"
```

The Vigenère key advances on every character of the message, letters or
not, and should consist of letters; an empty key raises `ValueError`.
`CaesarCipher.decrypt` encrypts with the shift `26 - key`. Shifts are meant
to be between 0 and 25: the arithmetic follows signed 8-bit character rules,
so negative shifts can produce characters that are not letters.

## Users

`UserStore` keeps user names and passwords in a CSV file, one
`name,password` line per user, appending on `register` and scanning the file
on `login`. Errors opening the file come through as `OSError`.

```python
from cipherkit.users import UserStore

password = "password"
store = UserStore("login.csv")
store.register("alice", password)
assert store.login("alice", password)
```

## Command line

Two interactive programs are installed:

```
cipherkit [--users-file PATH]
```

asks you to log in or register, then encrypts or decrypts one message with a
Vigenère key or a Caesar shift. Users are kept in `login.csv` in the current
directory unless `--users-file` names another file. It exits with status 1
if the input ends early.

```
cipherkit-caesar
```

loops over a menu that encrypts or decrypts text with a Caesar shift until
you choose to exit or the input ends.

## What it does not do

- The user store keeps passwords as plain text; it does not use the bcrypt
  functions. Keep it to demonstrations.
- AES, the block modes, CCM and bcrypt are available only as a library: no
  command encrypts files or hashes passwords.