import logging
import string
from Cryptodome.Hash import keccak

log = logging.getLogger(__name__)

all_hex = set(string.hexdigits)


class AddressError(ValueError):
    """Base class for addresses that fail validation"""

    def __init__(self, address, msg):
        super().__init__(msg)
        self.address = address


class InvalidFormat(AddressError):
    def __init__(self, address, reason):
        super().__init__(address, 'Invalid Ethereum address format: {} ({})'.format(address, reason))
        self.reason = reason


class ChecksumMismatch(AddressError):
    def __init__(self, address, expected):
        super().__init__(address, 'Not EIP-55 checksummed: {} (expected: {})'.format(address, expected))
        self.expected = expected


def validate(addr):
    """
    Parses a hex ETH address into its 20 raw bytes.

    - Optional 0x or 0X prefix
    - Followed by exactly 40 hex digits, in any case

    Raises InvalidFormat if the address is malformed.  The casing is not looked at here.
    """
    if not isinstance(addr, str):
        raise InvalidFormat(addr, 'not a string')
    body = addr[2:] if addr[:2] in ('0x', '0X') else addr
    if len(body) != 40:
        raise InvalidFormat(addr, 'expected 40 hex digits, got {}'.format(len(body)))
    if not all(x in all_hex for x in body):
        raise InvalidFormat(addr, 'non-hex characters')
    return bytes.fromhex(body)


def encode(raw):
    """
    Returns the EIP-55 mixed-case form of a 20-byte address, with 0x prefix.

    Letters are upper-cased where the matching nibble of keccak256(lower-case hex text) is >= 8;
    digits are left alone.
    """
    if len(raw) != 20:
        raise ValueError('ETH addresses are 20 bytes, not {}'.format(len(raw)))
    addr = raw.hex()
    keccak_hash = keccak.new(digest_bits=256)
    keccak_hash.update(addr.encode('ascii'))
    addrhash = keccak_hash.hexdigest()
    return '0x' + ''.join(c.upper() if int(addrhash[i], 16) >= 8 else c for i, c in enumerate(addr))


def to_checksum_address(addr):
    return encode(validate(addr))


def check(addr):
    """
    Checks that `addr` is exactly its own EIP-55 canonical form, and returns it.

    Raises InvalidFormat for anything that isn't a hex address, and ChecksumMismatch (with the
    expected form in `.expected`) otherwise.  All-lower or all-upper case addresses get no special
    treatment: they must match the canonical form like any other.
    """
    expected = to_checksum_address(addr)
    if addr != expected:
        log.debug("checksum mismatch: got %s, expected %s", addr, expected)
        raise ChecksumMismatch(addr, expected)
    return expected


def is_valid(addr):
    try:
        check(addr)
    except AddressError:
        return False
    return True
