#!/usr/bin/env python3

import logging
import sys
import config
import ethaddr


def main(argv=None):
    """
    Checks a single address given on the command line.  Returns the exit code: 0 if the address is
    in EIP-55 checksum form, 1 if it isn't (or isn't an address at all), 2 on usage error.
    """
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=config.log_level, format=config.log_format)

    if not argv:
        print('Usage: {} <address>'.format(config.prog), file=sys.stderr)
        return 2

    addr = argv[0]
    try:
        ethaddr.check(addr)
    except ethaddr.InvalidFormat as e:
        logging.getLogger(config.prog).debug("rejected %s: %s", addr, e.reason)
        print('❌ Invalid Ethereum address format: {}'.format(addr), file=sys.stderr)
        return 1
    except ethaddr.ChecksumMismatch as e:
        print('❌ Not EIP-55 checksummed: {} (expected: {})'.format(addr, e.expected), file=sys.stderr)
        return 1

    print('✅ Valid EIP-55 checksummed address')
    return 0


if __name__ == '__main__':
    sys.exit(main())
