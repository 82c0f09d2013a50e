"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details

Command line access to the field arithmetic. Elements are given as 64-digit
hex strings in little-endian byte order, the same order pack produces.
"""

import argparse
import sys

from field25519 import FieldError, config
from field25519.field import FieldElem
from field25519.util import helpers


log = helpers.getLogger("CLI")

# Number of operands for each operation.
Operations = {
    "unpack": 1,
    "pack": 1,
    "inverse": 1,
    "add": 2,
    "sub": 2,
    "mul": 2,
}


def parseArgs(argv=None):
    parser = argparse.ArgumentParser(
        prog="field25519", description="Arithmetic modulo 2^255-19."
    )
    parser.add_argument("--datadir", help="directory of the configuration file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="reject encodings with bit 255 set or not reduced modulo p",
    )
    parser.add_argument("--format", choices=config.FORMATS, help="output format")
    parser.add_argument("--loglevel", help="logging level, e.g. DEBUG")
    parser.add_argument("--logfile", help="rotating log file path")
    parser.add_argument("operation", choices=sorted(Operations))
    parser.add_argument("operands", nargs="+", metavar="HEX")
    return parser.parse_args(argv)


def render(elem, fmt):
    """
    render formats the canonical value of the element.

    Args:
        elem (FieldElem): the element.
        fmt (str): config.HEX or config.INT.

    Returns:
        str: the formatted value.
    """
    if fmt == config.INT:
        return str(elem.toInt())
    return elem.string()


def run(operation, operands, strict=False, fmt=config.HEX):
    """
    run performs a single operation on hex-encoded operands.

    Returns:
        str: the output line.
    """
    want = Operations[operation]
    if len(operands) != want:
        raise FieldError(f"{operation} takes {want} operand(s), got {len(operands)}")
    elems = [FieldElem.fromHex(h, strict=strict) for h in operands]
    log.debug(f"{operation} on {len(elems)} operand(s)")
    if operation == "unpack":
        return " ".join(f"{x:#06x}" for x in elems[0].n)
    if operation == "pack":
        return render(elems[0], fmt)
    if operation == "inverse":
        return render(elems[0].inverse(), fmt)
    a, b = elems
    return render(getattr(a, operation)(b), fmt)


def main(argv=None):
    """
    Entry point of the field25519 command.

    Returns:
        int: the process exit status.
    """
    args = parseArgs(argv)
    try:
        cfg = config.load(args.datadir)
        lvl = helpers.logLvl(args.loglevel if args.loglevel else cfg.get("loglevel"))
        helpers.prepareLogging(filepath=args.logfile, logLvl=lvl)
        fmt = args.format if args.format else cfg.get("format")
        print(run(args.operation, args.operands, strict=args.strict, fmt=fmt))
    except FieldError as e:
        log.error(str(e))
        log.debug(helpers.formatTraceback(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
