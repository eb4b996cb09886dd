#!/usr/bin/env python3
"""
otp_cli.py — command line wrapper around otpx

Subcommands:
- hotp   : HOTP code for a counter
- totp   : TOTP code for now (or --timestamp, in epoch milliseconds)
- verify : check a TOTP/HOTP code against a window
- random : random code from a character set
- secret : print a fresh random secret as hex

The secret is given as text with --secret, as hex with --secret-hex, or
through the OTPX_SECRET environment variable (text).

Exit status: 0 ok / code valid, 1 code invalid, 2 bad arguments.
"""

import argparse
import binascii
import logging
import os
import sys

from . import charset, otp_core, verify
from .config import SECRET_ENV, load_settings
from .errors import OTPXError
from .logging_config import configure_logging
from .models import Algorithm

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class CLIError(Exception):
    """Bad command line input that argparse itself cannot detect."""


def _secret_from_args(args) -> bytes:
    if args.secret_hex is not None:
        try:
            return binascii.unhexlify(args.secret_hex.strip())
        except (binascii.Error, ValueError) as e:
            raise CLIError(f"--secret-hex is not valid hex: {e}") from e
    if args.secret is not None:
        return args.secret.encode("utf-8")
    env_secret = os.environ.get(SECRET_ENV)
    if env_secret:
        return env_secret.encode("utf-8")
    raise CLIError(f"no secret given: use --secret, --secret-hex or set {SECRET_ENV}")


# --- CLI command handlers ---
def cmd_hotp(args):
    code = otp_core.hotp(_secret_from_args(args), args.counter, args.algorithm, args.digits)
    print(code)
    return EXIT_OK


def cmd_totp(args):
    result = otp_core.totp_token(
        _secret_from_args(args), args.algorithm, args.digits, args.period, args.timestamp
    )
    if args.show_remaining:
        print(f"{result.token}  (valid ~{result.remaining:2d}s)")
    else:
        print(result.token)
    return EXIT_OK


def _report(kind: str, result) -> int:
    if result.is_valid:
        print(f"[+] {kind} code is VALID (delta = {result.delta})")
        return EXIT_OK
    print(f"[-] {kind} code is INVALID")
    return EXIT_INVALID


def cmd_verify_totp(args):
    result = verify.verify_totp(
        _secret_from_args(args),
        args.code,
        algorithm=args.algorithm,
        digits=args.digits,
        period=args.period,
        timestamp=args.timestamp,
        window=args.window,
    )
    return _report("TOTP", result)


def cmd_verify_hotp(args):
    result = verify.verify_hotp(
        _secret_from_args(args),
        args.code,
        args.counter,
        algorithm=args.algorithm,
        digits=args.digits,
        look_ahead=args.look_ahead,
    )
    return _report("HOTP", result)


def cmd_random(args):
    code = charset.generate_otp(
        args.length,
        args.charset,
        custom=args.custom,
        exclude_similar=args.exclude_similar,
        case=args.case,
    )
    print(code)
    return EXIT_OK


def cmd_secret(args):
    print(otp_core.generate_secret(args.bytes).hex())
    return EXIT_OK


def cmd_help(args):
    print("'otpx -h' for help.")
    return EXIT_USAGE


# --- Argparse builder ---
def _add_secret_args(p):
    g = p.add_mutually_exclusive_group()
    g.add_argument("--secret", help="Secret as text (UTF-8 bytes are the key)")
    g.add_argument("--secret-hex", help="Secret as hex-encoded bytes")


def _add_otp_args(p, settings, with_period: bool):
    p.add_argument("--digits", type=int, default=settings.digits, help="Number of OTP digits")
    p.add_argument(
        "--algorithm",
        type=str.upper,
        default=settings.algorithm.name,
        choices=[a.name for a in Algorithm],
        help="HMAC hash function",
    )
    if with_period:
        p.add_argument("--period", type=int, default=settings.period, help="TOTP time step (seconds)")
        p.add_argument("--timestamp", type=int, help="Epoch milliseconds (default: now)")
    _add_secret_args(p)


def build_parser(settings=None) -> argparse.ArgumentParser:
    if settings is None:
        settings = load_settings()

    p = argparse.ArgumentParser(prog="otpx", description="HOTP/TOTP and random OTP generator")
    p.add_argument("--verbose", action="store_true", help="Verbose (DEBUG) logging")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # hotp
    ph = sub.add_parser("hotp", help="Generate HOTP code for a specific counter")
    ph.add_argument("--counter", type=int, required=True)
    _add_otp_args(ph, settings, with_period=False)
    ph.set_defaults(func=cmd_hotp)

    # totp
    pt = sub.add_parser("totp", help="Generate the current TOTP code")
    _add_otp_args(pt, settings, with_period=True)
    pt.add_argument("--show-remaining", action="store_true", help="Also print seconds left")
    pt.set_defaults(func=cmd_totp)

    # verify
    pv = sub.add_parser("verify", help="Verify an OTP code (TOTP or HOTP)")
    sub_v = pv.add_subparsers(dest="verify_type")
    pv.set_defaults(func=cmd_help)

    pvt = sub_v.add_parser("totp", help="Verify a TOTP code")
    pvt.add_argument("--code", required=True, help="OTP code to verify")
    pvt.add_argument("--window", type=int, default=1, help="Allowed +/- step window")
    _add_otp_args(pvt, settings, with_period=True)
    pvt.set_defaults(func=cmd_verify_totp)

    pvh = sub_v.add_parser("hotp", help="Verify a HOTP code")
    pvh.add_argument("--code", required=True, help="OTP code to verify")
    pvh.add_argument("--counter", type=int, required=True, help="Current HOTP counter")
    pvh.add_argument("--look-ahead", type=int, default=0, help="Allowed counter look-ahead")
    _add_otp_args(pvh, settings, with_period=False)
    pvh.set_defaults(func=cmd_verify_hotp)

    # random
    pr = sub.add_parser("random", help="Generate a random code from a character set")
    pr.add_argument("--length", type=int, default=settings.digits)
    g = pr.add_mutually_exclusive_group()
    g.add_argument("--charset", default="numeric", choices=list(charset.CHARSETS))
    g.add_argument("--custom", help="Explicit set of characters to draw from")
    pr.add_argument("--exclude-similar", action="store_true", help="Drop O, 0, I and l")
    pr.add_argument("--case", choices=charset.CASES)
    pr.set_defaults(func=cmd_random)

    # secret
    ps = sub.add_parser("secret", help="Print a random secret as hex")
    ps.add_argument("--bytes", type=int, default=otp_core.SECRET_BYTES, help="Secret size in bytes")
    ps.set_defaults(func=cmd_secret)

    return p


def main(argv=None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(args.verbose, settings.log_level)

    try:
        return args.func(args)
    except (OTPXError, CLIError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"[!] {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
