#!/usr/bin/env python3
"""
otp_cli.py — CLI wrapper around the TOTP core.

Subcommands:
- secret : print a new random base32 secret
- info   : show configuration, current code and provisioning URI
- code   : print the current code (--live refreshes every second)
- verify : check a code against the configured secret
- uri    : print the otpauth:// URI
- qr     : write the provisioning QR code as PNG

eg..:
    totp-generator secret --length 32
    totp-generator info --secret JBSWY3DPEHPK3PXP --issuer MyService
    totp-generator code --secret JBSWY3DPEHPK3PXP --digits 8 --period 60 --live
    totp-generator verify --secret JBSWY3DPEHPK3PXP --code 123456 --window 1
    totp-generator qr --secret JBSWY3DPEHPK3PXP --output totp-qr.png
"""

import argparse
import logging
import sys
import time

from . import qr
from .cache import TimeStepCache
from .engine import TOTPEngine
from .errors import OTPError
from .hotp import Algorithm
from .secret import DEFAULT_SECRET_LENGTH, generate_secret

logger = logging.getLogger(__name__)


def _engine_from_args(args) -> TOTPEngine:
    return TOTPEngine.from_mapping({
        "secret": args.secret,
        "issuer": args.issuer,
        "accountName": args.account,
        "algorithm": args.algorithm,
        "digits": args.digits,
        "period": args.period,
        "window": args.window,
    })


def _mask(secret: str) -> str:
    return secret[:4] + "*" * max(len(secret) - 4, 0)


# --- CLI command handlers ---
def cmd_secret(args):
    print(generate_secret(args.length))
    return 0


def cmd_info(args):
    engine = _engine_from_args(args)
    c = engine.config
    now = time.time()
    print("\n=== TOTP Generator Information ===")
    print(f"Issuer: {c.issuer}")
    print(f"Account: {c.account_name}")
    print(f"Secret: {_mask(c.secret) if not args.show_secret else c.secret}")
    print(f"Algorithm: {c.algorithm.value}")
    print(f"Digits: {c.digits}")
    print(f"Period: {c.period} seconds")
    print(f"\nCurrent TOTP: {engine.generate(now)}")
    print(f"Remaining time: {engine.remaining_seconds(now)} seconds")
    print(f"\nOtpAuth URI: {engine.provisioning_uri()}")
    print("\n=================================\n")
    return 0


def cmd_code(args):
    engine = _engine_from_args(args)
    cache = TimeStepCache(engine)
    if not args.live:
        current = cache.current()
        print(f"TOTP: {current['code']}  (valid ~{current['remaining']:2d}s)")
        return 0

    print("Press Ctrl+C to quit. Generating TOTP in real time...\n")
    last_code = None
    try:
        while True:
            current = cache.current()
            if current["code"] != last_code:
                print(f"TOTP: {current['code']}  (valid ~{current['remaining']:2d}s)")
                last_code = current["code"]
            else:
                print(f".. {current['remaining']:2d}s left", end="\r", flush=True)
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nBye.")
    return 0


def cmd_verify(args):
    engine = _engine_from_args(args)
    if engine.verify(args.code):
        print("[+] TOTP code is VALID")
        return 0
    print("[-] TOTP code is INVALID")
    return 1


def cmd_uri(args):
    print(_engine_from_args(args).provisioning_uri())
    return 0


def cmd_qr(args):
    uri = _engine_from_args(args).provisioning_uri()
    with open(args.output, "wb") as f:
        f.write(qr.render_png(uri))
    print(f"QR code generated successfully: {args.output}")
    return 0


def cmd_help(args):
    print("'totp-generator -h' for help.")
    return 0


# --- Argparse builder ---
def _add_engine_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--secret", help="Base32 secret (a random one is generated if omitted)")
    p.add_argument("--issuer", help="Issuer label for otpauth URI")
    p.add_argument("--account", help="Account label for otpauth URI")
    p.add_argument("--algorithm", choices=[a.value for a in Algorithm], type=str.upper)
    p.add_argument("--digits", type=int, help="Number of OTP digits (6-10)")
    p.add_argument("--period", type=int, help="TOTP time step (seconds)")
    p.add_argument("--window", type=int, help="Allowed +/- step window")
    p.add_argument("--verbose", action="store_true", help="Verbose output")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="TOTP generator: codes, verification and otpauth provisioning")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help, verbose=False)

    ps = sub.add_parser("secret", help="Generate a random base32 secret")
    ps.add_argument("--length", type=int, default=DEFAULT_SECRET_LENGTH)
    ps.add_argument("--verbose", action="store_true")
    ps.set_defaults(func=cmd_secret)

    pi = sub.add_parser("info", help="Show configuration, current code and URI")
    _add_engine_options(pi)
    pi.add_argument("--show-secret", action="store_true", help="Print the secret unmasked")
    pi.set_defaults(func=cmd_info)

    pc = sub.add_parser("code", help="Print the current TOTP code")
    _add_engine_options(pc)
    pc.add_argument("--live", action="store_true", help="Refresh every second until Ctrl+C")
    pc.set_defaults(func=cmd_code)

    pv = sub.add_parser("verify", help="Verify a TOTP code")
    _add_engine_options(pv)
    pv.add_argument("--code", required=True, help="OTP code to verify")
    pv.set_defaults(func=cmd_verify)

    pu = sub.add_parser("uri", help="Print the otpauth URI")
    _add_engine_options(pu)
    pu.set_defaults(func=cmd_uri)

    pq = sub.add_parser("qr", help="Write the provisioning QR code as PNG")
    _add_engine_options(pq)
    pq.add_argument("--output", default="totp-qr.png", help="PNG file to write")
    pq.set_defaults(func=cmd_qr)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[+] %(message)s")
    try:
        return args.func(args)
    except (OTPError, ValueError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"[!] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
