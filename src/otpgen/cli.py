import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from .config import HOTP, TOTP, Config, secret_from_env
from .exceptions import OTPError
from .hotp import generate_hotp
from .totp import generate_totp

logger = logging.getLogger(__name__)

USAGE = "otpgen (-t | -h -c COUNTER) -s SECRET [-a ALGORITHM] [-d DIGITS] [-p PERIOD]"


def build_parser() -> argparse.ArgumentParser:
    # -h selects HOTP, so help lives on --help alone.
    parser = argparse.ArgumentParser(
        prog="otpgen",
        usage=USAGE,
        description="Print an RFC 4226 (HOTP) or RFC 6238 (TOTP) one-time password.",
        add_help=False,
    )
    # The last of -t and -h given wins.
    parser.add_argument("-t", "--totp", dest="method", action="store_const", const=TOTP, help="time-based code")
    parser.add_argument("-h", "--hotp", dest="method", action="store_const", const=HOTP, help="counter-based code")
    parser.add_argument("-c", "--counter", type=int, default=-1, help="HOTP counter")
    parser.add_argument("-s", "--secret", help="Base32 secret (defaults to $OTPGEN_SECRET)")
    parser.add_argument("-a", "--algorithm", default="sha1", help="sha1, sha256 or sha512 (default: sha1)")
    parser.add_argument("-d", "--digits", type=int, default=6, help="code length (default: 6)")
    parser.add_argument("-p", "--period", type=int, default=30, help="TOTP period in seconds (default: 30)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log to stderr")
    parser.add_argument("--help", action="help", help="show this help message and exit")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> Config:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s: %(levelname)s: %(message)s")

    return Config(
        method=args.method,
        secret=args.secret or secret_from_env(),
        algorithm=args.algorithm,
        counter=args.counter,
        digits=args.digits,
        period=args.period,
    )


def run(config: Config, clock: Optional[Callable[[], float]] = None) -> str:
    """
    Generates the code a validated :class:`Config` asks for.

    :param clock: returns the current Unix time, defaults to ``time.time``;
        only read for TOTP
    """
    if config.method == HOTP:
        return generate_hotp(config.secret, config.algorithm, config.counter, config.digits)
    now = (clock or time.time)()
    logger.debug("TOTP at %s with a %d second period", now, config.period)
    return generate_totp(config.secret, config.algorithm, config.period, config.digits, now)


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_config(argv)
    try:
        code = run(config.validate())
    except OTPError as e:
        print("error: {}".format(e), file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    print(code)
    return 0
