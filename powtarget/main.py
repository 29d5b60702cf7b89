import argparse
import logging
from .config import Settings
from .consensus.targets import (
    difficulty_to_target,
    target_to_diff1,
    target_to_difficulty_estimate,
)
from .errors import TargetConversionError
from .logging_setup import setup_logging
from .utils.units import format_hashrate

logger = logging.getLogger("PowTarget")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="powtarget", description="Proof-of-work difficulty/target conversions"
    )
    p.add_argument("-v", "--verbose", "--debug", action="store_true", dest="verbose")
    p.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    t = sub.add_parser("target", help="Convert a difficulty to a 64-digit hex target")
    t.add_argument("difficulty", type=float)
    t.add_argument("--prefix", action="store_true", help="Prepend 0x to the target")

    d = sub.add_parser("difficulty", help="Estimate the difficulty of a hex target")
    d.add_argument("target")

    h = sub.add_parser("hashrate", help="Format a hash rate in h/s")
    h.add_argument("rate", type=float)

    s = sub.add_parser("serve", help="Serve the HTTP API")
    s.add_argument("--ip", default=None)
    s.add_argument("--port", type=int, default=None, dest="dashboard_port")
    s.add_argument("--prefix", action="store_true", help="Prepend 0x to targets by default")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    s = Settings()
    if args.log_level:
        s.log_level = args.log_level
    elif args.verbose:
        s.log_level = "DEBUG"

    if args.command == "serve":
        from .run import run_with_settings

        if args.ip is not None:
            s.ip = args.ip
        if args.dashboard_port is not None:
            s.dashboard_port = args.dashboard_port
        if args.prefix:
            s.hex_prefix = True
        run_with_settings(s)
        return

    setup_logging(s.log_level, s.access_log_level)
    try:
        if args.command == "target":
            print(difficulty_to_target(args.difficulty, args.prefix or s.hex_prefix))
        elif args.command == "difficulty":
            print(f"estimate: {target_to_difficulty_estimate(args.target)!r}")
            print(f"diff1: {target_to_diff1(args.target)!r}")
        elif args.command == "hashrate":
            print(format_hashrate(args.rate))
    except TargetConversionError as e:
        logger.debug("%s command rejected its input: %r", args.command, e)
        raise SystemExit(f"error: {e}")


if __name__ == "__main__":
    main()
