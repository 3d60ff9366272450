import argparse
import logging
import sys
from pathlib import Path

from logging_config import configure_logging
from kepler.kepler import ConvergenceError
from rendezvous.app import run
from rendezvous.config import RendezvousConfig
from tle_io.fetch import ISS_TXT_URL, TLEFetchError


def build_parser():
    p = argparse.ArgumentParser(description="ISS TLE -> ECI state vector, epoch and plane projection")
    p.add_argument("--url", default=ISS_TXT_URL, help="TLE source URL")
    p.add_argument("--tle-file", default="./data/file.txt", help="local TLE copy")
    p.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    p.add_argument("--offline", action="store_true", help="skip the download, read --tle-file")
    p.add_argument("--check", action="store_true", help="verify TLE checksums and line lengths")
    p.add_argument("--plot", action="store_true", help="plot the 2D projection")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("--log-file", default=None, help="also write log records to this file")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    cfg = RendezvousConfig(
        tle_url=args.url,
        tle_path=Path(args.tle_file),
        timeout=args.timeout,
        offline=args.offline,
        check_tle=args.check,
        plot=args.plot,
    )

    try:
        run(cfg)
    except (ValueError, ConvergenceError, TLEFetchError, OSError) as ex:
        print(f"Error: {ex}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
