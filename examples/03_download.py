"""
Download files listed in a queue file
"""
import logging
import os
import sys
from pathlib import Path

from rapidshare import RapidshareClient, RapidshareError, setup_logging
from rapidshare.core.files import is_file_url


def main(queue_path: str, dest: str = "."):
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    setup_logging(logging.INFO)

    lines = Path(queue_path).read_text().splitlines()
    files = [line.strip() for line in lines if is_file_url(line.strip())]

    with RapidshareClient(os.environ["RAPIDSHARE_COOKIE"]) as rs:
        for file in files:
            if not rs.check_files(file)[0].is_ok:
                print(f"File not found: [{file}]")
                continue
            try:
                path = rs.download(file, dest)
                print(f"Saved {path}")
            except RapidshareError as e:
                print(f"Failed {file}: {e}")


if __name__ == "__main__":
    main(*sys.argv[1:])
