"""
Command line entry point.

Reads the BSC5 catalog, the supplement and the symbol table and reports
what was found.  Optionally prints the details of a single star.
"""

import argparse
import datetime
import logging
from pathlib import Path

from BrightStars.config import Config
from BrightStars.logconf import apply_log_config
from .alphabet_loader import load_alphabet


def main():
    """
    Main entry point for catalog reading.
    Handles command-line arguments and loads all catalogs.
    """
    # catalogs imports this package, so StarsReader is imported here
    from BrightStars.catalogs import StarsReader

    parser = argparse.ArgumentParser(description="Bright Star Catalogue reader")
    parser.add_argument(
        "-c", "--config", help="Config file to use instead of the user config"
    )
    parser.add_argument(
        "-n",
        "--names",
        help="File of 'identifier = proper name' pairs used to name stars",
    )
    parser.add_argument(
        "-d", "--details", help="Print details of star NUMBER", type=int
    )
    parser.add_argument("--logconf", help="Logging configuration (json5)")
    parser.add_argument(
        "-x", "--verbose", help="Set logging to debug mode", action="store_true"
    )
    parser.add_argument("-l", "--log", help="Log to file", action="store_true")
    args = parser.parse_args()

    logger = logging.getLogger()
    if args.logconf:
        apply_log_config(Path(args.logconf))
    else:
        logging.basicConfig(format="%(asctime)s %(name)s: %(levelname)s %(message)s")
        logger.setLevel(logging.INFO)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.log:
        datenow = datetime.datetime.now()
        filehandler = f"BrightStars-{datenow:%Y%m%d-%H_%M_%S}.log"
        fh = logging.FileHandler(filehandler)
        fh.setLevel(logger.level)
        logger.addHandler(fh)

    config = Config(config_file_path=args.config) if args.config else Config()
    name_dictionary = load_alphabet(args.names) if args.names else {}
    reader = StarsReader.from_config(config, name_dictionary)

    stars = reader.read_stars()
    named = sum(1 for star in stars if star.proper_name)
    logging.info(f"{len(stars)} stars, {named} with proper names")

    if reader.alphabet_path is not None and reader.alphabet_path.exists():
        alphabet = reader.read_symbol_table()
        logging.info(f"{len(alphabet)} symbols in {reader.alphabet_path}")

    if args.details is not None:
        details = reader.get_star_details(args.details)
        if details is None:
            logging.warning(f"Star {args.details} not found")
        else:
            print(details.to_json())


if __name__ == "__main__":
    main()
