import logging
from datetime import datetime
from os import path

from .constants import CONVERSIONS
from .converter import convert
from .myparser import arg


def convert_all(vector_dir: str = '.', output_dir: str = '.') -> list:
    """converts every fixed (.rsp, output) pair in order.
    Stops at the first failure.

    Returns:
        list: (outfile, case count) for each conversion
    """
    written = []
    for infile, outfile in CONVERSIONS:
        inpath = path.join(vector_dir, infile)
        outpath = path.join(output_dir, outfile)

        logging.info(f"Starting: {inpath}")
        then = datetime.now()
        count = convert(inpath, outpath)
        delta = datetime.now() - then
        logging.info(
            f"Finished: {inpath} -> {outpath}. "
            f"{count} cases in {delta.total_seconds()} seconds")

        written.append((outpath, count))
    return written


def main():
    logging.basicConfig(level=logging.INFO)
    if arg('quiet'):
        logging.getLogger().setLevel(logging.WARNING)
    convert_all(arg('vectorDir'), arg('outputDir'))


if __name__ == "__main__":
    main()
