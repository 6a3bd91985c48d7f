"""
Main entrypoint for the OSM reverse geocoder.

Usage:
    python main.py input_file.csv [output_file.csv]

Every row of the input table is reverse geocoded through Nominatim, one request per second.
The annotated table and an HTML review page are written next to the output path.
"""
import logging
import os
import sys
from datetime import datetime

from src.enrichment.geocode_csv import LATITUDE_ALIASES, LONGITUDE_ALIASES, process_csv
from src.geocoding.exceptions import InputFileNotFound

logger = logging.getLogger(__name__)


def configure_logging():
    # Create logs directory
    logs_dir = os.path.join(os.getcwd(), 'logs')
    os.makedirs(logs_dir, exist_ok=True)

    # Create log file with today's date
    log_filename = os.path.join(logs_dir, f'geocoder_{datetime.now().strftime("%Y%m%d")}.log')

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_filename),
            logging.StreamHandler()
        ]
    )


def usage(program):
    return "\n".join([
        f"Usage: python {program} input_file.csv [output_file.csv]",
        "",
        "The CSV file should contain latitude and longitude columns.",
        "Supported column names:",
        f"  - {', '.join(LATITUDE_ALIASES)}",
        f"  - {', '.join(LONGITUDE_ALIASES)}",
        "",
        "Example:",
        f"  python {program} coordinates.csv",
        f"  python {program} coordinates.csv geocoded_results.csv",
    ])


def main(argv=None):
    """
    Run the geocoder for the paths given on the command line.

    Returns the process exit code.
    """
    argv = sys.argv if argv is None else argv
    program = os.path.basename(argv[0]) if argv else "main.py"
    args = argv[1:]

    if not args:
        print(usage(program))
        return 1

    input_file = args[0]
    output_file = args[1] if len(args) > 1 else None

    configure_logging()

    try:
        results, output_file, html_file = process_csv(input_file, output_file)
    except InputFileNotFound as e:
        print(f"Error: {e}")
        return 1

    if results:
        print(f"Geocoding complete! Results saved to: {output_file}")
        print(f"Review HTML generated: {html_file}")
    else:
        print(f"No rows found in '{input_file}', nothing was written.")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
