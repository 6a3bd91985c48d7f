import logging
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from src.enrichment.csv_io import read_rows, write_rows
from src.enrichment.links import google_maps_link, street_view_link
from src.geocoding.exceptions import GeocodingError
from src.geocoding.nominatim import get_address_from_coordinates, to_float
from src.geocoding.rate_limit import FixedDelayPacer
from src.models.record import EnrichedRecord, ReviewStatus
from src.review.html_report import write_review_html

logger = logging.getLogger(__name__)

# Accepted column names, probed in order
LATITUDE_ALIASES = ("lat", "latitude", "Lat", "Latitude", "Y")
LONGITUDE_ALIASES = ("lon", "longitude", "Long", "Longitude", "lng", "X")

RATE_LIMIT_DELAY = 1

Row = Dict[str, Optional[str]]
Lookup = Callable[[float, float], str]


def first_value(row: Row, aliases: Iterable[str]) -> Optional[str]:
    for alias in aliases:
        value = row.get(alias)
        if value is not None:
            return value
    return None


def extract_coordinates(row: Row) -> Optional[Tuple[str, str]]:
    """Return the raw (lat, lon) strings, or None when either is missing."""
    lat = first_value(row, LATITUDE_ALIASES)
    lon = first_value(row, LONGITUDE_ALIASES)
    if lat is None or lon is None:
        return None
    return lat, lon


def default_output_path(input_file: str) -> str:
    if ".csv" in input_file:
        return input_file.replace(".csv", "_geocoded.csv")
    return f"{input_file}_geocoded.csv"


def review_html_path(output_file: str) -> str:
    if ".csv" in output_file:
        return output_file.replace(".csv", "_review.html")
    return f"{output_file}_review.html"


def enrich_row(row: Row, lookup: Optional[Lookup] = None) -> EnrichedRecord:
    """
    Geocode a single row. Lookup failures are recorded on the returned
    record; only unexpected errors propagate.
    """
    record, _ = _enrich(row, lookup)
    return record


def _enrich(row: Row, lookup: Optional[Lookup]) -> Tuple[EnrichedRecord, bool]:
    """Enrich a row and report whether the lookup step was reached."""
    coordinates = extract_coordinates(row)
    if coordinates is None:
        logger.warning(f"Missing coordinates in row {row}")
        return EnrichedRecord.missing_coordinates(row), False

    if lookup is None:
        lookup = get_address_from_coordinates

    lat, lon = coordinates
    try:
        lat_f, lon_f = to_float(lat), to_float(lon)
        address = lookup(lat_f, lon_f)
    except GeocodingError as e:
        logger.error(f"Error processing {lat}, {lon}: {e}")
        return EnrichedRecord.lookup_failed(row, str(e)), True

    logger.info(f"Processed: {lat}, {lon} -> {address}")
    return EnrichedRecord.geocoded(
        row,
        address,
        google_maps_link(lat_f, lon_f),
        street_view_link(lat_f, lon_f),
    ), True


def enrich_rows(
    rows: Iterable[Row],
    lookup: Optional[Lookup] = None,
    pacer: Optional[FixedDelayPacer] = None,
) -> List[EnrichedRecord]:
    """
    Enrich rows strictly one after another, in input order.

    The pacer waits after every row that reached the lookup step, whatever
    its outcome; rows without coordinates never touch the network and are
    not throttled.
    """
    if pacer is None:
        pacer = FixedDelayPacer(RATE_LIMIT_DELAY)

    results = []
    for row in rows:
        record, looked_up = _enrich(row, lookup)
        results.append(record)
        if looked_up:
            pacer.wait()
    return results


def process_csv(
    input_file: str,
    output_file: Optional[str] = None,
    lookup: Optional[Lookup] = None,
    pacer: Optional[FixedDelayPacer] = None,
) -> Tuple[List[EnrichedRecord], str, str]:
    """
    Run the whole pipeline for one file.

    Results stay in memory until every row is done and are written once at
    the end, so an interrupted run leaves no output behind. With no input
    rows neither file is written.

    Raises:
        InputFileNotFound: the input path does not exist.

    Returns:
        (records, output table path, review page path)
    """
    output_file = output_file or default_output_path(input_file)
    html_file = review_html_path(output_file)

    start_time = time.time()
    rows = read_rows(input_file)
    logger.info(f"Loaded {len(rows)} rows from {input_file}")

    results = enrich_rows(rows, lookup=lookup, pacer=pacer)

    if write_rows((record.to_row() for record in results), output_file):
        write_review_html(results, html_file)
    else:
        logger.warning(f"No rows in {input_file}, nothing written")

    errors = sum(1 for record in results if record.review_status == ReviewStatus.ERROR)
    logger.info(
        f"Geocoded {len(results)} rows ({errors} errors) in {time.time() - start_time:.2f} seconds, "
        f"output: {output_file}, review page: {html_file}"
    )
    return results, output_file, html_file
