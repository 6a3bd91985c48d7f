"""
Static HTML review page for an enriched table.

Coordinates shown on the page are looked up with a narrower alias set than
the geocoding step uses: X and Y columns are not displayed.
"""
import logging
from html import escape
from typing import Iterable, List, Optional

from src.models.record import EnrichedRecord, ReviewStatus

logger = logging.getLogger(__name__)

REVIEW_LATITUDE_ALIASES = ("lat", "latitude", "Lat", "Latitude")
REVIEW_LONGITUDE_ALIASES = ("lon", "longitude", "Long", "Longitude", "lng")

STATUS_CLASSES = {
    ReviewStatus.PENDING.value: "pending",
    ReviewStatus.ERROR.value: "error",
    ReviewStatus.APPROVED.value: "approved",
    ReviewStatus.REJECTED.value: "rejected",
}

HTML_HEADER = """<!DOCTYPE html>
<html>
<head>
  <title>Address Review</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 20px; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
    th {{ background-color: #f2f2f2; }}
    .pending {{ background-color: #fff3cd; }}
    .error {{ background-color: #f8d7da; }}
    .approved {{ background-color: #d4edda; }}
    .rejected {{ background-color: #f5c6cb; }}
    .links a {{ margin-right: 10px; }}
    .coordinates {{ font-family: monospace; }}
  </style>
</head>
<body>
  <h1>Address Review - {count} locations</h1>
  <p>Click the links to verify each location, then update the review status.</p>

  <table>
    <thead>
      <tr>
        <th>Coordinates</th>
        <th>Address</th>
        <th>Links</th>
        <th>Status</th>
        <th>Notes</th>
      </tr>
    </thead>
    <tbody>
"""

HTML_ROW = """      <tr class="{status_class}">
        <td class="coordinates">{lat}, {lon}</td>
        <td>{address}</td>
        <td class="links">
          {maps_link}
          {street_view_link}
        </td>
        <td>{status}</td>
        <td>{notes}</td>
      </tr>
"""

HTML_FOOTER = """    </tbody>
  </table>

  <h2>Instructions:</h2>
  <ol>
    <li>Click "Maps" to see the location on Google Maps</li>
    <li>Click "Street View" to see the actual location</li>
    <li>Verify the location</li>
    <li>Update your CSV with status: APPROVED, REJECTED, or NEEDS_UPDATE</li>
  </ol>
</body>
</html>
"""


def status_class(status: Optional[str]) -> str:
    return STATUS_CLASSES.get(status, "pending")


def _first(row, aliases):
    for alias in aliases:
        if row.get(alias) is not None:
            return row[alias]
    return ""


def _anchor(url, label):
    if not url:
        return ""
    return f"<a href='{escape(url)}' target='_blank'>{label}</a>"


def render_row(record: EnrichedRecord) -> str:
    row = record.to_row()
    return HTML_ROW.format(
        status_class=status_class(row.get("review_status")),
        lat=escape(str(_first(row, REVIEW_LATITUDE_ALIASES))),
        lon=escape(str(_first(row, REVIEW_LONGITUDE_ALIASES))),
        address=escape(row["address"]),
        maps_link=_anchor(row["google_maps_link"], "Maps"),
        street_view_link=_anchor(row["street_view_link"], "Street View"),
        status=escape(row["review_status"]),
        notes=escape(row["notes"]),
    )


def render_review_html(records: Iterable[EnrichedRecord]) -> str:
    records = list(records)
    parts: List[str] = [HTML_HEADER.format(count=len(records))]
    parts.extend(render_row(record) for record in records)
    parts.append(HTML_FOOTER)
    return "".join(parts)


def write_review_html(records: Iterable[EnrichedRecord], file_path: str) -> None:
    records = list(records)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(render_review_html(records))
    logger.info(f"Review page with {len(records)} rows written to {file_path}")
