from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


MISSING_COORDINATES_ADDRESS = "Missing coordinates"
MISSING_COORDINATES_NOTE = "Missing lat/long coordinates"


class ReviewStatus(str, Enum):
    """
    Review workflow label. The pipeline only assigns PENDING and ERROR;
    APPROVED and REJECTED are set by hand in the output table afterwards.
    """
    PENDING = "PENDING"
    ERROR = "ERROR"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class EnrichedRecord(BaseModel):
    columns: Dict[str, Optional[str]] = Field(default_factory=dict)
    address: str
    google_maps_link: str = ""
    street_view_link: str = ""
    review_status: ReviewStatus = ReviewStatus.PENDING
    notes: str = ""

    @classmethod
    def geocoded(cls, row, address, google_maps_link, street_view_link):
        return cls(
            columns=dict(row),
            address=address,
            google_maps_link=google_maps_link,
            street_view_link=street_view_link,
            review_status=ReviewStatus.PENDING,
        )

    @classmethod
    def lookup_failed(cls, row, message):
        return cls(
            columns=dict(row),
            address=f"Error: {message}",
            review_status=ReviewStatus.ERROR,
            notes=message,
        )

    @classmethod
    def missing_coordinates(cls, row):
        return cls(
            columns=dict(row),
            address=MISSING_COORDINATES_ADDRESS,
            review_status=ReviewStatus.ERROR,
            notes=MISSING_COORDINATES_NOTE,
        )

    def to_row(self) -> Dict[str, Optional[str]]:
        """
        Flatten to an output table row: input columns first, then the appended
        fields. An input column sharing a name with an appended field keeps its
        position and takes the new value.
        """
        row = dict(self.columns)
        row.update({
            "address": self.address,
            "google_maps_link": self.google_maps_link,
            "street_view_link": self.street_view_link,
            "review_status": self.review_status.value,
            "notes": self.notes,
        })
        return row
