"""Curated caption example shown to logged-in users."""

from datetime import datetime
from typing import Optional

from humor.domain.model.common import DomainModel
from humor.domain.value import CaptionExampleId, ImageId


class CaptionExample(DomainModel):
    """Caption example with an explanation of why it works."""

    id: CaptionExampleId
    created_datetime_utc: datetime
    modified_datetime_utc: Optional[datetime] = None
    image_description: str
    caption: str
    explanation: str
    priority: int = 0
    image_id: Optional[ImageId] = None
