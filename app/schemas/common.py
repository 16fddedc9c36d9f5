from pydantic import BaseModel
from pydantic.alias_generators import to_camel

SEASON_PATTERN = "^(peak|off-peak|shoulder)$"
STATUS_PATTERN = "^(planned|confirmed|completed|cancelled)$"
METHOD_PATTERN = "^(Smart|Manual|Hybrid)$"

class CamelModel(BaseModel):
    """Base schema exchanged with the frontend in camelCase"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
