"""Shared schema configuration"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys (``overall_score`` -> ``overallScore``)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
