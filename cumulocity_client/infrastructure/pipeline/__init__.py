"""
Pipeline Package - Infrastructure Layer

The generic request/response pipeline every API group instantiates:
path templating, query encoding, content negotiation, body projection,
request execution and response decoding.
"""

from .api_pipeline import ApiPipeline
from .body_projector import BodyProjector, FieldPolicy
from .content_negotiation import (
    ERROR_MEDIA_TYPE,
    ContentNegotiator,
    vendor_media_type,
)
from .path_templater import PathTemplater, encode_path_segment
from .query_encoder import QueryEncoder
from .request_executor import HttpxRequestExecutor
from .response_decoder import ResponseDecoder

__all__ = [
    "ApiPipeline",
    "BodyProjector",
    "FieldPolicy",
    "ERROR_MEDIA_TYPE",
    "ContentNegotiator",
    "vendor_media_type",
    "PathTemplater",
    "encode_path_segment",
    "QueryEncoder",
    "HttpxRequestExecutor",
    "ResponseDecoder",
]
