"""Client Layer — typed async HTTP client for the public showroom API.

Invariants:
    - One method per endpoint; each returns the unwrapped, typed data payload
    - Every failure (transport, parse, failure envelope) surfaces as ShowroomClientError
"""

from showroom.client.api_client import (  # noqa: F401
    ShowroomClient, ShowroomClientError, encode_filters, sort_images_for_display,
)
