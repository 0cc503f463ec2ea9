"""HTTP adapter – async transport for the network sink."""
from scribe.adapters.http.transport import HttpTransport, HttpxTransport, TransportResponse

__all__ = ["HttpTransport", "HttpxTransport", "TransportResponse"]
