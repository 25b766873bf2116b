"""Core client logic

Module Structure:
    - rest/ : Request builder, body handlers, response decoder and envelope
    - api/  : FusionAuthClient and per-resource service classes

Every API call follows the same path:
    FusionAuthClient.start() -> RESTClient (uri, url_segment, url_parameter,
    body_handler, verb) -> go() -> ClientResponse

go() never raises for HTTP error statuses or transport failures; check
ClientResponse.was_successful (or call raise_for_status()) before trusting
success_response.
"""
