from lightrpc.transport.http import HTTPSender, build_http_request, create_http_client

__all__ = ["HTTPSender", "build_http_request", "create_http_client"]
