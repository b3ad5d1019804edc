from .request_executor import RequestExecutor, request, request_sync

__all__ = ["RequestExecutor", "request", "request_sync"]
