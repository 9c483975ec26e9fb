from .response_wrappers import ActionResponse, PaginatedResponse

__all__ = ["ActionResponse", "PaginatedResponse"]
