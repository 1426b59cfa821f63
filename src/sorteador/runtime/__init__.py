from .session import DrawSession, make_request_id

__all__ = ["DrawSession", "make_request_id"]
