"""HTTP middleware applied in assignment_hub.main."""

from assignment_hub.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
