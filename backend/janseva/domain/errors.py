"""
Error taxonomy for CMS operations.

Every operation raises one of these at its boundary; the HTTP layer
(`janseva.errors`) turns them into JSON responses.
"""
from typing import Any, Dict, Optional


class CmsError(Exception):
    status_code = 500
    code = "CmsError"

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "message": self.message}


class NotFound(CmsError):
    status_code = 404
    code = "NotFound"


class DuplicateSlug(CmsError):
    status_code = 409
    code = "DuplicateSlug"

    def __init__(self, slug: str):
        super().__init__(f"A page with slug '{slug}' already exists")
        self.slug = slug

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["slug"] = self.slug
        return data


class Unauthorized(CmsError):
    status_code = 401
    code = "Unauthorized"

    @classmethod
    def forbidden(cls, message: str = "Insufficient permissions") -> "Unauthorized":
        return cls(message, status_code=403)


class ValidationFailure(CmsError):
    status_code = 400
    code = "ValidationFailure"

    def __init__(self, message: str, *, fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields = fields or {}

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.fields:
            data["fields"] = self.fields
        return data


class StoreFailure(CmsError):
    status_code = 500
    code = "StoreFailure"

    def __init__(self, message: str = "The operation could not be completed. Please try again."):
        super().__init__(message)
