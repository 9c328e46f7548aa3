# shop_api/domain/errors.py
"""
Bledy domenowe mapowane 1:1 na kody HTTP przez handlery w shop_api.api.errors.
"""


class ShopError(Exception):
    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.error
        super().__init__(self.message)


class ValidationError(ShopError):
    status_code = 400
    error = "Bad Request"


class UnauthorizedError(ShopError):
    status_code = 401
    error = "Unauthorized"


class ForbiddenError(ShopError):
    status_code = 403
    error = "Forbidden"


class NotFoundError(ShopError):
    status_code = 404
    error = "Not Found"


class ConflictError(ShopError):
    status_code = 409
    error = "Conflict"
