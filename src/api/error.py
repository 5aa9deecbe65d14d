from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Rendered as 500; only public_message reaches the client"""

    def __init__(self, base_error: Error, public_message: str = "Server error"):
        self.base_error = base_error
        self.public_message = public_message
        super().__init__(base_error.message)
