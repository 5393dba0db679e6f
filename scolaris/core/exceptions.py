from fastapi import status


class ServiceError(Exception):
    """
    Refused operation in a service. Raised before the document is touched,
    so a caught ServiceError never leaves a partial write behind.
    """

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"ServiceError({self.status_code}, {self.message!r})"
