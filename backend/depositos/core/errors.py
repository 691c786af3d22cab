# depositos/core/errors.py


class DepositosError(Exception):
    """Base error for the depositos backend."""


class FetchError(DepositosError):
    """The store could not be read (network, database or payload failure)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class NotFoundError(DepositosError):
    def __init__(self, deposito_id: int):
        super().__init__(f"Deposito {deposito_id} not found")
        self.deposito_id = deposito_id
