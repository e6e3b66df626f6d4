from fastapi import HTTPException


class NotFound(HTTPException):
    def __init__(self, detail: str = "Group not found"):
        super().__init__(status_code=404, detail=detail)


class ValidationError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class LedgerIntegrityError(RuntimeError):
    """
    Raised by the ledger engine when it is handed data that validation
    should have rejected (unknown member ids, empty splits).
    """
