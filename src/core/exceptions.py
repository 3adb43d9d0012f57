from fastapi import status

from core import constants


class PartnerLimitError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(PartnerLimitError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"

    def __init__(self, detail: str = constants.PARTNER_NOT_FOUND):
        super().__init__(detail)


class InvalidStateError(PartnerLimitError):
    error = "invalid_state"

    def __init__(self, detail: str = constants.PARTNER_NOT_ACTIVE):
        super().__init__(detail)


class InvalidArgumentError(PartnerLimitError):
    error = "invalid_argument"

    def __init__(self, detail: str = constants.LIMIT_MUST_BE_POSITIVE):
        super().__init__(detail)
