from .partner import (
    PartnerPromoCodeLimitResponse,
    PartnerResponse,
    SetPartnerPromoCodeLimitRequest,
)
