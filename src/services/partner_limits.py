import logging
from datetime import datetime, timezone
from typing import List
import uuid

from core import constants
from core.exceptions import InvalidArgumentError, InvalidStateError, NotFoundError
from models.partners import Partner, PartnerPromoCodeLimit
from repositories import Repository
from utils.formatting import as_utc

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PartnerLimitManager:
    """Applies promo code limit changes to partners.

    Holds no state between calls, the partner record is loaded from and
    saved back to the repository on every operation.
    """

    def __init__(self, partners: Repository[Partner]):
        self.partners = partners

    def get_partners(self) -> List[Partner]:
        return self.partners.get_all()

    def get_limit(self, partner_id: uuid.UUID, limit_id: uuid.UUID) -> PartnerPromoCodeLimit:
        partner = self.partners.get_by_id(partner_id)
        if partner is None:
            raise NotFoundError()

        for limit in partner.partner_limits:
            if limit.id == limit_id:
                return limit
        raise NotFoundError(constants.LIMIT_NOT_FOUND)

    def set_limit(
        self,
        partner_id: uuid.UUID,
        limit: int,
        end_date: datetime | None = None,
    ) -> PartnerPromoCodeLimit:
        """
        Replace the partner's active limit with a new one.

        The previous active limit is cancelled and the issued counter is
        reset. If the previous limit was already cancelled the counter is
        left alone. Every precondition is checked before the partner is
        touched, so a rejected request leaves it unchanged.
        """
        partner = self._get_active_partner(partner_id)

        if limit <= 0:
            logger.warning("Rejected limit %s for partner %s", limit, partner_id)
            raise InvalidArgumentError()

        now = _now()
        active_limit = partner.active_limit
        if active_limit is not None:
            partner.number_issued_promo_codes = 0
            active_limit.cancel_date = now

        new_limit = PartnerPromoCodeLimit(
            limit=limit,
            partner_id=partner.id,
            create_date=now,
            end_date=as_utc(end_date),
        )
        partner.partner_limits.append(new_limit)
        self.partners.update(partner)

        logger.info(
            "Set limit %s for partner %s (previous limit cancelled: %s)",
            limit,
            partner_id,
            active_limit is not None,
        )
        return new_limit

    def cancel_active_limit(self, partner_id: uuid.UUID) -> None:
        partner = self._get_active_partner(partner_id)

        # issued counter is not reset here
        active_limit = partner.active_limit
        if active_limit is not None:
            active_limit.cancel_date = _now()
            logger.info("Cancelled limit %s for partner %s", active_limit.id, partner_id)

        self.partners.update(partner)

    def _get_active_partner(self, partner_id: uuid.UUID) -> Partner:
        partner = self.partners.get_by_id(partner_id)
        if partner is None:
            logger.warning("Partner %s not found", partner_id)
            raise NotFoundError()

        if not partner.is_active:
            logger.warning("Partner %s is not active", partner_id)
            raise InvalidStateError()
        return partner
