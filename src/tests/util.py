from datetime import datetime, timezone
import uuid

from models import Partner, PartnerPromoCodeLimit

PARTNER_ID = uuid.UUID("7d994823-8226-4273-b063-1a95f3cc1df8")
LIMIT_ID = uuid.UUID("e00633a5-978a-420e-a7d6-3e1dab116393")


def create_base_partner() -> Partner:
    return Partner(
        id=PARTNER_ID,
        name="Super Toys",
        is_active=True,
        partner_limits=[
            PartnerPromoCodeLimit(
                id=LIMIT_ID,
                partner_id=PARTNER_ID,
                create_date=datetime(2020, 7, 9, tzinfo=timezone.utc),
                end_date=datetime(2020, 10, 9, tzinfo=timezone.utc),
                limit=100,
            )
        ],
    )
