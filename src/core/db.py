from datetime import datetime, timezone
import logging
import uuid

from sqlmodel import Session, SQLModel, create_engine, select

from core.config import settings
from models.partners import Partner, PartnerPromoCodeLimit

logger = logging.getLogger(__name__)


def create_db_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = create_db_engine(str(settings.SQLALCHEMY_DATABASE_URI))


# make sure all SQLModel models are imported (models) before initializing DB
# otherwise, SQLModel might fail to initialize relationships properly
# for more details: https://github.com/tiangolo/full-stack-fastapi-postgresql/issues/28


def create_db_and_tables(db_engine=engine) -> None:
    SQLModel.metadata.create_all(db_engine)


def init_db(session: Session) -> None:
    # Create initial data
    partners = [
        Partner(
            id=uuid.UUID("7d994823-8226-4273-b063-1a95f3cc1df8"),
            name="Super Toys",
            is_active=True,
            partner_limits=[
                PartnerPromoCodeLimit(
                    id=uuid.UUID("e00633a5-978a-420e-a7d6-3e1dab116393"),
                    partner_id=uuid.UUID("7d994823-8226-4273-b063-1a95f3cc1df8"),
                    create_date=datetime(2020, 7, 9, tzinfo=timezone.utc),
                    end_date=datetime(2020, 10, 9, tzinfo=timezone.utc),
                    limit=100,
                )
            ],
        ),
        Partner(
            id=uuid.UUID("894b6e9b-eb5f-406c-aefa-8ccb35d39319"),
            name="A Cat For Everyone",
            is_active=True,
            partner_limits=[
                PartnerPromoCodeLimit(
                    id=uuid.UUID("c9bef066-3c5a-4e5d-9cff-bd54479f075e"),
                    partner_id=uuid.UUID("894b6e9b-eb5f-406c-aefa-8ccb35d39319"),
                    create_date=datetime(2020, 5, 3, tzinfo=timezone.utc),
                    end_date=datetime(2020, 10, 15, tzinfo=timezone.utc),
                    cancel_date=datetime(2020, 6, 16, tzinfo=timezone.utc),
                    limit=1000,
                ),
                PartnerPromoCodeLimit(
                    id=uuid.UUID("0e94624b-1ff9-430e-ba8d-ef1e3b77f2d5"),
                    partner_id=uuid.UUID("894b6e9b-eb5f-406c-aefa-8ccb35d39319"),
                    create_date=datetime(2020, 5, 3, 1, tzinfo=timezone.utc),
                    end_date=datetime(2020, 10, 15, tzinfo=timezone.utc),
                    limit=100,
                ),
            ],
        ),
        Partner(
            id=uuid.UUID("0da65561-cf56-4942-bff2-22f50cf70d43"),
            name="Fish Of Your Dreams",
            is_active=False,
            partner_limits=[
                PartnerPromoCodeLimit(
                    id=uuid.UUID("0691bb24-5fd9-4a52-a11c-34bb8bc9364e"),
                    partner_id=uuid.UUID("0da65561-cf56-4942-bff2-22f50cf70d43"),
                    create_date=datetime(2020, 7, 3, tzinfo=timezone.utc),
                    end_date=datetime(2020, 9, 15, tzinfo=timezone.utc),
                    limit=100,
                )
            ],
        ),
    ]

    for partner in partners:
        existing_partner = session.exec(
            select(Partner).where(Partner.id == partner.id)
        ).first()
        if not existing_partner:
            session.add(partner)
            logger.info("Seeded partner %s", partner.name)

    session.commit()
