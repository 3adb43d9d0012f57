from datetime import datetime, timezone

from schemas import SetPartnerPromoCodeLimitRequest


def test_request_end_date_without_timezone_is_utc():
    request = SetPartnerPromoCodeLimitRequest.model_validate(
        {"limit": 10, "endDate": "2021-01-01T00:00:00"}
    )

    assert request.end_date == datetime(2021, 1, 1, tzinfo=timezone.utc)
    assert request.end_date.tzinfo is timezone.utc


def test_request_end_date_converted_to_utc():
    request = SetPartnerPromoCodeLimitRequest(limit=10, end_date="2021-01-01T05:00:00+05:00")

    assert request.end_date == datetime(2021, 1, 1, tzinfo=timezone.utc)
    assert request.end_date.tzinfo is timezone.utc


def test_request_without_end_date():
    request = SetPartnerPromoCodeLimitRequest(limit=10)

    assert request.end_date is None
