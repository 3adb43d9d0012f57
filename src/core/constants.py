PARTNER_NOT_FOUND = "Partner not found"
LIMIT_NOT_FOUND = "Limit not found"
PARTNER_NOT_ACTIVE = "partner not active"
LIMIT_MUST_BE_POSITIVE = "limit must be greater than 0"

# dd.MM.yyyy hh:mm:ss, hh is the 12-hour clock hour
DATE_FORMAT = "%d.%m.%Y %I:%M:%S"
