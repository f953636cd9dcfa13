"""Column name heuristics."""

from collections.abc import Callable

# Faker expressions (without the faker receiver)
INTEGER = "random_int()"
TOKEN = "sha1()"
URL = "url()"

ID_SUFFIX = "_id"
TOKEN_SUFFIX = "_token"
URL_SUFFIX = "_url"

US_LOCALE = "en_US"


def _county(locale: str, size: int | None) -> str:
    if locale == US_LOCALE:
        return "parse('{{city}} County')"
    return "state()"


def _country(locale: str, size: int | None) -> str:
    if size == 2:
        return "country_code()"
    if size == 3:
        return "country_code(representation='alpha-3')"
    if size in (5, 6):
        return "locale()"
    return "country()"


def _title(locale: str, size: int | None) -> str:
    if size is None or size <= 10:
        return "prefix()"
    return "sentence()"


# Exact column name → expression, or → callable(locale, size) for
# locale/size-dependent rules
NAME_RULES: dict[str, str | Callable[[str, int | None], str]] = {
    "login": "user_name()",
    "email_address": "email()",
    "emailaddress": "email()",
    "phone": "phone_number()",
    "telephone": "phone_number()",
    "telnumber": "phone_number()",
    "phonenumber": "phone_number()",
    "town": "city()",
    "postalcode": "postcode()",
    "postal_code": "postcode()",
    "zipcode": "postcode()",
    "zip_code": "postcode()",
    "province": _county,
    "county": _county,
    "country": _country,
    "currency": "currency_code()",
    "currencycode": "currency_code()",
    "currency_code": "currency_code()",
    "website": URL,
    "companyname": "company()",
    "company_name": "company()",
    "employer": "company()",
    "title": _title,
}


def parse_size(size: int | str | None) -> int | None:
    """
    Get the leading length of a size.

    Args:
        size: Size as int, "length" or "length,precision" string, or None

    Returns:
        Length as int, or None when it is absent or not numeric
    """
    if size is None or isinstance(size, int):
        return size

    head = str(size).split(",", 1)[0].strip()
    if not head.isdigit():
        return None
    return int(head)


class NameHeuristicMatcher:
    """Map column names to Faker expressions regardless of the column type."""

    def __init__(self, locale: str = US_LOCALE):
        """
        Initialize matcher.

        Args:
            locale: Faker locale, used by the province/county rule
        """
        self.locale = locale

    def match(self, name: str, size: int | str | None = None) -> str | None:
        """
        Match a lower-cased column name against the rule table.

        Args:
            name: Lower-cased column name (with or without underscores)
            size: Column size, used by the country and title rules

        Returns:
            Faker expression or None if no rule matches
        """
        if name.endswith(ID_SUFFIX):
            return INTEGER

        if name.endswith(TOKEN_SUFFIX):
            return TOKEN

        rule = NAME_RULES.get(name)
        if rule is None:
            return None
        if callable(rule):
            return rule(self.locale, parse_size(size))
        return rule

    @staticmethod
    def match_suffix(name: str) -> str | None:
        """Match the low-priority `_url` suffix rule."""
        if name.endswith(URL_SUFFIX):
            return URL
        return None
