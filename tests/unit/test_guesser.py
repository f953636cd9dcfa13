"""Tests for TypeGuesser strategy order and name/type guesses."""

import pytest

from factory_prefill import NativeGeneratorCatalog, TypeGuesser


def test_guess_boolean_by_type(guesser: TypeGuesser):
    """Should guess boolean values from the type."""
    assert guesser.guess("is_verified", "boolean") == "boolean()"


def test_guess_integer_by_type(guesser: TypeGuesser):
    """Should guess integers, parameterized by the size when known."""
    assert guesser.guess("integer", "integer") == "random_number()"
    assert guesser.guess("integer", "integer", 10) == "random_number(digits=10)"

    assert guesser.guess("big_int", "bigint") == "random_number()"
    assert guesser.guess("big_int", "bigint", 10) == "random_number(digits=10)"

    assert guesser.guess("small_int", "smallint") == "random_number()"
    assert guesser.guess("small_int", "smallint", 10) == "random_number(digits=10)"


def test_guess_decimal_by_type(guesser: TypeGuesser):
    """Should guess floats for decimals with a scale."""
    assert guesser.guess("decimal_value", "decimal", "10,2") == (
        "pyfloat(left_digits=8, right_digits=2)"
    )
    assert guesser.guess("float_value", "float", "5,3") == (
        "pyfloat(left_digits=2, right_digits=3)"
    )


def test_guess_size_from_raw_type_suffix(guesser: TypeGuesser):
    """Should read the size from the raw type when none is given."""
    assert guesser.guess("list_price", "numeric(10,2)") == (
        "pyfloat(left_digits=8, right_digits=2)"
    )
    assert guesser.guess("country", "char(3)") == "country_code(representation='alpha-3')"
    assert guesser.guess("list_price", "numeric(10,2)", "6,1") == (
        "pyfloat(left_digits=5, right_digits=1)"
    )


def test_guess_zero_scale_decimal_as_integer(guesser: TypeGuesser):
    """Should guess whole numbers for decimals without a scale."""
    assert guesser.guess("decimal_value", "decimal", "10,0") == "random_number(digits=10)"
    assert guesser.guess("float_value", "float") == "random_number()"


def test_guess_date_time_by_type(guesser: TypeGuesser):
    """Should guess dates, datetimes and times from the type."""
    assert guesser.guess("done_at", "datetime") == "date_time()"
    assert guesser.guess("done_at", "timestamp with time zone") == "date_time()"
    assert guesser.guess("birthdate", "date") == "date()"
    assert guesser.guess("closing_at", "time") == "time()"


def test_guess_text_by_type(guesser: TypeGuesser):
    """Should guess paragraphs for text columns."""
    assert guesser.guess("body", "text") == "paragraph()"


@pytest.mark.parametrize(
    "name",
    ["user_id", "owner_id", "token_id", "title_id", "email_id", "URL_ID"],
)
def test_guess_id_suffix_is_always_integer(guesser: TypeGuesser, name: str):
    """Should guess integers for *_id columns regardless of type and size."""
    assert guesser.guess(name, "character varying", 255) == "random_int()"
    assert guesser.guess(name, "uuid") == "random_int()"
    assert guesser.guess(name, "no-op", "10,2") == "random_int()"


def test_guess_token_suffix(guesser: TypeGuesser):
    """Should guess hash-like strings for *_token columns."""
    assert guesser.guess("remember_token", "character varying", 100) == "sha1()"
    assert guesser.guess("api_token", "text") == "sha1()"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("name", "name()"),
        ("first_name", "first_name()"),
        ("firstname", "first_name()"),
        ("last_name", "last_name()"),
        ("lastname", "last_name()"),
        ("username", "user_name()"),
        ("user_name", "user_name()"),
        ("login", "user_name()"),
        ("email", "email()"),
        ("emailaddress", "email()"),
        ("email_address", "email()"),
        ("phonenumber", "phone_number()"),
        ("phone_number", "phone_number()"),
        ("phone", "phone_number()"),
        ("telephone", "phone_number()"),
        ("telnumber", "phone_number()"),
        ("address", "address()"),
        ("city", "city()"),
        ("town", "city()"),
        ("street_address", "street_address()"),
        ("streetAddress", "street_address()"),
        ("postcode", "postcode()"),
        ("zipcode", "postcode()"),
        ("zip_code", "postcode()"),
        ("postalcode", "postcode()"),
        ("postal_code", "postcode()"),
        ("postalCode", "postcode()"),
        ("state", "state()"),
        ("locale", "locale()"),
        ("currency", "currency_code()"),
        ("currencycode", "currency_code()"),
        ("currency_code", "currency_code()"),
        ("website", "url()"),
        ("url", "url()"),
        ("company", "company()"),
        ("companyname", "company()"),
        ("company_name", "company()"),
        ("employer", "company()"),
        ("password", "password()"),
        ("latitude", "latitude()"),
        ("longitude", "longitude()"),
    ],
)
def test_guess_by_name(guesser: TypeGuesser, name: str, expected: str):
    """Should guess from the column name, whatever the type."""
    assert guesser.guess(name, "no-op") == expected


def test_guess_county_for_us_locale(guesser: TypeGuesser):
    """Should template a US county from a city name."""
    assert guesser.guess("county", "no-op") == "parse('{{city}} County')"
    assert guesser.guess("province", "no-op") == "parse('{{city}} County')"


def test_guess_state_for_other_locales(catalog: NativeGeneratorCatalog):
    """Should guess states for provinces and counties outside the US."""
    guesser = TypeGuesser(locale="de_DE", catalog=catalog)

    assert guesser.guess("county", "no-op") == "state()"
    assert guesser.guess("province", "no-op") == "state()"


def test_guess_country_by_size(guesser: TypeGuesser):
    """Should pick the country representation from the column size."""
    assert guesser.guess("country", "no-op", 2) == "country_code()"
    assert guesser.guess("country", "no-op", 3) == "country_code(representation='alpha-3')"
    assert guesser.guess("country", "no-op", 5) == "locale()"
    assert guesser.guess("country", "no-op", 6) == "locale()"
    assert guesser.guess("country", "no-op") == "country()"
    assert guesser.guess("country", "no-op", 255) == "country()"


def test_guess_country_by_string_size(guesser: TypeGuesser):
    """Should accept sizes reported as strings."""
    assert guesser.guess("country", "character varying", "2") == "country_code()"


def test_guess_title_by_size(guesser: TypeGuesser):
    """Should guess short titles up to size 10 and sentences above."""
    assert guesser.guess("title", "no-op", 10) == "prefix()"
    assert guesser.guess("title", "no-op") == "prefix()"
    assert guesser.guess("title", "text", 15) == "sentence()"


def test_guess_url_suffix(guesser: TypeGuesser):
    """Should guess URLs for *_url columns without a Faker method."""
    assert guesser.guess("twitter_url", "no-op") == "url()"
    assert guesser.guess("endpoint_url", "no-op") == "url()"


def test_guess_faker_method_before_url_suffix(guesser: TypeGuesser):
    """Should prefer an exact Faker method over the *_url rule."""
    assert guesser.guess("image_url", "no-op") == "image_url()"


def test_guess_name_rule_before_faker_method(guesser: TypeGuesser):
    """Should prefer name rules over Faker methods of the same name."""
    # Faker's currency() returns a tuple, the rule picks the code
    assert guesser.guess("currency", "character", 3) == "currency_code()"


def test_guess_default(guesser: TypeGuesser):
    """Should fall back to a single word."""
    assert guesser.guess("not_guessable", "no-op") == "word()"
    assert guesser.guess("spare_field", "character varying", 255) == "word()"


def test_guess_is_case_insensitive(guesser: TypeGuesser):
    """Should ignore the case of column names."""
    assert guesser.guess("EmailAddress", "no-op") == "email()"
    assert guesser.guess("Website", "no-op") == "url()"


def test_default_catalog_is_built_for_locale():
    """Should build its own catalog when none is given."""
    guesser = TypeGuesser(locale="en_US")

    assert guesser.catalog.built is False
    assert guesser.guess("first_name", "no-op") == "first_name()"
    assert guesser.catalog.built is True
