import re
from datetime import datetime, timedelta, timezone

import pytest

from policy_docs.domain.errors import InvalidInputError
from policy_docs.services.filename_deriver import TimestampFilenameDeriver

NOW = datetime(2024, 5, 1, 13, 45, 30, 123456, tzinfo=timezone.utc)
BASE_NAME = re.compile(r"^[a-z0-9_]+$")


def test_derive_example_policy():
    deriver = TimestampFilenameDeriver()
    assert deriver.derive("Acme Corp!", "Remote Work", NOW) == "acme_corp__remote_work_2024_05_01t13_45_30z"


@pytest.mark.parametrize(
    "company, title",
    [
        ("Acme Corp!", "Remote Work"),
        ("ÜBER GmbH", "Política de Privacidade"),
        ("a/b\\c", "../../etc/passwd"),
        ("", ""),
        ("   ", "\t\n"),
        ("Company 123", "Title: v2.0 (draft)"),
        ("\u017fafe \u212aelvin", "\u0130stanbul"),
    ],
)
def test_derive_only_uses_safe_alphabet(company, title):
    got = TimestampFilenameDeriver().derive(company, title, NOW)
    assert BASE_NAME.match(got)


def test_derive_stable_within_same_second():
    deriver = TimestampFilenameDeriver()
    a = deriver.derive("Acme", "Leave", NOW.replace(microsecond=0))
    b = deriver.derive("Acme", "Leave", NOW.replace(microsecond=999999))
    assert a == b


def test_derive_differs_across_seconds():
    deriver = TimestampFilenameDeriver()
    a = deriver.derive("Acme", "Leave", NOW)
    b = deriver.derive("Acme", "Leave", NOW + timedelta(seconds=1))
    assert a != b


def test_timestamp_is_normalized_to_utc():
    deriver = TimestampFilenameDeriver()
    local = NOW.astimezone(timezone(timedelta(hours=-3)))
    assert deriver.derive("Acme", "Leave", local) == deriver.derive("Acme", "Leave", NOW)


def test_each_unsafe_character_becomes_one_underscore():
    got = TimestampFilenameDeriver().derive("A  B", "C--D", NOW)
    assert got.startswith("a__b_c__d_")


def test_long_names_are_not_truncated():
    company = "x" * 500
    got = TimestampFilenameDeriver().derive(company, "t", NOW)
    assert got.startswith(company + "_t_")


@pytest.mark.parametrize(
    "company, title",
    [
        (None, "Remote Work"),
        ("Acme", None),
        (42, "Remote Work"),
        ("Acme", ["Remote", "Work"]),
    ],
)
def test_derive_rejects_missing_or_non_text(company, title):
    with pytest.raises(InvalidInputError):
        TimestampFilenameDeriver().derive(company, title, NOW)
