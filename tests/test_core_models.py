import unittest

from core.models import PasswordEntry, SelfDestructSettings, make_payload, parse_cooldown
from core.search import filter_entries
from core.validation import validate_entry_payload


def _entry(i, title, username, url=None):
    return PasswordEntry(id=str(i), user_id="u1", title=title, username=username, password="x", url=url)


class TestModels(unittest.TestCase):
    def test_from_row_tolerates_missing_optionals(self):
        e = PasswordEntry.from_row(
            {"id": 7, "user_id": "u", "title": "T", "username": "me", "password": "pw"}
        )
        self.assertEqual(e.id, "7")
        self.assertIsNone(e.url)
        self.assertIsNone(e.category_id)

    def test_payload_blanks_become_none(self):
        p = make_payload("T", "me", "pw", "", "")
        self.assertEqual(
            p, {"title": "T", "username": "me", "password": "pw", "url": None, "notes": None}
        )
        e = PasswordEntry(id="1", user_id="u", title="T", username="me", password="pw", url="https://a")
        self.assertEqual(e.to_payload()["url"], "https://a")

    def test_parse_cooldown(self):
        self.assertEqual(parse_cooldown("30s"), 30)
        self.assertEqual(parse_cooldown("45"), 45)
        self.assertEqual(parse_cooldown(10), 10)
        self.assertEqual(parse_cooldown("soon"), 30)
        self.assertEqual(parse_cooldown(None, default=5), 5)

    def test_self_destruct_settings_defaults(self):
        s = SelfDestructSettings.from_row({"user_id": "u", "cooldown_period": "15s"})
        self.assertEqual(s.cooldown_seconds, 15)
        self.assertTrue(s.require_2fa)
        self.assertTrue(s.notify_email)


class TestSearch(unittest.TestCase):
    def setUp(self):
        self.entries = [
            _entry(1, "Amazon", "shopper", "https://www.amazon.com"),
            _entry(2, "Work mail", "alice@corp.example"),
            _entry(3, "GitHub", "octo", "https://github.com"),
        ]

    def test_blank_query_returns_all_in_order(self):
        self.assertEqual(filter_entries(self.entries, ""), self.entries)
        self.assertEqual(filter_entries(self.entries, "   "), self.entries)

    def test_matches_title_username_or_url(self):
        self.assertEqual([e.id for e in filter_entries(self.entries, "AMAZON")], ["1"])
        self.assertEqual([e.id for e in filter_entries(self.entries, "alice")], ["2"])
        self.assertEqual([e.id for e in filter_entries(self.entries, "github.com")], ["3"])

    def test_missing_url_does_not_match_or_crash(self):
        self.assertEqual(filter_entries(self.entries, "https"), [self.entries[0], self.entries[2]])


class TestValidation(unittest.TestCase):
    def test_valid_payload(self):
        ok, errs = validate_entry_payload(make_payload("T", "me", "pw"))
        self.assertTrue(ok)
        self.assertEqual(errs, [])

    def test_missing_and_empty_fields_reported(self):
        ok, errs = validate_entry_payload({"title": "", "username": "me"})
        self.assertFalse(ok)
        self.assertTrue(any(e.startswith("(root)") and "password" in e for e in errs))
        self.assertTrue(any(e.startswith("title:") for e in errs))

    def test_unknown_keys_rejected(self):
        ok, errs = validate_entry_payload({**make_payload("T", "me", "pw"), "user_id": "x"})
        self.assertFalse(ok)


if __name__ == "__main__":
    unittest.main()
