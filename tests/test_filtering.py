import unittest
from datetime import date, datetime

from dalil.schemas.listing import DateRange, FilterCriteria, Record
from dalil.services.filtering import filter_records, matches_query


def _rec(i, **kw):
    kw.setdefault("title", f"Texte {i}")
    return Record(id=str(i), **kw)


class TestFilterRecords(unittest.TestCase):
    def test_no_criteria_keeps_everything_in_order(self):
        records = [_rec(i) for i in range(5)]
        self.assertEqual(filter_records(records, FilterCriteria()), records)
        self.assertEqual(filter_records(records, None), records)

    def test_status_filter_counts_active_records(self):
        statuses = ["active", "archived", "draft", "active", "draft",
                    "archived", "active", "draft", "archived", "draft"]
        records = [_rec(i, status=s) for i, s in enumerate(statuses)]
        result = filter_records(records, FilterCriteria(statuses=["active"]))
        self.assertEqual(len(result), 3)
        self.assertTrue(all(r.status == "active" for r in result))

    def test_every_active_constraint_must_match(self):
        records = [
            _rec(1, type="Loi", status="En vigueur", source="JORA", author="APN"),
            _rec(2, type="Loi", status="Abrogé", source="JORA", author="APN"),
            _rec(3, type="Décret", status="En vigueur", source="JORA", author="APN"),
            _rec(4, type="Loi", status="En vigueur", source="Ministère", author="APN"),
        ]
        criteria = FilterCriteria(types=["Loi"], statuses=["En vigueur"], sources=["JORA"])
        self.assertEqual([r.id for r in filter_records(records, criteria)], ["1"])

    def test_missing_source_or_author_never_matches_active_criterion(self):
        records = [_rec(1, source="JORA", author="APN"), _rec(2), _rec(3, source="", author="")]
        self.assertEqual([r.id for r in filter_records(records, FilterCriteria(sources=["JORA"]))], ["1"])
        self.assertEqual([r.id for r in filter_records(records, FilterCriteria(authors=["APN"]))], ["1"])

    def test_missing_insertion_method_counts_as_manual(self):
        records = [_rec(1, insertion_method="ocr"), _rec(2), _rec(3, insertion_method="manual")]
        result = filter_records(records, FilterCriteria(insertion_methods=["manual"]))
        self.assertEqual([r.id for r in result], ["2", "3"])

    def test_date_range_is_inclusive_and_drops_unparsable_dates(self):
        records = [
            _rec(1, date="2020-01-01"),
            _rec(2, date=date(2021, 12, 31)),
            _rec(3, date="31/12/2021"),
            _rec(4),
            _rec(5, date=datetime(2022, 1, 1, 10, 30)),
            _rec(6, date="2021-06-15T08:00:00Z"),
        ]
        rng = DateRange(start=date(2020, 1, 1), end=date(2021, 12, 31))
        result = filter_records(records, FilterCriteria(date_range=rng))
        self.assertEqual([r.id for r in result], ["1", "2", "6"])

    def test_open_ended_date_range(self):
        records = [_rec(1, date="1975-09-26"), _rec(2, date="2018-05-10")]
        since = FilterCriteria(date_range=DateRange(start=date(2000, 1, 1)))
        until = FilterCriteria(date_range=DateRange(end=date(2000, 1, 1)))
        self.assertEqual([r.id for r in filter_records(records, since)], ["2"])
        self.assertEqual([r.id for r in filter_records(records, until)], ["1"])

    def test_inverted_date_range_matches_nothing(self):
        records = [_rec(1, date="2020-06-01")]
        rng = DateRange(start=date(2021, 1, 1), end=date(2020, 1, 1))
        self.assertEqual(filter_records(records, FilterCriteria(date_range=rng)), [])

    def test_result_never_larger_than_input(self):
        records = [_rec(i, type="Loi" if i % 2 else "Décret") for i in range(9)]
        for criteria in (FilterCriteria(), FilterCriteria(types=["Loi"]), FilterCriteria(types=["Arrêté"])):
            self.assertLessEqual(len(filter_records(records, criteria)), len(records))

    def test_input_is_not_mutated(self):
        records = [_rec(i, status="active" if i else "draft") for i in range(3)]
        snapshot = list(records)
        filter_records(records, FilterCriteria(statuses=["active"]))
        self.assertEqual(records, snapshot)


class TestQuery(unittest.TestCase):
    def test_query_ignores_case_and_accents(self):
        record = _rec(1, title="Loi relative au commerce électronique")
        self.assertTrue(matches_query(record, "ELECTRONIQUE"))
        self.assertTrue(matches_query(record, "Électronique"))
        self.assertFalse(matches_query(record, "pénal"))

    def test_query_searches_extra_string_fields(self):
        record = _rec(1, extra={"description": "Code civil algérien", "views": 12})
        self.assertTrue(matches_query(record, "algerien"))
        self.assertFalse(matches_query(record, "12"))

    def test_blank_query_is_unconstrained(self):
        records = [_rec(1), _rec(2)]
        self.assertEqual(len(filter_records(records, FilterCriteria(query="   "))), 2)


if __name__ == "__main__":
    unittest.main()
