import unittest
from datetime import date

from dalil.schemas.listing import Record, SortDirection, SortField, SortSpec
from dalil.services.sorting import sort_records


def _rec(i, **kw):
    kw.setdefault("title", f"Texte {i}")
    return Record(id=str(i), **kw)


def _titles(records):
    return [r.title for r in records]


class TestSortRecords(unittest.TestCase):
    def test_french_title_order(self):
        records = [_rec(1, title="Zèbre"), _rec(2, title="Abeille"), _rec(3, title="Éléphant")]
        result = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.ASC))
        self.assertEqual(_titles(result), ["Abeille", "Éléphant", "Zèbre"])

    def test_descending_reverses_order(self):
        records = [_rec(1, title="Zèbre"), _rec(2, title="Abeille"), _rec(3, title="Éléphant")]
        result = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.DESC))
        self.assertEqual(_titles(result), ["Zèbre", "Éléphant", "Abeille"])

    def test_ties_keep_input_order_in_both_directions(self):
        records = [_rec(1, title="a"), _rec(2, title="B"), _rec(3, title="b"), _rec(4, title="A")]
        asc = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.ASC))
        desc = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.DESC))
        self.assertEqual([r.id for r in asc], ["1", "4", "2", "3"])
        self.assertEqual([r.id for r in desc], ["2", "3", "1", "4"])

    def test_case_and_accent_variants_compare_equal(self):
        records = [_rec(1, status="Modifié"), _rec(2, status="modifie"), _rec(3, status="MODIFIE")]
        result = sort_records(records, SortSpec(field=SortField.STATUS, direction=SortDirection.ASC))
        self.assertEqual([r.id for r in result], ["1", "2", "3"])

    def test_ligatures_sort_as_their_expansion(self):
        records = [_rec(1, title="Zèbre"), _rec(2, title="Œuvres complètes"), _rec(3, title="Ordonnance")]
        result = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.ASC))
        self.assertEqual(_titles(result), ["Œuvres complètes", "Ordonnance", "Zèbre"])

    def test_typographic_apostrophe_sorts_before_letters(self):
        records = [_rec(1, title="Loi de finances"), _rec(2, title="Loi d’orientation")]
        result = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.ASC))
        self.assertEqual(_titles(result), ["Loi d’orientation", "Loi de finances"])

    def test_typographic_and_straight_apostrophes_compare_equal(self):
        records = [_rec(1, title="Loi d’orientation"), _rec(2, title="loi d'orientation")]
        result = sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.DESC))
        self.assertEqual([r.id for r in result], ["1", "2"])

    def test_date_order_puts_unparsable_dates_first_when_ascending(self):
        records = [
            _rec(1, date="2018-05-10"),
            _rec(2, date="pas une date"),
            _rec(3, date=date(1975, 9, 26)),
            _rec(4),
        ]
        asc = sort_records(records, SortSpec(field=SortField.DATE, direction=SortDirection.ASC))
        desc = sort_records(records, SortSpec(field=SortField.DATE, direction=SortDirection.DESC))
        self.assertEqual([r.id for r in asc], ["2", "4", "3", "1"])
        self.assertEqual([r.id for r in desc], ["1", "3", "2", "4"])

    def test_popularity_treats_missing_as_zero(self):
        records = [_rec(1, popularity=10), _rec(2), _rec(3, popularity=2.5)]
        result = sort_records(records, SortSpec(field=SortField.POPULARITY, direction=SortDirection.DESC))
        self.assertEqual([r.id for r in result], ["1", "3", "2"])

    def test_type_sort_handles_missing_values(self):
        records = [_rec(1, type="Ordonnance"), _rec(2), _rec(3, type="Arrêté")]
        result = sort_records(records, SortSpec(field=SortField.TYPE, direction=SortDirection.ASC))
        self.assertEqual([r.id for r in result], ["2", "3", "1"])

    def test_default_spec_is_newest_first(self):
        records = [_rec(1, date="2001-01-01"), _rec(2, date="2020-01-01")]
        self.assertEqual([r.id for r in sort_records(records)], ["2", "1"])

    def test_sort_is_a_permutation_and_idempotent(self):
        records = [
            _rec(i, title=t, popularity=p)
            for i, (t, p) in enumerate([("Décret", 3), ("arrêté", 1), ("Loi", 3), ("décret", 2), ("Arrêté", 1)])
        ]
        for field in SortField:
            for direction in SortDirection:
                spec = SortSpec(field=field, direction=direction)
                once = sort_records(records, spec)
                self.assertEqual(sorted(r.id for r in once), sorted(r.id for r in records))
                self.assertEqual(sort_records(once, spec), once)

    def test_input_is_not_mutated(self):
        records = [_rec(1, title="b"), _rec(2, title="a")]
        snapshot = list(records)
        sort_records(records, SortSpec(field=SortField.TITLE, direction=SortDirection.ASC))
        self.assertEqual(records, snapshot)


if __name__ == "__main__":
    unittest.main()
