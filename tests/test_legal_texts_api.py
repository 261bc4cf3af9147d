import unittest

from fastapi.testclient import TestClient

from dalil.main import app

BASE = "/api/v1/legal-texts"
JORA = "Journal Officiel"


class TestLegalTextsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.client.__enter__()  # run lifespan: create tables + seed catalogue

    @classmethod
    def tearDownClass(cls):
        cls.client.__exit__(None, None, None)

    def _list(self, params):
        resp = self.client.get(BASE, params=params)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

    def test_default_order_is_newest_first(self):
        body = self._list({"source": JORA})
        self.assertEqual(body["meta"]["total"], 7)
        self.assertEqual(body["meta"]["page"], 1)
        self.assertEqual(body["data"][0]["reference"], "20-123")
        self.assertIn("publicationDate", body["data"][0])

    def test_repeated_type_filter(self):
        body = self._list([("type", "Loi"), ("type", "Ordonnance"), ("source", JORA)])
        self.assertEqual(body["meta"]["total"], 6)
        self.assertTrue(all(t["type"] in ("Loi", "Ordonnance") for t in body["data"]))

    def test_out_of_range_page_is_clamped(self):
        body = self._list({"type": "Loi", "limit": 3, "page": 99})
        self.assertEqual(body["meta"], {"total": 4, "page": 2, "limit": 3, "pages": 2})
        self.assertEqual(len(body["data"]), 1)

    def test_malformed_pagination_values_fall_back(self):
        body = self._list({"type": "Loi", "limit": "abc", "page": "x"})
        self.assertEqual(body["meta"]["limit"], 10)
        self.assertEqual(body["meta"]["page"], 1)
        self.assertEqual(self._list({"type": "Loi", "limit": 0})["meta"]["limit"], 1)
        self.assertEqual(self._list({"type": "Loi", "limit": 5000})["meta"]["limit"], 100)

    def test_sort_by_title_ascending(self):
        body = self._list({"type": "Ordonnance", "sort": "title", "order": "asc"})
        titles = [t["title"] for t in body["data"]]
        self.assertEqual(len(titles), 2)
        self.assertTrue(titles[0].startswith("Ordonnance n° 66-156"))

    def test_sort_by_popularity_descending(self):
        body = self._list({"source": JORA, "sort": "popularity", "order": "desc", "limit": 2})
        self.assertEqual([t["reference"] for t in body["data"]], ["75-58", "66-156"])

    def test_date_range_filter(self):
        body = self._list({"source": JORA, "dateFrom": "2000-01-01", "dateTo": "2019-12-31"})
        self.assertEqual(sorted(t["reference"] for t in body["data"]), ["08-09", "18-05"])

    def test_inverted_date_range_is_rejected(self):
        resp = self.client.get(BASE, params={"dateFrom": "2020-01-01", "dateTo": "2019-01-01"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["error"]["code"], "VALIDATION_ERROR")

    def test_unknown_sort_field_is_rejected(self):
        resp = self.client.get(BASE, params={"sort": "views"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["error"]["code"], "VALIDATION_ERROR")

    def test_free_text_query_folds_accents(self):
        body = self._list({"q": "ELECTRONIQUE"})
        self.assertEqual([t["reference"] for t in body["data"]], ["18-05"])
        # description and extra fields are searched too
        body = self._list({"q": "successions"})
        self.assertEqual([t["reference"] for t in body["data"]], ["84-11"])

    def test_insertion_method_manual_includes_unset(self):
        body = self._list({"insertionMethod": "manual", "source": JORA})
        self.assertEqual(sorted(t["reference"] for t in body["data"]), ["08-09", "18-05", "66-156", "75-58"])

    def test_facets(self):
        resp = self.client.get(f"{BASE}/facets")
        self.assertEqual(resp.status_code, 200)
        facets = resp.json()["data"]
        for value in ("Loi", "Ordonnance", "Décret", "Arrêté"):
            self.assertIn(value, facets["types"])
        self.assertEqual(len(facets["types"]), len(set(facets["types"])))
        self.assertIn("manual", facets["insertionMethods"])
        self.assertIn(JORA, facets["sources"])

    def test_get_by_id(self):
        first = self._list({"type": "Décret"})["data"][0]
        resp = self.client.get(f"{BASE}/{first['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["title"], first["title"])

    def test_get_missing_returns_404_envelope(self):
        resp = self.client.get(f"{BASE}/does-not-exist")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"]["code"], "NOT_FOUND")

    def test_create_then_filter(self):
        payload = {
            "title": "Circulaire n° 01 relative à la dématérialisation des procédures",
            "type": "Circulaire",
            "status": "En vigueur",
            "publicationDate": "2023-02-01",
            "source": "Ministère de la Justice",
            "insertionMethod": "ocr",
            "popularity": 12,
            "extra": {"category": "Administratif"},
        }
        resp = self.client.post(BASE, json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        created = resp.json()["data"]
        self.assertEqual(created["type"], "Circulaire")

        body = self._list({"type": "Circulaire", "q": "dematerialisation"})
        self.assertIn(created["id"], [t["id"] for t in body["data"]])

    def test_create_requires_title(self):
        resp = self.client.post(BASE, json={"type": "Loi"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["error"]["code"], "VALIDATION_ERROR")


if __name__ == "__main__":
    unittest.main()
