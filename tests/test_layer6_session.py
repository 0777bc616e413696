from __future__ import annotations

import unittest

from contracts import NotFound, RiskLevel
from orchestrator import BriefSession
from tests.fixtures import sample_repository


class TestLayer6Session(unittest.TestCase):
    def setUp(self) -> None:
        self.generated = []
        self.session = BriefSession(sample_repository(), on_generated=self.generated.append)

    def test_no_brief_until_country_selected(self) -> None:
        self.assertIsNone(self.session.update(has_drones=True))
        self.assertIsNone(self.session.brief)
        self.assertEqual([], self.generated)

    def test_each_change_recomputes(self) -> None:
        first = self.session.update(country_code="US")
        self.assertEqual(5, len(first.document_checklist))

        second = self.session.update(has_drones=True, has_minors=True)
        self.assertEqual(11, len(second.document_checklist))
        self.assertEqual(RiskLevel.MEDIUM, second.risk_assessment.overall_risk)
        self.assertIsNot(first, second)
        self.assertEqual([first, second], self.generated)

    def test_unchanged_fields_do_not_recompute(self) -> None:
        brief = self.session.update(country_code="US")
        self.assertIs(brief, self.session.update(country_code="US"))
        self.assertEqual(1, len(self.generated))

    def test_changing_country_clears_city(self) -> None:
        la = self.session.update(country_code="US", city_name="Los Angeles")
        self.assertIsNotNone(la.city_specific)

        dubai = self.session.update(country_code="AE")
        self.assertIsNone(self.session.request["city_name"])
        self.assertIsNone(dubai.location.city)
        self.assertEqual("AE", dubai.location.country_code)

    def test_errors_propagate_and_keep_previous_brief(self) -> None:
        brief = self.session.update(country_code="US")
        with self.assertRaises(NotFound):
            self.session.update(country_code="XX")
        self.assertIs(brief, self.session.brief)
        self.assertEqual(1, len(self.generated))

    def test_repeating_a_failed_update_fails_again(self) -> None:
        self.session.update(country_code="US", city_name="Los Angeles")
        for _ in range(2):
            with self.assertRaises(NotFound):
                self.session.update(country_code="XX")
        self.assertEqual("US", self.session.request["country_code"])
        self.assertEqual("Los Angeles", self.session.request["city_name"])
        self.assertEqual("US", self.session.brief.location.country_code)
        self.assertEqual(1, len(self.generated))

    def test_case_only_country_change_keeps_city(self) -> None:
        self.session.update(country_code="US", city_name="Los Angeles")
        brief = self.session.update(country_code="us")
        self.assertEqual("Los Angeles", self.session.request["city_name"])
        self.assertIsNotNone(brief.city_specific)
        self.assertEqual("US", brief.location.country_code)

    def test_unknown_field_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            self.session.update(has_pyrotechnics=True)

    def test_clearing_country_clears_brief(self) -> None:
        self.session.update(country_code="US")
        self.assertIsNone(self.session.update(country_code=""))
        self.assertIsNone(self.session.brief)


if __name__ == "__main__":
    unittest.main()
