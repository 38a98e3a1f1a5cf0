import unittest
from unittest.mock import patch

import requests

from duellog.client.models import DeckRef, Match
from duellog.web.app import app, data_manager


SEASON_MATCHES = [
    Match(id="1", date="2026-01-03", play_order="先攻", result="W",
          my_deck=DeckRef("閃刀姬"), opp_deck=DeckRef("天盃龍")),
    Match(id="2", date="2026-01-03T21:00:00Z", play_order="後攻", result="L",
          my_deck=DeckRef("閃刀姬"), opp_deck=DeckRef("粹香")),
    Match(id="3", date="2026-01-20", play_order="後攻", result="W",
          my_deck=DeckRef("烙印"), opp_deck=DeckRef("天盃龍")),
]


class TestWebApp(unittest.TestCase):
    def setUp(self):
        app.config["TESTING"] = True
        self.client = app.test_client()

    def test_seasons(self):
        res = self.client.get("/api/seasons?count=3")
        data = res.get_json()
        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(data["seasons"]), 3)
        self.assertEqual(data["seasons"][0]["code"], data["current"])
        self.assertTrue(data["seasons"][0]["label"].startswith(data["current"]))

    def test_seasons_count_past_season_zero(self):
        res = self.client.get("/api/seasons?count=1000")
        data = res.get_json()
        self.assertEqual(res.status_code, 200)
        current_number = int(data["current"][1:])
        self.assertEqual(len(data["seasons"]), current_number + 1)
        self.assertEqual(data["seasons"][-1]["code"], "S0")
        self.assertEqual(data["seasons"][-1]["start"], "2021-12-01")

    def test_far_future_season_stats(self):
        with patch.object(data_manager, "get_matches", return_value=[]):
            res = self.client.get("/api/seasons/S100000/stats")
        data = res.get_json()
        self.assertEqual(res.status_code, 200)
        self.assertEqual(data["season"]["start"], "10355-04-01")
        self.assertEqual(len(data["stats"]["daily"]), 30)

    def test_season_stats(self):
        with patch.object(data_manager, "get_matches", return_value=SEASON_MATCHES) as mock_get:
            res = self.client.get("/api/seasons/s49/stats")
            mock_get.assert_called_with("S49")

        data = res.get_json()
        self.assertEqual(res.status_code, 200)
        self.assertEqual(data["season"]["start"], "2026-01-01")
        stats = data["stats"]
        self.assertEqual(stats["total"], 3)
        self.assertEqual(len(stats["daily"]), 31)
        self.assertEqual(stats["daily"][2]["games"], 2)
        self.assertIsNone(stats["daily"][0]["winRate"])
        self.assertEqual(stats["oppDecks"][0]["name"], "天盃龍")

    def test_season_stats_filters(self):
        with patch.object(data_manager, "get_matches", return_value=SEASON_MATCHES):
            res = self.client.get(
                "/api/seasons/S49/stats",
                query_string={"myDeckMain": "閃刀姬", "dateTo": "2026-01-10"},
            )

        data = res.get_json()
        self.assertEqual(data["matchCount"], 2)
        self.assertEqual(data["stats"]["winRate"], 50)
        # daily range stays the full season
        self.assertEqual(len(data["stats"]["daily"]), 31)

    def test_invalid_season(self):
        res = self.client.get("/api/seasons/BAD/stats")
        self.assertEqual(res.status_code, 404)
        self.assertIn("error", res.get_json())

    def test_history_stats_sparse_daily(self):
        with patch.object(data_manager, "get_matches", return_value=SEASON_MATCHES):
            res = self.client.get("/api/history/stats")

        daily = res.get_json()["stats"]["daily"]
        self.assertEqual([d["date"] for d in daily], ["2026-01-03", "2026-01-20"])

    def test_api_failure_returns_502(self):
        with patch.object(data_manager, "get_matches", side_effect=requests.ConnectionError("refused")):
            res = self.client.get("/api/history/stats")
        self.assertEqual(res.status_code, 502)

    def test_deck_themes(self):
        with patch.object(data_manager, "get_deck_theme_map", return_value={"閃刀姬": "暗"}):
            res = self.client.get("/api/deck-themes")
        self.assertEqual(res.get_json(), {"themes": {"閃刀姬": "暗"}})


if __name__ == "__main__":
    unittest.main()
