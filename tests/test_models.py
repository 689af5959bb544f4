"""
Unit tests for the player, formation and theme models.
"""
import unittest

from lineup_pitch.models import (
    FormationPreset, PitchPosition, Player, PositionTag, TeamTheme, resolve_team_theme
)
from lineup_pitch.services import FormationAnalyzer
from lineup_pitch.utils.names import get_last_name, short_label


class TestPlayer(unittest.TestCase):
    """Test Player model."""

    def test_display_name_prefers_local_name(self) -> None:
        player = Player(local_name="Tomiyasu", international_name="Takehiro Tomiyasu")
        self.assertEqual(player.display_name, "Tomiyasu")

    def test_display_name_falls_back_to_international(self) -> None:
        player = Player(international_name="Bukayo Saka")
        self.assertEqual(player.display_name, "Bukayo Saka")

    def test_display_name_unknown(self) -> None:
        self.assertEqual(Player().display_name, "Unknown")
        self.assertEqual(Player(local_name="  ", international_name="").display_name, "Unknown")

    def test_identity_comparison(self) -> None:
        a = Player(international_name="Same", position="CB")
        b = Player(international_name="Same", position="CB")
        self.assertNotEqual(a, b)
        self.assertEqual(a, a)
        self.assertEqual(len({a, b}), 2)

    def test_players_are_read_only(self) -> None:
        player = Player(international_name="Fixed")
        with self.assertRaises(AttributeError):
            player.position = "GK"

    def test_goalkeeper_detection(self) -> None:
        self.assertTrue(Player(position="GK").is_goalkeeper)
        self.assertTrue(Player(position=" gk ").is_goalkeeper)
        self.assertFalse(Player(position="CB").is_goalkeeper)
        self.assertFalse(Player().is_goalkeeper)

    def test_position_tag(self) -> None:
        self.assertEqual(Player(position="lcb").position_tag, PositionTag.LEFT_CENTER_BACK)
        self.assertIsNone(Player(position="SW").position_tag)
        self.assertIsNone(Player().position_tag)

    def test_from_dict_fixture_keys(self) -> None:
        data = {"jp": "サカ", "intl": "Bukayo Saka", "pos": "RW", "num": 7, "playerId": "p7"}
        player = Player.from_dict(data)

        self.assertEqual(player.local_name, "サカ")
        self.assertEqual(player.international_name, "Bukayo Saka")
        self.assertEqual(player.position, "RW")
        self.assertEqual(player.number, 7)
        self.assertEqual(player.to_dict(), data)

    def test_from_dict_attribute_names(self) -> None:
        player = Player.from_dict({"international_name": "Declan Rice", "position": "DM"})
        self.assertEqual(player.international_name, "Declan Rice")
        self.assertEqual(player.position, "DM")
        self.assertEqual(player.local_name, "")

    def test_from_dict_coerces_numeric_fields(self) -> None:
        player = Player.from_dict({"jp": 9, "intl": 10, "pos": 7})

        self.assertEqual(player.local_name, "9")
        self.assertEqual(player.international_name, "10")
        self.assertEqual(player.position, "7")
        self.assertEqual(player.display_name, "9")
        self.assertFalse(player.is_goalkeeper)
        self.assertIsNone(player.position_tag)

    def test_non_string_position_is_tolerated(self) -> None:
        player = Player(international_name="Loose", position=3)
        self.assertFalse(player.is_goalkeeper)
        self.assertEqual(player.position_code, "3")

    def test_numeric_positions_are_laid_out(self) -> None:
        keeper = Player.from_dict({"jp": "K", "pos": "GK"})
        roster = [keeper] + [Player.from_dict({"intl": f"P{i}", "pos": 7}) for i in range(10)]

        data = FormationAnalyzer().analyze(roster, "4-3-3")

        self.assertFalse(data.is_fallback)
        self.assertIs(data.lines[-1][0], keeper)
        self.assertEqual(len(data.positions), 11)

    def test_from_dict_rejects_non_objects(self) -> None:
        with self.assertRaises(ValueError):
            Player.from_dict(["not", "a", "dict"])


class TestPitchPosition(unittest.TestCase):
    """Test PitchPosition conversions."""

    def test_as_percent(self) -> None:
        left, top = PitchPosition(x=50, y=70).as_percent()
        self.assertEqual(left, 50)
        self.assertEqual(top, 50)

    def test_to_dict(self) -> None:
        self.assertEqual(PitchPosition(x=4, y=136).to_dict(), {"x": 4, "y": 136})


class TestFormationPreset(unittest.TestCase):
    """Test formation presets."""

    def test_presets(self) -> None:
        values = [preset.value for preset in FormationPreset]
        self.assertIn("4-3-3", values)
        self.assertIn("4-1-4-1", values)
        self.assertEqual(len(values), 8)

    def test_describe(self) -> None:
        self.assertIn("wide play", FormationPreset.describe("4-3-3"))
        self.assertEqual(FormationPreset.describe("2-3-5"), "Custom formation")


class TestTeamTheme(unittest.TestCase):
    """Test theme resolution."""

    def test_known_teams(self) -> None:
        self.assertEqual(resolve_team_theme("ARS").css_class, "team-ars")
        self.assertEqual(resolve_team_theme("Arsenal").css_class, "team-ars")
        self.assertEqual(resolve_team_theme("leeds").css_class, "team-lee")

    def test_unknown_team_uses_default(self) -> None:
        self.assertEqual(resolve_team_theme("xyz"), TeamTheme.default())
        self.assertEqual(resolve_team_theme(""), TeamTheme.default())


class TestNames(unittest.TestCase):
    """Test marker label helpers."""

    def test_get_last_name(self) -> None:
        self.assertEqual(get_last_name("Bukayo Saka"), "Saka")
        self.assertEqual(get_last_name("Rodri"), "Rodri")
        self.assertEqual(get_last_name(None), "Unknown")

    def test_short_label(self) -> None:
        self.assertEqual(short_label("冨安 健洋", "Takehiro Tomiyasu"), "冨安")
        self.assertEqual(short_label("ガブリエル・マガリャンイス", ""), "ガブリエル")
        self.assertEqual(short_label("", "Martin Odegaard"), "Odegaard")
        self.assertEqual(short_label(None, None), "Unknown")


if __name__ == "__main__":
    unittest.main()
