from pathlib import Path
import sys
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from crossrelay.bridge import Bridge, BridgeMap, TelegramBridgeSettings, ValidationError


def _telegram(**overrides):
    raw = {
        "chatId": -100123,
        "sendUsernames": True,
        "relayCommands": True,
        "relayJoinMessages": True,
        "relayLeaveMessages": True,
        "crossDeleteOnDiscord": True,
    }
    raw.update(overrides)
    return raw


def _discord(**overrides):
    raw = {
        "channelId": "111",
        "sendUsernames": True,
        "relayJoinMessages": True,
        "relayLeaveMessages": True,
        "crossDeleteOnTelegram": True,
    }
    raw.update(overrides)
    return raw


def _bridge(name="general", direction="both", discord=None, telegram=None):
    return {
        "name": name,
        "direction": direction,
        "discord": discord if discord is not None else _discord(),
        "telegram": telegram if telegram is not None else _telegram(),
    }


class TelegramBridgeSettingsTests(unittest.TestCase):
    def test_builds_settings_from_valid_record(self):
        settings = TelegramBridgeSettings.from_mapping(_telegram(relayCommands=False))

        self.assertEqual(settings.chat_id, -100123)
        self.assertIs(settings.relay_commands, False)
        self.assertIs(settings.cross_delete_on_discord, True)

    def test_rejects_non_boolean_flags(self):
        with self.assertRaises(ValidationError) as ctx:
            TelegramBridgeSettings.from_mapping(_telegram(crossDeleteOnDiscord="true"))

        self.assertEqual(
            str(ctx.exception), "`settings.crossDeleteOnDiscord` must be a boolean"
        )

    def test_rejects_non_mapping_input(self):
        with self.assertRaises(ValidationError) as ctx:
            TelegramBridgeSettings.validate([])

        self.assertEqual(str(ctx.exception), "`settings` must be an object")


class BridgeTests(unittest.TestCase):
    def test_builds_bridge_with_both_halves(self):
        bridge = Bridge.from_mapping(_bridge())

        self.assertEqual(bridge.name, "general")
        self.assertEqual(bridge.discord.channel_id, "111")
        self.assertEqual(bridge.telegram.chat_id, -100123)
        self.assertTrue(bridge.relays_to_telegram)
        self.assertTrue(bridge.relays_to_discord)

    def test_direction_controls_relay_sides(self):
        d2t = Bridge.from_mapping(_bridge(direction="d2t"))
        t2d = Bridge.from_mapping(_bridge(direction="t2d"))

        self.assertTrue(d2t.relays_to_telegram)
        self.assertFalse(d2t.relays_to_discord)
        self.assertFalse(t2d.relays_to_telegram)
        self.assertTrue(t2d.relays_to_discord)

    def test_rejects_unknown_direction(self):
        with self.assertRaises(ValidationError) as ctx:
            Bridge.validate(_bridge(direction="sideways"))

        self.assertEqual(
            str(ctx.exception), "`settings.direction` must be one of: both, d2t, t2d"
        )

    def test_rejects_empty_name(self):
        with self.assertRaises(ValidationError) as ctx:
            Bridge.validate(_bridge(name="  "))

        self.assertIn("settings.name", str(ctx.exception))

    def test_nested_errors_carry_key_path(self):
        with self.assertRaises(ValidationError) as ctx:
            Bridge.from_mapping(_bridge(discord=_discord(sendUsernames="yes")))

        self.assertEqual(
            str(ctx.exception), "`settings.discord.sendUsernames` must be a boolean"
        )

    def test_missing_platform_section_is_reported(self):
        raw = _bridge()
        del raw["telegram"]

        with self.assertRaises(ValidationError) as ctx:
            Bridge.validate(raw)

        self.assertEqual(str(ctx.exception), "`settings.telegram` must be an object")


class BridgeMapTests(unittest.TestCase):
    def setUp(self):
        self.general = Bridge.from_mapping(_bridge())
        self.memes = Bridge.from_mapping(
            _bridge(name="memes", discord=_discord(channelId="222"))
        )
        self.bridges = BridgeMap([self.general, self.memes])

    def test_looks_up_by_discord_channel_in_any_id_form(self):
        self.assertEqual(self.bridges.from_discord_channel("222"), (self.memes,))
        self.assertEqual(self.bridges.from_discord_channel(111), (self.general,))
        self.assertEqual(self.bridges.from_discord_channel(999), ())

    def test_looks_up_all_bridges_for_shared_telegram_chat(self):
        self.assertEqual(
            self.bridges.from_telegram_chat(-100123), (self.general, self.memes)
        )

    def test_bridges_without_ids_are_not_indexed(self):
        discord = _discord()
        del discord["channelId"]
        telegram = _telegram()
        del telegram["chatId"]
        orphan = Bridge.from_mapping(_bridge(name="orphan", discord=discord, telegram=telegram))
        bridges = BridgeMap([orphan])

        self.assertEqual(bridges.from_discord_channel("None"), ())
        self.assertEqual(bridges.from_discord_channel(None), ())
        self.assertEqual(bridges.from_telegram_chat("None"), ())
        self.assertEqual(len(bridges), 1)

    def test_iterates_in_config_order(self):
        self.assertEqual(len(self.bridges), 2)
        self.assertEqual([bridge.name for bridge in self.bridges], ["general", "memes"])


if __name__ == "__main__":
    unittest.main()
