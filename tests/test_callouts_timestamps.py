from reporting.callouts import location_only_callout, parse_callouts
from reporting.timestamps import format_epoch


class TestParseCallouts:

    def test_multiple_numbered_callouts(self):
        raw = (
            "1. Location Code: U78DA.ND0.WZS004K-P0-C15, Priority: H, PN: 02WG676, "
            "SN: YF30UF8A900F, CCIN: 2E3A\n"
            "2. Priority: M, Procedure: BMC0001\n"
        )
        section = parse_callouts(raw)

        assert section["Callout Count"] == 2
        first, second = section["Callouts"]
        assert first == {
            "Location Code": "U78DA.ND0.WZS004K-P0-C15",
            "Priority": "H",
            "Part Number": "02WG676",
            "Serial Number": "YF30UF8A900F",
            "CCIN": "2E3A",
        }
        assert second == {"Priority": "M", "Procedure": "BMC0001"}

    def test_empty_text(self):
        assert parse_callouts("") == {"Callout Count": 0, "Callouts": []}
        assert parse_callouts(None) == {"Callout Count": 0, "Callouts": []}

    def test_lines_without_fields_are_ignored(self):
        assert parse_callouts("loc1\n\n   \n")["Callout Count"] == 0

    def test_location_only_callout(self):
        assert location_only_callout("P0-C15") == {
            "Callout Count": 1,
            "Callouts": {"Location Code": "P0-C15"},
        }
        assert location_only_callout(None) == {"Callout Count": 1, "Callouts": {}}


class TestFormatEpoch:

    def test_epoch_start(self):
        assert format_epoch(0) == "01/01/1970 00:00:00"

    def test_milliseconds_truncate(self):
        assert format_epoch(1999) == "01/01/1970 00:00:01"

    def test_known_instant(self):
        assert format_epoch(1_700_000_000_000) == "11/14/2023 22:13:20"

    def test_out_of_range_falls_back_to_epoch(self):
        assert format_epoch(2**64 - 1) == "01/01/1970 00:00:00"
