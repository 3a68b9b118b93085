"""Tests for the campaign sheet parser."""

import pandas as pd
import pytest

from clientreach.domain.models import CampaignEntry
from clientreach.infrastructure.importer import CampaignSheetParser


def parse_entries(path):
    entries, _ = CampaignSheetParser().parse(path)
    return entries


def write_csv(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestCampaignSheetParser:

    def test_parses_csv_and_detects_columns(self, tmp_path):
        sheet = write_csv(
            tmp_path / "campaign.csv",
            "Phone Number,Message Text\n+62 811-1000,Hello there\n0062 822 2000,Second message\n",
        )

        entries, columns = CampaignSheetParser().parse(sheet)

        assert columns == {"phone": "phone number", "message": "message text"}
        assert entries == [
            CampaignEntry(phone_number="628111000", message="Hello there"),
            CampaignEntry(phone_number="628222000", message="Second message"),
        ]

    def test_skips_rows_missing_phone_or_message(self, tmp_path):
        sheet = write_csv(
            tmp_path / "campaign.csv",
            "whatsapp,body\n628111,Hi\n,No phone\n628333,\n",
        )
        assert parse_entries(sheet) == [CampaignEntry("628111", "Hi")]

    def test_keeps_leading_zero_as_text(self, tmp_path):
        sheet = write_csv(tmp_path / "campaign.csv", "mobile,message\n08123,Hi\n")
        assert parse_entries(sheet)[0].phone_number == "08123"

    def test_parses_xlsx(self, tmp_path):
        path = tmp_path / "campaign.xlsx"
        pd.DataFrame({"Phone": ["628111"], "Message": ["Hello"]}).to_excel(path, index=False)

        assert parse_entries(path) == [CampaignEntry("628111", "Hello")]

    def test_missing_message_column(self, tmp_path):
        sheet = write_csv(tmp_path / "campaign.csv", "phone,name\n628111,Ana\n")
        with pytest.raises(ValueError, match="Message"):
            parse_entries(sheet)

    def test_missing_phone_column(self, tmp_path):
        sheet = write_csv(tmp_path / "campaign.csv", "name,message\nAna,Hi\n")
        with pytest.raises(ValueError, match="Phone"):
            parse_entries(sheet)

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "campaign.txt"
        path.write_text("phone,message\n1,x\n")
        with pytest.raises(ValueError, match="Unsupported"):
            parse_entries(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_entries(tmp_path / "nope.csv")
