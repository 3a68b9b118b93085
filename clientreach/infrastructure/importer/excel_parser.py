"""
Campaign Sheet Parser - Excel/CSV Import
========================================

Parses an Excel or CSV file into a campaign batch, auto-detecting the
phone and message columns. Supports .xlsx, .xls, and .csv formats.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd

from ...domain.models import CampaignEntry

logger = logging.getLogger(__name__)

# Common column name variations for auto-detection
PHONE_PATTERNS = ['phone', 'mobile', 'cell', 'telephone', 'number', 'phone_number', 'phonenumber', 'whatsapp']
MESSAGE_PATTERNS = ['message', 'text', 'body', 'content', 'msg']

SUPPORTED_EXTENSIONS = ['.xlsx', '.xls', '.csv']


class CampaignSheetParser:
    """
    Excel/CSV parser with auto-detection of campaign columns.

    Usage:
        parser = CampaignSheetParser()
        entries, columns = parser.parse("campaign.xlsx")
        # entries: [CampaignEntry(phone_number="923001234567", message="Hi!"), ...]
    """

    def __init__(self):
        self.detected_columns: Dict[str, Optional[str]] = {}

    def parse(self, file_path: Union[str, Path], sheet_name: Optional[str] = None) -> Tuple[List[CampaignEntry], Dict[str, Optional[str]]]:
        """
        Parse Excel/CSV file and return the campaign batch.

        Args:
            file_path: Path to the file (.xlsx, .xls, .csv)
            sheet_name: Optional sheet name for Excel files

        Returns:
            Tuple of (entries, detected column mapping)
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        ext = path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file format: {ext}. Use .xlsx, .xls, or .csv")

        # Phone numbers must stay text, or leading zeros and '+' are lost
        if ext == '.csv':
            df = pd.read_csv(path, dtype=str)
        else:
            df = pd.read_excel(path, sheet_name=sheet_name or 0, dtype=str)

        return self.parse_frame(df), self.detected_columns

    def parse_frame(self, df: pd.DataFrame) -> List[CampaignEntry]:
        """Extract entries from an already loaded DataFrame."""
        df = df.copy()
        df.columns = df.columns.astype(str).str.strip().str.lower()

        phone_col = self._find_column(df.columns, PHONE_PATTERNS)
        message_col = self._find_column(df.columns, MESSAGE_PATTERNS)

        self.detected_columns = {
            'phone': phone_col,
            'message': message_col,
        }

        logger.info(f"Detected columns: {self.detected_columns}")

        if not phone_col:
            raise ValueError("Could not detect 'Phone' column. Please ensure your file has a column with phone numbers.")

        if not message_col:
            raise ValueError("Could not detect 'Message' column. Please ensure your file has a column with message text.")

        entries = []
        for _, row in df.iterrows():
            phone = self._clean_phone(self._cell(row.get(phone_col)))
            message = self._cell(row.get(message_col)).strip()

            # Skip empty rows
            if not phone or not message:
                continue

            entries.append(CampaignEntry(phone_number=phone, message=message))

        logger.info(f"Parsed {len(entries)} campaign entries")
        return entries

    def _cell(self, value) -> str:
        if value is None or pd.isna(value):
            return ''
        return str(value)

    def _find_column(self, columns: pd.Index, patterns: List[str]) -> Optional[str]:
        """Find column matching any of the patterns."""
        for col in columns:
            col_lower = col.lower().strip()
            for pattern in patterns:
                if pattern in col_lower:
                    return col
        return None

    def _clean_phone(self, phone: str) -> str:
        """
        Clean and normalize phone number.
        Removes spaces, dashes, + signs, and the 00 international prefix.
        """
        if not phone or phone.lower() == 'nan':
            return ''

        cleaned = re.sub(r'[^\d+]', '', phone.strip())

        if cleaned.startswith('+'):
            cleaned = cleaned[1:]

        if cleaned.startswith('00'):
            cleaned = cleaned[2:]

        return cleaned
