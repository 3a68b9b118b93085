from .excel_parser import CampaignSheetParser

__all__ = ["CampaignSheetParser"]
