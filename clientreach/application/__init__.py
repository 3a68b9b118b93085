from .workflows import MarketingWorkflow

__all__ = ["MarketingWorkflow"]
