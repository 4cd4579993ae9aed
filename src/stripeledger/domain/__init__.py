"""Domain layer for stripeledger application."""

from stripeledger.domain.classifier import LedgerClassifier
from stripeledger.domain.report import ReportService
from stripeledger.domain.documents import DocumentService

__all__ = [
    "LedgerClassifier",
    "ReportService",
    "DocumentService",
]
