"""Document rendering and storage for stripeledger."""

from stripeledger.documents.pdf import render_charge_receipt, render_payout_receipt
from stripeledger.documents.storage import document_dir, save_document

__all__ = ["render_charge_receipt", "render_payout_receipt", "document_dir", "save_document"]
