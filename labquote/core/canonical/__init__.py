from .entities import QuoteForm, SelectionItem

__all__ = ["QuoteForm", "SelectionItem"]
