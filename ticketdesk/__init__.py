"""A console support-ticket desk with the simple containers it is built on."""

__version__ = "0.1.0"
__all__ = ["adapters", "app", "extra", "heap", "linked_list", "maps"]