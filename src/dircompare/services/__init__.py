from .table_renderer import TableRenderer

__all__ = ["TableRenderer"]
