from chartui_layout.adapters.normalize import categorized_series, ordered_series

__all__ = ["categorized_series", "ordered_series"]
