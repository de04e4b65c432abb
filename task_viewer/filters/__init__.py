from task_viewer.filters.search import apply_filters, filter_by_status, filter_by_title

__all__ = ["apply_filters", "filter_by_status", "filter_by_title"]
