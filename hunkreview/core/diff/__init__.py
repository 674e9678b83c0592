from hunkreview.core.diff.parser import DEV_NULL, parse_diff

__all__ = ["DEV_NULL", "parse_diff"]
