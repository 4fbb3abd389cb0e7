"""Output formatting."""

from nbprate.adapters.formatting.formatter import format_summary, summary_lines

__all__ = ["format_summary", "summary_lines"]
