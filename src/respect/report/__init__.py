from respect.report.renderers import diffs_to_payload, render_markdown, render_text, write_reports

__all__ = ["diffs_to_payload", "render_markdown", "render_text", "write_reports"]
