from .core import run_case, run_batch, summarize, pretty_summary

__all__ = ["run_case", "run_batch", "summarize", "pretty_summary"]
