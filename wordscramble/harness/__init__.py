from .core import run_case, run_batch, select_roots, summarize
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "select_roots", "summarize", "write_csv", "write_manifest"]
