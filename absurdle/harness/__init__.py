from .core import new_game, is_finished, share_summary, run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["new_game", "is_finished", "share_summary", "run_case", "run_batch",
           "write_csv", "write_manifest"]
