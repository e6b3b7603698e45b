from .core import parse_target, abjad_message, found_message, run_search
from .io import write_csv, write_manifest, report_dict

__all__ = ["parse_target", "abjad_message", "found_message", "run_search",
           "write_csv", "write_manifest", "report_dict"]
