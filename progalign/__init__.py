"""Progressive multiple sequence alignment of DNA sequences, with refinement and an exact three-sequence aligner."""

__version__ = "0.1.0"