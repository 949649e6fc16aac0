from __future__ import annotations

from .corpus import FrameCase, generate_corpus_files, generate_frame_cases

__all__ = ["FrameCase", "generate_corpus_files", "generate_frame_cases"]
