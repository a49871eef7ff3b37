"""VeriNews: heuristic text-credibility scoring with a staged analysis pipeline."""

__version__ = "0.1.0"
