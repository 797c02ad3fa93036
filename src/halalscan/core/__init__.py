"""Core models, rule tables, classifier and pipeline."""
