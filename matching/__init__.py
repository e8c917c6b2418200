"""
Salt-based matching between the branded and generic catalogs
"""
from matching.normalizer import normalize
from matching.salt import extract_salt, clean_contents
from matching.classifier import detect_type
from matching.similarity import levenshtein_distance, similarity
from matching.resolver import resolve, MatchResult, FUZZY_MATCH_THRESHOLD
from matching.cross_reference import cross_reference, calculate_savings, Counterpart
from matching.ingestion import ingest_rows, IngestionSummary

__all__ = [
    "normalize",
    "extract_salt",
    "clean_contents",
    "detect_type",
    "levenshtein_distance",
    "similarity",
    "resolve",
    "MatchResult",
    "FUZZY_MATCH_THRESHOLD",
    "cross_reference",
    "calculate_savings",
    "Counterpart",
    "ingest_rows",
    "IngestionSummary",
]
